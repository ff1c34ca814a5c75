"""Book detail panel - Cover, metadata, flags and actions for one book."""

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from literate.core import Book
from literate.services import CoverResolver
from literate.ui.cover_view import CoverView


class BookDetailPanel(QWidget):
    """Shows a single book and exposes favorite/read/share actions.

    Signals:
        favorite_toggled: Emitted with the shown book's id.
        read_toggled: Emitted with the shown book's id.
        share_requested: Emitted with the shown book's id.
    """

    favorite_toggled = Signal(str)
    read_toggled = Signal(str)
    share_requested = Signal(str)

    def __init__(self, cover_resolver: Optional[CoverResolver] = None, parent=None):
        super().__init__(parent)
        self._cover_resolver = cover_resolver
        self.book: Optional[Book] = None
        self._setup_ui()
        self.clear()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.cover_view = CoverView(165, 220)
        layout.addWidget(self.cover_view, alignment=Qt.AlignHCenter)

        self.title_label = QLabel()
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("QLabel { font-size: 20px; font-weight: bold; }")
        layout.addWidget(self.title_label)

        self.author_label = QLabel()
        self.author_label.setStyleSheet("QLabel { color: #888; font-size: 15px; }")
        layout.addWidget(self.author_label)

        status_layout = QHBoxLayout()
        self.favorite_status_label = QLabel()
        self.read_status_label = QLabel()
        status_layout.addWidget(self.favorite_status_label)
        status_layout.addWidget(self.read_status_label)
        status_layout.addStretch()
        layout.addLayout(status_layout)

        description_header = QLabel("Description")
        description_header.setStyleSheet("QLabel { font-weight: bold; }")
        layout.addWidget(description_header)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.description_label.setStyleSheet("QLabel { color: #aaa; }")
        layout.addWidget(self.description_label)

        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        layout.addWidget(divider)

        button_layout = QHBoxLayout()
        self.favorite_button = QPushButton()
        self.favorite_button.clicked.connect(self._emit_for_current(self.favorite_toggled))
        self.read_button = QPushButton()
        self.read_button.clicked.connect(self._emit_for_current(self.read_toggled))
        self.share_button = QPushButton("Share")
        self.share_button.clicked.connect(self._emit_for_current(self.share_requested))
        button_layout.addWidget(self.favorite_button)
        button_layout.addWidget(self.read_button)
        button_layout.addWidget(self.share_button)
        layout.addLayout(button_layout)

        layout.addStretch()

    def show_book(self, book: Book):
        """Render the given book."""
        self.book = book
        cover = None
        if self._cover_resolver is not None:
            cover = self._cover_resolver.resolve_cover_asset(book.cover_image_name)
        self.cover_view.set_cover(cover)

        self.title_label.setText(book.title)
        self.author_label.setText(book.author)
        self.description_label.setText(book.description)

        self.favorite_status_label.setText("♥ Favorited" if book.is_favorite else "♡ Favorite")
        self.read_status_label.setText("✔ Read" if book.is_read else "○ Unread")
        self.favorite_button.setText("Unfavorite" if book.is_favorite else "Favorite")
        self.read_button.setText("Mark Unread" if book.is_read else "Mark Read")

        for button in (self.favorite_button, self.read_button, self.share_button):
            button.setEnabled(True)

    def clear(self):
        """Show the empty state when no book is selected."""
        self.book = None
        self.cover_view.set_cover(None)
        self.title_label.setText("No book selected")
        self.author_label.setText("")
        self.description_label.setText("")
        self.favorite_status_label.setText("")
        self.read_status_label.setText("")
        self.favorite_button.setText("Favorite")
        self.read_button.setText("Mark Read")
        for button in (self.favorite_button, self.read_button, self.share_button):
            button.setEnabled(False)

    def _emit_for_current(self, signal):
        def handler():
            if self.book is not None:
                signal.emit(self.book.id)
        return handler
