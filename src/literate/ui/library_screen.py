"""Library screen - Searchable list of books with quick actions."""

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from literate.core import Book
from literate.services import CoverResolver
from literate.ui.cover_view import CoverView


class BookRow(QWidget):
    """A single list row: cover, title/author with badges, action buttons.

    Signals:
        clicked: Emitted with the book id when the row body is clicked.
        favorite_toggled: Emitted with the book id.
        read_toggled: Emitted with the book id.
        delete_requested: Emitted with the book id.
    """

    clicked = Signal(str)
    favorite_toggled = Signal(str)
    read_toggled = Signal(str)
    delete_requested = Signal(str)

    def __init__(self, book: Book, cover_resolver: Optional[CoverResolver] = None, parent=None):
        super().__init__(parent)
        self.book = book
        self._cover_resolver = cover_resolver
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(12)

        self.cover_view = CoverView(48, 64)
        if self._cover_resolver is not None:
            self.cover_view.set_cover(
                self._cover_resolver.resolve_cover_asset(self.book.cover_image_name)
            )
        layout.addWidget(self.cover_view)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(4)

        title_text = self.book.title
        if self.book.is_favorite:
            title_text += "  ♥"
        if self.book.is_read:
            title_text += "  ✔"
        self.title_label = QLabel(title_text)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("QLabel { font-weight: bold; font-size: 14px; }")

        self.author_label = QLabel(self.book.author)
        self.author_label.setStyleSheet("QLabel { color: #888; }")

        text_layout.addWidget(self.title_label)
        text_layout.addWidget(self.author_label)
        layout.addLayout(text_layout, stretch=1)

        self.favorite_button = QPushButton("Unfavorite" if self.book.is_favorite else "Favorite")
        self.favorite_button.clicked.connect(lambda: self.favorite_toggled.emit(self.book.id))
        self.read_button = QPushButton("Mark Unread" if self.book.is_read else "Mark Read")
        self.read_button.clicked.connect(lambda: self.read_toggled.emit(self.book.id))
        self.delete_button = QPushButton("Delete")
        self.delete_button.clicked.connect(lambda: self.delete_requested.emit(self.book.id))

        for button in (self.favorite_button, self.read_button, self.delete_button):
            layout.addWidget(button)

        self.setCursor(Qt.PointingHandCursor)

    def mousePressEvent(self, event):
        self.clicked.emit(self.book.id)
        super().mousePressEvent(event)


class LibraryScreen(QWidget):
    """Library list with search field.

    Signals:
        search_changed: Emitted with the current search text.
        book_selected: Emitted with the id of a clicked book.
        favorite_toggled: Emitted with a book id.
        read_toggled: Emitted with a book id.
        book_deleted: Emitted with a book id after the user confirms.
    """

    search_changed = Signal(str)
    book_selected = Signal(str)
    favorite_toggled = Signal(str)
    read_toggled = Signal(str)
    book_deleted = Signal(str)

    def __init__(self, cover_resolver: Optional[CoverResolver] = None, parent=None):
        super().__init__(parent)
        self._cover_resolver = cover_resolver
        self._books: List[Book] = []
        self.confirm_deletes = True
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)

        title_label = QLabel("Library")
        title_label.setStyleSheet("""
            QLabel {
                font-size: 22px;
                font-weight: bold;
                padding-bottom: 6px;
            }
        """)
        main_layout.addWidget(title_label)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search title or author")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self.search_changed.emit)
        main_layout.addWidget(self.search_edit)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setStyleSheet("QScrollArea { border: none; }")

        self.list_container = QWidget()
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(4)
        self.list_layout.addStretch()

        scroll_area.setWidget(self.list_container)
        main_layout.addWidget(scroll_area)

        self.empty_label = QLabel("No books to show")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("QLabel { color: #888; font-size: 16px; padding: 40px; }")
        self.empty_label.hide()
        main_layout.addWidget(self.empty_label)

    def display_books(self, books: List[Book]):
        """Replace the list contents with the given books, in order."""
        self._books = list(books)
        self._clear_rows()

        if not self._books:
            self.empty_label.show()
            return

        self.empty_label.hide()
        for index, book in enumerate(self._books):
            row = BookRow(book, self._cover_resolver)
            row.clicked.connect(self.book_selected.emit)
            row.favorite_toggled.connect(self.favorite_toggled.emit)
            row.read_toggled.connect(self.read_toggled.emit)
            row.delete_requested.connect(self._on_delete_requested)
            # Keep the trailing stretch last
            self.list_layout.insertWidget(index, row)

    def rows(self) -> List[BookRow]:
        """Rows currently shown, top to bottom."""
        rows = []
        for i in range(self.list_layout.count()):
            widget = self.list_layout.itemAt(i).widget()
            if isinstance(widget, BookRow):
                rows.append(widget)
        return rows

    def search_text(self) -> str:
        return self.search_edit.text()

    def _clear_rows(self):
        for row in self.rows():
            self.list_layout.removeWidget(row)
            row.hide()
            row.deleteLater()

    def _on_delete_requested(self, book_id: str):
        """Confirm before emitting the delete signal."""
        if self.confirm_deletes:
            book_title = "this book"
            for book in self._books:
                if book.id == book_id:
                    book_title = f"'{book.title}'"
                    break

            reply = QMessageBox.question(
                self,
                "Delete Book",
                f"Remove {book_title} from your library?",
                QMessageBox.Yes | QMessageBox.No,
                QMessageBox.No,
            )
            if reply != QMessageBox.Yes:
                return

        self.book_deleted.emit(book_id)
