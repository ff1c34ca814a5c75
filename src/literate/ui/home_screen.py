"""Home screen - Listings strip above the map of book locations."""

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from literate.core import Book
from literate.services import CoverResolver
from literate.ui.cover_view import CoverView


class ListingTile(QWidget):
    """Cover and title of one listing in the horizontal strip."""

    clicked = Signal(str)

    def __init__(self, book: Book, cover_resolver: Optional[CoverResolver] = None, parent=None):
        super().__init__(parent)
        self.book = book

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.cover_view = CoverView(90, 120)
        if cover_resolver is not None:
            self.cover_view.set_cover(cover_resolver.resolve_cover_asset(book.cover_image_name))
        layout.addWidget(self.cover_view)

        self.title_label = QLabel(book.title)
        self.title_label.setWordWrap(True)
        self.title_label.setFixedWidth(90)
        self.title_label.setStyleSheet("QLabel { font-size: 11px; }")
        layout.addWidget(self.title_label)

        self.setCursor(Qt.PointingHandCursor)

    def mousePressEvent(self, event):
        self.clicked.emit(self.book.id)
        super().mousePressEvent(event)


class HomeScreen(QWidget):
    """Top strip of listings with the map filling the rest.

    Signals:
        book_selected: Emitted with the id of a tapped listing.
    """

    book_selected = Signal(str)

    def __init__(self, map_canvas: QWidget, cover_resolver: Optional[CoverResolver] = None, parent=None):
        super().__init__(parent)
        self.map_canvas = map_canvas
        self._cover_resolver = cover_resolver
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        strip_scroll = QScrollArea()
        strip_scroll.setWidgetResizable(True)
        strip_scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        strip_scroll.setFixedHeight(190)

        self.strip_container = QWidget()
        self.strip_layout = QHBoxLayout(self.strip_container)
        self.strip_layout.setContentsMargins(12, 12, 12, 12)
        self.strip_layout.setSpacing(12)
        self.strip_layout.addStretch()
        strip_scroll.setWidget(self.strip_container)
        layout.addWidget(strip_scroll)

        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        layout.addWidget(divider)

        layout.addWidget(self.map_canvas, stretch=1)

    def display_listings(self, books: List[Book]):
        """Replace the strip with tiles for the given books."""
        for tile in self.tiles():
            self.strip_layout.removeWidget(tile)
            tile.hide()
            tile.deleteLater()

        for index, book in enumerate(books):
            tile = ListingTile(book, self._cover_resolver)
            tile.clicked.connect(self.book_selected.emit)
            self.strip_layout.insertWidget(index, tile)

    def tiles(self) -> List[ListingTile]:
        tiles = []
        for i in range(self.strip_layout.count()):
            widget = self.strip_layout.itemAt(i).widget()
            if isinstance(widget, ListingTile):
                tiles.append(widget)
        return tiles
