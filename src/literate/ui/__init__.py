"""UI layer - PySide6 presentation components."""

from .book_detail_panel import BookDetailPanel
from .cover_view import CoverView
from .home_screen import HomeScreen, ListingTile
from .library_screen import BookRow, LibraryScreen
from .main_window import MainWindow
from .map_canvas import MapCanvas

__all__ = [
    "MainWindow",
    "LibraryScreen",
    "BookRow",
    "HomeScreen",
    "ListingTile",
    "BookDetailPanel",
    "CoverView",
    "MapCanvas",
]
