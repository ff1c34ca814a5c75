"""Library Coordinator - Orchestrates the searchable library list."""

import logging

from PySide6.QtCore import QObject, Slot

from literate.coordinators.book_detail_coordinator import BookDetailCoordinator
from literate.core import Book
from literate.services import BookStore
from literate.ui import LibraryScreen, MainWindow

logger = logging.getLogger(__name__)


class LibraryCoordinator(QObject):
    """Manages the library list and its filter state.

    Responsibilities:
    - Track search text and the favorites-only flag
    - Re-render the filtered list whenever the store changes
    - Forward favorite/read/delete actions to the store
    - Add sample books
    - Open the detail panel for a selected book
    """

    def __init__(
        self,
        library_screen: LibraryScreen,
        book_store: BookStore,
        detail_coordinator: BookDetailCoordinator,
        main_window: MainWindow,
    ):
        super().__init__()

        if library_screen is None:
            raise ValueError("LibraryScreen must not be None")
        if book_store is None:
            raise ValueError("BookStore must not be None")
        if detail_coordinator is None:
            raise ValueError("BookDetailCoordinator must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.library_screen = library_screen
        self.book_store = book_store
        self.detail_coordinator = detail_coordinator
        self.main_window = main_window

        # Filter state
        self.search_text: str = ""
        self.favorites_only: bool = False

        # Wire library screen signals
        self.library_screen.search_changed.connect(self.handle_search_changed)
        self.library_screen.book_selected.connect(self.handle_book_selected)
        self.library_screen.favorite_toggled.connect(self.handle_favorite_toggled)
        self.library_screen.read_toggled.connect(self.handle_read_toggled)
        self.library_screen.book_deleted.connect(self.handle_book_deleted)

        # Wire window menu signals
        self.main_window.favorites_only_toggled.connect(self.handle_favorites_only_toggled)
        self.main_window.add_book_requested.connect(self.handle_add_book_requested)

        self.book_store.books_changed.connect(self.refresh)

    def show_library(self):
        """Display the library tab with the current filter applied."""
        self.refresh()
        self.main_window.display_library_view()

    def visible_books(self) -> list[Book]:
        """Books passing the current search and favorites filter."""
        return self.book_store.filtered(self.search_text, self.favorites_only)

    @Slot()
    def refresh(self):
        self.library_screen.display_books(self.visible_books())

    @Slot(str)
    def handle_search_changed(self, text: str):
        self.search_text = text
        self.refresh()

    @Slot(bool)
    def handle_favorites_only_toggled(self, enabled: bool):
        self.favorites_only = enabled
        self.refresh()

    @Slot(str)
    def handle_book_selected(self, book_id: str):
        self.detail_coordinator.show_book(book_id)

    @Slot(str)
    def handle_favorite_toggled(self, book_id: str):
        self.book_store.toggle_favorite(book_id)

    @Slot(str)
    def handle_read_toggled(self, book_id: str):
        self.book_store.toggle_read(book_id)

    @Slot(str)
    def handle_book_deleted(self, book_id: str):
        self.book_store.delete(book_id)

    @Slot()
    def handle_add_book_requested(self):
        book = self.book_store.add()
        logger.debug("Sample book %s added from menu", book.id)
