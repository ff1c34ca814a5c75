"""Book Detail Coordinator - Keeps the detail panel in sync with the store."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Slot

from literate.services import BookStore, ShareService
from literate.ui import BookDetailPanel, MainWindow

logger = logging.getLogger(__name__)


class BookDetailCoordinator(QObject):
    """Shows one book at a time and routes its actions to the store.

    Responsibilities:
    - Display the selected book
    - Forward favorite/read toggles to the store
    - Refresh when the shown book changes, clear it when it is deleted
    - Share the shown book
    """

    def __init__(
        self,
        detail_panel: BookDetailPanel,
        book_store: BookStore,
        share_service: ShareService,
        main_window: MainWindow,
    ):
        super().__init__()

        if detail_panel is None:
            raise ValueError("BookDetailPanel must not be None")
        if book_store is None:
            raise ValueError("BookStore must not be None")
        if share_service is None:
            raise ValueError("ShareService must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.detail_panel = detail_panel
        self.book_store = book_store
        self.share_service = share_service
        self.main_window = main_window

        self.current_book_id: Optional[str] = None

        self.detail_panel.favorite_toggled.connect(self.handle_favorite_toggled)
        self.detail_panel.read_toggled.connect(self.handle_read_toggled)
        self.detail_panel.share_requested.connect(self.handle_share_requested)

        self.book_store.book_updated.connect(self.handle_book_updated)
        self.book_store.book_removed.connect(self.handle_book_removed)

    def show_book(self, book_id: str) -> bool:
        """Display the book with the given id. Unknown ids leave the panel as is."""
        book = self.book_store.get(book_id)
        if book is None:
            logger.debug("show_book: no book with id %s", book_id)
            return False
        self.current_book_id = book_id
        self.detail_panel.show_book(book)
        return True

    @Slot(str)
    def handle_favorite_toggled(self, book_id: str):
        self.book_store.toggle_favorite(book_id)

    @Slot(str)
    def handle_read_toggled(self, book_id: str):
        self.book_store.toggle_read(book_id)

    @Slot(str)
    def handle_share_requested(self, book_id: str):
        """Share the book and tell the user what was copied."""
        book = self.book_store.get(book_id)
        if book is None:
            return
        text = self.share_service.share(book)
        self.main_window.show_info("Shared", f"Copied to clipboard:\n{text}")

    @Slot(str)
    def handle_book_updated(self, book_id: str):
        if book_id == self.current_book_id:
            self.show_book(book_id)

    @Slot(str)
    def handle_book_removed(self, book_id: str):
        if book_id == self.current_book_id:
            self.current_book_id = None
            self.detail_panel.clear()
