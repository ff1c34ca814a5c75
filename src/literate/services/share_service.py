"""Share Service - Hands a book's share text to the system clipboard."""

import logging

from PySide6.QtGui import QGuiApplication

from literate.core import Book, share_text

logger = logging.getLogger(__name__)


class ShareService:
    """Desktop stand-in for a share sheet: copies the share text."""

    def share(self, book: Book) -> str:
        """
        Share a book.

        Args:
            book: Book to share.

        Returns:
            The exact text that was shared.
        """
        text = share_text(book)
        clipboard = QGuiApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(text)
        logger.info("Shared %r", text)
        return text
