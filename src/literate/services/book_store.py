"""Book Store - Observable in-memory collection of books."""

import logging
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional

from PySide6.QtCore import QObject, Signal

from literate.core import Book, MapRegion, filter_books, new_book_id, new_sample_book, region_that_fits

logger = logging.getLogger(__name__)


class BookStore(QObject):
    """Owns the ordered book collection and notifies views of changes.

    Every mutating operation looks the book up by id. A miss is a no-op:
    nothing changes, no signal fires, and the method returns False.

    Signals:
        books_changed: Emitted after any mutation.
        book_added: Emitted with the id of a newly inserted book.
        book_updated: Emitted with the id of a book whose flags changed.
        book_removed: Emitted with the id of a deleted book.
    """

    books_changed = Signal()
    book_added = Signal(str)
    book_updated = Signal(str)
    book_removed = Signal(str)

    def __init__(self, books: Optional[Iterable[Book]] = None):
        super().__init__()
        self._books: List[Book] = []
        for book in books or []:
            self._books.append(self._admit(book))

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __contains__(self, book_id: object) -> bool:
        return isinstance(book_id, str) and self._index_of(book_id) is not None

    def books(self) -> List[Book]:
        """Snapshot of the collection in display order."""
        return list(self._books)

    def get(self, book_id: str) -> Optional[Book]:
        """Return the book with the given id, or None."""
        index = self._index_of(book_id)
        return self._books[index] if index is not None else None

    def toggle_favorite(self, book_id: str) -> bool:
        """Flip the favorite flag. Returns False if the id is unknown."""
        book = self._lookup(book_id, "toggle_favorite")
        if book is None:
            return False
        book.is_favorite = not book.is_favorite
        logger.info("Book %s favorite=%s", book_id, book.is_favorite)
        self._notify_updated(book_id)
        return True

    def toggle_read(self, book_id: str) -> bool:
        """Flip the read flag. Returns False if the id is unknown."""
        book = self._lookup(book_id, "toggle_read")
        if book is None:
            return False
        book.is_read = not book.is_read
        logger.info("Book %s read=%s", book_id, book.is_read)
        self._notify_updated(book_id)
        return True

    def delete(self, book_id: str) -> bool:
        """Remove the book. Returns False if the id is unknown."""
        index = self._index_of(book_id)
        if index is None:
            logger.debug("delete: no book with id %s", book_id)
            return False
        removed = self._books.pop(index)
        logger.info("Deleted book %s (%s)", book_id, removed.title)
        self.book_removed.emit(book_id)
        self.books_changed.emit()
        return True

    def add(self, book: Optional[Book] = None) -> Book:
        """
        Insert a book at the front of the collection.

        Args:
            book: Book to insert. Defaults to a new sample book.

        Returns:
            The inserted book. A book object already held by the store is
            inserted as a copy with a fresh id; an empty or taken id is
            replaced with a fresh one.
        """
        book = self._admit(book if book is not None else new_sample_book())

        self._books.insert(0, book)
        logger.info("Added book %s (%s)", book.id, book.title)
        self.book_added.emit(book.id)
        self.books_changed.emit()
        return book

    def filtered(self, query: Optional[str] = "", favorites_only: bool = False) -> List[Book]:
        """Books matching the search text and favorites flag, in store order."""
        return filter_books(self._books, query=query, favorites_only=favorites_only)

    def region_that_fits(self) -> Optional[MapRegion]:
        """Padded map region around every located book, or None."""
        return region_that_fits(self._books)

    def _admit(self, book: Book) -> Book:
        """Return the object to store for book, never reusing a stored id."""
        if any(stored is book for stored in self._books):
            return replace(book, id=new_book_id())
        if not book.id or self._index_of(book.id) is not None:
            book.id = new_book_id()
        return book

    def _index_of(self, book_id: str) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def _lookup(self, book_id: str, operation: str) -> Optional[Book]:
        book = self.get(book_id)
        if book is None:
            logger.debug("%s: no book with id %s", operation, book_id)
        return book

    def _notify_updated(self, book_id: str) -> None:
        self.book_updated.emit(book_id)
        self.books_changed.emit()
