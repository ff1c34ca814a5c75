"""Search and favorites filtering over book collections."""

from typing import Iterable, List, Optional

from .book import Book


def matches_query(book: Book, query: Optional[str]) -> bool:
    """
    Check whether a book matches a free-text query.

    Rules:
    - Empty or None query matches every book
    - Otherwise the query must appear in the title or the author
    - Case-insensitive plain substring containment (no tokens, no fuzziness)

    Args:
        book: Book to test.
        query: Text typed into the search field.

    Returns:
        True when the book should be kept.
    """
    if not query:
        return True
    needle = query.casefold()
    return needle in book.title.casefold() or needle in book.author.casefold()


def filter_books(
    books: Iterable[Book],
    query: Optional[str] = "",
    favorites_only: bool = False,
) -> List[Book]:
    """Return the books matching the query and favorites flag, in source order."""
    return [
        book
        for book in books
        if (not favorites_only or book.is_favorite) and matches_query(book, query)
    ]
