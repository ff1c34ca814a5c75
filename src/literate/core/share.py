"""Plain-text export of a book for sharing."""

from .book import Book


def share_text(book: Book) -> str:
    """Format the single line handed to the sharing target."""
    return f"{book.title} by {book.author}"
