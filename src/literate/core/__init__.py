"""Domain layer - Pure entities and functions over the book collection."""

from .book import Book, BookLocation, new_book_id
from .book_filter import filter_books, matches_query
from .region import (
    DEFAULT_REGION,
    MIN_SPAN_DELTA,
    SPAN_PADDING_FACTOR,
    MapRegion,
    MapSpan,
    region_that_fits,
)
from .sample_catalog import new_sample_book, sample_books
from .share import share_text

__all__ = [
    "Book",
    "BookLocation",
    "new_book_id",
    "filter_books",
    "matches_query",
    "MapRegion",
    "MapSpan",
    "DEFAULT_REGION",
    "MIN_SPAN_DELTA",
    "SPAN_PADDING_FACTOR",
    "region_that_fits",
    "sample_books",
    "new_sample_book",
    "share_text",
]
