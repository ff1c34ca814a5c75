"""
Literate - A small desktop browser for a personal book library.

This package provides:
- A searchable library list with favorite/read flags
- A detail panel with sharing
- A map of book locations framed around the collection
"""

__version__ = "0.1.0"

# Make key components available at package level
from literate.core import Book, BookLocation, MapRegion, MapSpan, filter_books, region_that_fits

__all__ = [
    "Book",
    "BookLocation",
    "MapRegion",
    "MapSpan",
    "filter_books",
    "region_that_fits",
]
