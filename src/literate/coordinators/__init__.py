"""Coordinators - Orchestration layer connecting UI with the book store."""

from .book_detail_coordinator import BookDetailCoordinator
from .home_coordinator import HomeCoordinator
from .library_coordinator import LibraryCoordinator

__all__ = [
    "BookDetailCoordinator",
    "HomeCoordinator",
    "LibraryCoordinator",
]
