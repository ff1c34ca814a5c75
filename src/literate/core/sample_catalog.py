"""Seed data shown on first launch."""

from typing import List

from .book import Book, BookLocation


def sample_books() -> List[Book]:
    """Return fresh copies of the seed catalog, each with a new id."""
    return [
        Book(
            title="The Swift Programming Language",
            author="Apple Inc.",
            description="A comprehensive guide to Swift, Apple's powerful and intuitive programming language.",
            cover_image_name="swift",
            location=BookLocation(latitude=37.3349, longitude=-122.0090),
        ),
        Book(
            title="Clean Code",
            author="Robert C. Martin",
            description="A handbook of agile software craftsmanship with principles, patterns, and best practices.",
            cover_image_name="clean-code",
            location=BookLocation(latitude=41.8781, longitude=-87.6298),
        ),
        Book(
            title="Design Patterns",
            author="Erich Gamma et al.",
            description="Elements of reusable object-oriented software with classic design patterns.",
            cover_image_name="design-patterns",
            location=BookLocation(latitude=47.6062, longitude=-122.3321),
        ),
        Book(
            title="The Pragmatic Programmer",
            author="Andrew Hunt & David Thomas",
            description="Journey to mastery with practical tips for effective software development.",
            cover_image_name="pragmatic-programmer",
            location=BookLocation(latitude=30.2672, longitude=-97.7431),
        ),
        Book(
            title="Introduction to Algorithms",
            author="Cormen, Leiserson, Rivest, Stein",
            description="Foundational algorithms and data structures with rigorous analysis.",
            cover_image_name="clrs",
            location=BookLocation(latitude=42.3601, longitude=-71.0942),
        ),
    ]


def new_sample_book() -> Book:
    """Placeholder record inserted by the "Add Sample Book" action."""
    return Book(
        title="New Book",
        author="Unknown Author",
        description="A newly added sample book for demonstration.",
    )
