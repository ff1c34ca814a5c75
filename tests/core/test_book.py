"""Tests for Book entity defaults, sample catalog and share text."""

from literate.core import Book, BookLocation, new_sample_book, sample_books, share_text


def test_book_defaults():
    book = Book(title="Title", author="Author")

    assert book.description == ""
    assert book.is_favorite is False
    assert book.is_read is False
    assert book.cover_image_name is None
    assert book.location is None
    assert book.has_location is False
    assert book.id


def test_books_get_unique_ids():
    ids = {Book(title="T", author="A").id for _ in range(50)}
    assert len(ids) == 50


def test_location_is_immutable_value():
    assert BookLocation(1.0, 2.0) == BookLocation(latitude=1.0, longitude=2.0)


def test_share_text_format():
    book = Book(title="Clean Code", author="Robert C. Martin")
    assert share_text(book) == "Clean Code by Robert C. Martin"


def test_sample_books_are_located_and_fresh():
    first = sample_books()
    second = sample_books()

    assert [b.title for b in first] == [
        "The Swift Programming Language",
        "Clean Code",
        "Design Patterns",
        "The Pragmatic Programmer",
        "Introduction to Algorithms",
    ]
    assert all(b.has_location for b in first)
    assert {b.id for b in first}.isdisjoint({b.id for b in second})


def test_new_sample_book():
    book = new_sample_book()

    assert book.title == "New Book"
    assert book.author == "Unknown Author"
    assert book.cover_image_name is None
    assert book.location is None
