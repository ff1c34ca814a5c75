"""Tests for filter_books - search and favorites filtering."""

import pytest

from literate.core import Book, filter_books, matches_query


@pytest.fixture
def books():
    return [
        Book(title="Clean Code", author="Robert C. Martin", is_favorite=True),
        Book(title="Design Patterns", author="Erich Gamma et al."),
        Book(title="The Clean Coder", author="Robert C. Martin"),
        Book(title="Refactoring", author="Martin Fowler", is_favorite=True),
    ]


def titles(books):
    return [b.title for b in books]


def test_no_filters_returns_everything_in_order(books):
    assert filter_books(books) == books


def test_empty_and_none_query_do_not_filter(books):
    assert filter_books(books, query="") == books
    assert filter_books(books, query=None) == books


def test_query_matches_title_case_insensitively(books):
    assert titles(filter_books(books, query="CLEAN")) == ["Clean Code", "The Clean Coder"]


def test_query_matches_author(books):
    assert titles(filter_books(books, query="fowler")) == ["Refactoring"]


def test_query_matches_title_or_author(books):
    result = filter_books(books, query="martin")
    assert titles(result) == ["Clean Code", "The Clean Coder", "Refactoring"]


def test_query_is_plain_substring_not_tokenized(books):
    assert filter_books(books, query="code martin") == []
    assert titles(filter_books(books, query="n co")) == ["Clean Code", "The Clean Coder"]


def test_favorites_only(books):
    assert titles(filter_books(books, favorites_only=True)) == ["Clean Code", "Refactoring"]


def test_favorites_and_query_combined(books):
    result = filter_books(books, query="clean", favorites_only=True)
    assert titles(result) == ["Clean Code"]


def test_filters_commute(books):
    query_first = filter_books(filter_books(books, query="martin"), favorites_only=True)
    favorites_first = filter_books(filter_books(books, favorites_only=True), query="martin")
    assert query_first == favorites_first


def test_filtering_is_idempotent(books):
    once = filter_books(books, query="e", favorites_only=True)
    twice = filter_books(once, query="e", favorites_only=True)
    assert once == twice


def test_filtering_preserves_relative_order():
    a = Book(title="Alpha", author="Zed")
    b = Book(title="Beta", author="Yan")
    c = Book(title="Gamma", author="Zara")

    assert filter_books([a, b, c], query="z") == [a, c]


def test_no_match_returns_empty_list(books):
    assert filter_books(books, query="knitting") == []


def test_matches_query_with_unicode_case():
    book = Book(title="Straße der Bücher", author="Anon")
    assert matches_query(book, "STRASSE")
    assert matches_query(book, "bücher")
