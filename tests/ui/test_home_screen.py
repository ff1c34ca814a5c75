"""Tests for HomeScreen listings strip."""

from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication, QWidget

from literate.core import Book
from literate.ui import HomeScreen


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_home_screen_hosts_map_widget():
    ensure_qt_app()
    map_widget = QWidget()

    screen = HomeScreen(map_widget)

    assert screen.map_canvas is map_widget


def test_display_listings_creates_tiles_in_order():
    ensure_qt_app()
    screen = HomeScreen(QWidget())
    books = [Book(title="First", author="A"), Book(title="Second", author="B")]

    screen.display_listings(books)

    assert [tile.book for tile in screen.tiles()] == books
    assert all(tile.cover_view.is_placeholder for tile in screen.tiles())


def test_display_listings_replaces_previous_tiles():
    ensure_qt_app()
    screen = HomeScreen(QWidget())
    screen.display_listings([Book(title="Old", author="A")])

    screen.display_listings([])

    assert screen.tiles() == []


def test_tile_click_emits_book_selected():
    ensure_qt_app()
    screen = HomeScreen(QWidget())
    book = Book(title="First", author="A")
    screen.display_listings([book])
    listener = MagicMock()
    screen.book_selected.connect(listener)

    screen.tiles()[0].clicked.emit(book.id)

    listener.assert_called_once_with(book.id)
