"""Unit tests for BookDetailCoordinator."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from literate.coordinators import BookDetailCoordinator
from literate.core import Book
from literate.services import BookStore
from literate.ui import BookDetailPanel


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def store():
    ensure_qt_app()
    return BookStore([
        Book(title="Clean Code", author="Robert C. Martin", description="Craftsmanship."),
        Book(title="Refactoring", author="Martin Fowler"),
    ])


@pytest.fixture
def panel():
    ensure_qt_app()
    return BookDetailPanel()


@pytest.fixture
def share_service():
    service = MagicMock()
    service.share.return_value = "Clean Code by Robert C. Martin"
    return service


@pytest.fixture
def main_window():
    return MagicMock()


@pytest.fixture
def coordinator(panel, store, share_service, main_window):
    return BookDetailCoordinator(
        detail_panel=panel,
        book_store=store,
        share_service=share_service,
        main_window=main_window,
    )


def test_fails_fast_on_none_share_service(panel, store):
    with pytest.raises(ValueError, match="ShareService must not be None"):
        BookDetailCoordinator(
            detail_panel=panel,
            book_store=store,
            share_service=None,
            main_window=MagicMock(),
        )


def test_show_book_renders_panel(coordinator, panel, store):
    book = store.books()[0]

    assert coordinator.show_book(book.id) is True

    assert coordinator.current_book_id == book.id
    assert panel.title_label.text() == "Clean Code"
    assert panel.author_label.text() == "Robert C. Martin"
    assert panel.description_label.text() == "Craftsmanship."


def test_show_unknown_book_is_noop(coordinator, panel):
    assert coordinator.show_book("missing") is False

    assert coordinator.current_book_id is None
    assert panel.book is None


def test_favorite_button_toggles_and_refreshes(coordinator, panel, store):
    book = store.books()[0]
    coordinator.show_book(book.id)

    panel.favorite_button.click()

    assert store.get(book.id).is_favorite is True
    assert panel.favorite_button.text() == "Unfavorite"
    assert "Favorited" in panel.favorite_status_label.text()


def test_read_button_toggles_and_refreshes(coordinator, panel, store):
    book = store.books()[1]
    coordinator.show_book(book.id)

    panel.read_button.click()

    assert store.get(book.id).is_read is True
    assert panel.read_button.text() == "Mark Unread"
    assert "Read" in panel.read_status_label.text()


def test_update_of_other_book_does_not_switch_panel(coordinator, panel, store):
    shown, other = store.books()
    coordinator.show_book(shown.id)

    store.toggle_favorite(other.id)

    assert panel.book is shown


def test_deleting_shown_book_clears_panel(coordinator, panel, store):
    book = store.books()[0]
    coordinator.show_book(book.id)

    store.delete(book.id)

    assert coordinator.current_book_id is None
    assert panel.book is None
    assert not panel.share_button.isEnabled()


def test_share_uses_service_and_informs_user(coordinator, panel, store, share_service, main_window):
    book = store.books()[0]
    coordinator.show_book(book.id)

    panel.share_button.click()

    share_service.share.assert_called_once_with(book)
    main_window.show_info.assert_called_once()
    assert "Clean Code by Robert C. Martin" in main_window.show_info.call_args[0][1]


def test_share_unknown_book_is_noop(coordinator, share_service, main_window):
    coordinator.handle_share_requested("missing")

    share_service.share.assert_not_called()
    main_window.show_info.assert_not_called()
