"""Tests for CoverView placeholder handling."""

from PySide6.QtGui import QColor, QPixmap
from PySide6.QtWidgets import QApplication

from literate.ui import CoverView
from literate.ui.cover_view import PLACEHOLDER_TEXT


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_starts_as_placeholder():
    ensure_qt_app()
    view = CoverView(48, 64)

    assert view.is_placeholder
    assert view.text() == PLACEHOLDER_TEXT
    assert view.width() == 48
    assert view.height() == 64


def test_null_pixmap_falls_back_to_placeholder():
    ensure_qt_app()
    view = CoverView(48, 64)

    view.set_cover(QPixmap())

    assert view.is_placeholder


def test_valid_pixmap_replaces_placeholder():
    ensure_qt_app()
    pixmap = QPixmap(100, 200)
    pixmap.fill(QColor("red"))
    view = CoverView(48, 64)

    view.set_cover(pixmap)

    assert not view.is_placeholder
    assert view.text() == ""

    view.set_cover(None)
    assert view.is_placeholder
