"""Tests for configure_logging."""

import logging

from literate.services import configure_logging


def test_known_level_is_applied():
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger("literate").level == logging.DEBUG


def test_unknown_level_falls_back_to_warning():
    assert configure_logging("chatty") == logging.WARNING


def test_empty_level_falls_back_to_warning():
    assert configure_logging("") == logging.WARNING
