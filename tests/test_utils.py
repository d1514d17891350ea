"""Tests for utility helpers."""
import logging

from probekit.utils import is_not_blank, logger, setup_logging, to_hex_or_string, to_string


def test_setup_logging_levels():
    setup_logging(verbose=True)
    assert logger.level == logging.DEBUG
    assert logging.getLogger("dns").level == logging.WARNING

    setup_logging(verbose=False)
    assert logger.level == logging.INFO


def test_is_not_blank():
    assert is_not_blank("x")
    assert not is_not_blank("")
    assert not is_not_blank("  \n")


def test_to_string():
    assert to_string(None) == ""
    assert to_string(True) == "True"
    assert to_string(["a", 1]) == "a, 1"
    assert to_string(b"raw") == "raw"


def test_to_hex_or_string():
    assert to_hex_or_string("id 1234\nopcode QUERY") == "id 1234\nopcode QUERY"
    assert to_hex_or_string("\x00\xff") == "00c3bf"
