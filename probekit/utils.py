"""Utility functions for probekit."""

import logging
import string
from typing import Any


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging for probekit.

    Args:
        verbose: Enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Suppress noisy dnspython logging
    logging.getLogger("dns").setLevel(logging.WARNING)

    logger.setLevel(level)


logger = logging.getLogger("probekit")

_PRINTABLE = set(string.printable)


def is_not_blank(value: str) -> bool:
    return bool(value and value.strip())


def to_string(value: Any) -> str:
    """Render a free-form template value as display text."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple, set)):
        return ", ".join(to_string(v) for v in value)
    return str(value)


def to_hex_or_string(value: str) -> str:
    """Return ``value`` unchanged if printable, otherwise its hex encoding."""
    if all(ch in _PRINTABLE for ch in value):
        return value
    return value.encode("utf-8", errors="surrogateescape").hex()
