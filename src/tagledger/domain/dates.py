"""Conversion between the display date form and its sortable storage form."""

from __future__ import annotations


def _reverse(value: str) -> str:
    return "-".join(reversed(value.split("-")))


def to_storage_date(display_date: str) -> str:
    """Turn ``DD-MM-YYYY`` into ``YYYY-MM-DD``.

    The storage form compares lexically in calendar order, which is what the
    range filters and the listing order rely on.
    """

    return _reverse(display_date)


def from_storage_date(stored_date: str) -> str:
    """Turn ``YYYY-MM-DD`` back into ``DD-MM-YYYY``."""

    return _reverse(stored_date)
