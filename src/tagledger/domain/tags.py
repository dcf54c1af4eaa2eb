"""Tag string parsing and formatting."""

from __future__ import annotations

import re
from typing import Iterable

_TAG_TOKEN = re.compile(r"#(\S+)")


def parse_tags(text: str | None) -> list[str]:
    """Return the labels of a ``"#a #b"`` string in input order, without ``#``.

    A label repeated in the input keeps only its first position; the list index
    is the tag position stored alongside it.
    """

    if not text:
        return []
    tags: list[str] = []
    for match in _TAG_TOKEN.finditer(text):
        tag = match.group(1)
        if tag not in tags:
            tags.append(tag)
    return tags


def format_tags(tags: Iterable[str]) -> str:
    """Join labels back into the space separated ``#tag`` form."""

    return " ".join(f"#{tag}" for tag in tags)
