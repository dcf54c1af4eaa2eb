"""Input format checks shared by the API handlers and the client layer.

The ``check_*`` predicates are what the server enforces; the ``explain_*``
variants return ``"ok"`` or the message a form shows next to the field.
Both use the same patterns so client and server agree on every input.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

OK = "ok"

# Matches the width of the ``transactions.amount`` column
MAX_AMOUNT_LENGTH = 64

USERNAME_RE = re.compile(r"^[a-zA-Z0-9_\-]{3,50}$")
PASSWORD_RE = re.compile(r"^[A-Za-z0-9\-_@$!%*#?&]{4,}$")
DATE_RE = re.compile(r"^(0[1-9]|[12][0-9]|3[01])-(0[1-9]|1[0-2])-[0-9]{4}$")
AMOUNT_RE = re.compile(r"^[\-+][0-9]+(\.[0-9]+)?$")
TAGS_RE = re.compile(r"^\s*(#[a-zA-Z0-9_\-]+\s+)*(#[a-zA-Z0-9_\-]+)?$")


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    # fullmatch so a trailing newline never slips past ``$``
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def check_username(username: Any) -> bool:
    return _matches(USERNAME_RE, username)


def check_password(password: Any) -> bool:
    return _matches(PASSWORD_RE, password)


def check_date(date: Any) -> bool:
    """Return True for ``DD-MM-YYYY`` with day 01-31 and month 01-12."""

    return _matches(DATE_RE, date)


def check_amount(amount: Any) -> bool:
    """Return True for an explicitly signed decimal such as ``-100.5`` or ``+100``.

    At most ``MAX_AMOUNT_LENGTH`` characters, sign included.
    """

    return _matches(AMOUNT_RE, amount) and len(amount) <= MAX_AMOUNT_LENGTH


def check_tags(tags: Any) -> bool:
    """Return True for whitespace-separated ``#tag`` tokens; empty is allowed."""

    return _matches(TAGS_RE, tags)


def check_transaction(data: Mapping[str, Any]) -> bool:
    return (
        check_date(data.get("date"))
        and check_amount(data.get("amount"))
        and check_tags(data.get("tags"))
    )


def explain_username(username: str) -> str:
    if len(username) < 3:
        return "Should be at least 3 characters long."
    return OK if check_username(username) else "Invalid username format."


def explain_password(password: str) -> str:
    if len(password) < 4:
        return "Should be at least 4 characters long."
    return OK if check_password(password) else "Invalid password format."


def explain_date(date: str) -> str:
    if not date:
        return "Should not be empty."
    return OK if check_date(date) else "Should be in DD-MM-YYYY format."


def explain_amount(amount: str) -> str:
    if not amount:
        return "Should not be empty."
    if len(amount) > MAX_AMOUNT_LENGTH:
        return f"Should be at most {MAX_AMOUNT_LENGTH} characters long."
    return OK if check_amount(amount) else "Should be like -100.5 or +100"


def explain_tags(tags: str) -> str:
    return OK if check_tags(tags) else 'Should be like "#tag1 #tag2"'
