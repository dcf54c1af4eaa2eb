"""Field checks run before a request leaves the client."""

from __future__ import annotations

from typing import Callable

from ..validation import (
    OK,
    explain_amount,
    explain_date,
    explain_password,
    explain_tags,
    explain_username,
)

FieldCheck = tuple[str, Callable[[str], str], str]


def _first_problem(checks: list[FieldCheck]) -> dict[str, str]:
    """Return ``{field: message}`` for the first failing field, else ``{}``.

    Fields are checked in form order and checking stops at the first failure,
    so the user fixes one inline message at a time.
    """

    for name, explain, value in checks:
        verdict = explain(value)
        if verdict != OK:
            return {name: verdict}
    return {}


def credentials_problems(username: str, password: str) -> dict[str, str]:
    return _first_problem(
        [("username", explain_username, username), ("password", explain_password, password)]
    )


def transaction_problems(date: str, amount: str, tags: str) -> dict[str, str]:
    return _first_problem(
        [
            ("date", explain_date, date),
            ("amount", explain_amount, amount),
            ("tags", explain_tags, tags),
        ]
    )


def analytics_problems(start_date: str, end_date: str, tags: str) -> dict[str, str]:
    return _first_problem(
        [
            ("startDate", explain_date, start_date),
            ("endDate", explain_date, end_date),
            ("tags", explain_tags, tags),
        ]
    )
