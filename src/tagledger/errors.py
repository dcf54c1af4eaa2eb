"""Error taxonomy shared by the store, services and HTTP layer."""

from __future__ import annotations

from typing import Mapping


class TagLedgerError(Exception):
    """Base class for every error the application raises on purpose."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TagLedgerError):
    """Malformed user input; carries per-field messages for inline display."""

    status_code = 400

    def __init__(self, message: str, errors: Mapping[str, list[str]] | None = None) -> None:
        super().__init__(message)
        self.errors = dict(errors or {})


class DuplicateUsernameError(ValidationError):
    """Registration attempted with a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(
            "User with such username already exists!",
            {"username": ["Username already exists."]},
        )
        self.username = username


class AuthError(TagLedgerError):
    """Missing, invalid or expired credential, or rejected login."""

    def __init__(self, message: str, status_code: int = 401) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundOrUnowned(TagLedgerError):
    """Target row is absent or belongs to another user."""

    status_code = 400


class StorageError(TagLedgerError):
    """Unexpected backend failure; the message shown to users stays opaque."""

    PUBLIC_MESSAGE = "Probably database error."

    def __init__(self, message: str = PUBLIC_MESSAGE) -> None:
        super().__init__(message)
