"""Credential form validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ...validation import check_password, check_username
from ..forms import BaseForm


@dataclass(slots=True)
class CredentialsForm(BaseForm):
    """Username/password pair posted to register and login."""

    username: Any = None
    password: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CredentialsForm:
        return cls(username=data.get("username"), password=data.get("password"))

    def validate(self) -> bool:
        self.errors.clear()
        if not check_username(self.username):
            self._add_error("username", "Invalid username format.")
        if not check_password(self.password):
            self._add_error("password", "Invalid password format.")
        return not self.errors
