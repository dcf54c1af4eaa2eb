"""Explicit credential holder for API clients."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass
class ClientSession:
    """Bearer token and user identity of the signed-in user.

    Persisted only through ``save``/``load`` so the caller decides where and
    when credentials touch disk.
    """

    token: Optional[str] = None
    user: Optional[dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def sign_in(self, payload: dict[str, Any]) -> None:
        """Adopt the ``{user, token}`` body returned by register or login."""

        self.token = payload["token"]
        self.user = payload.get("user")

    def clear(self) -> None:
        self.token = None
        self.user = None

    def auth_header(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"token": self.token, "user": self.user}), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> ClientSession:
        """Read a saved session; a missing or unreadable file is signed out."""

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls(token=data.get("token"), user=data.get("user"))
