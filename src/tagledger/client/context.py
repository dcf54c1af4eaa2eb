"""Client context bundling credentials and list state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .session import ClientSession
from .state import TransactionBook

DEFAULT_SESSION_FILE = Path.home() / ".tagledger" / "session.json"


@dataclass
class ClientContext:
    """Everything a front-end needs between requests."""

    api_base_url: str
    session_path: Path
    session: ClientSession = field(default_factory=ClientSession)
    book: TransactionBook = field(default_factory=TransactionBook)

    def url(self, path: str) -> str:
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"

    def request_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", **self.session.auth_header()}

    def sign_in(self, payload: dict) -> None:
        """Adopt a login/register response and persist it."""

        self.session.sign_in(payload)
        self.session.save(self.session_path)

    def sign_out(self) -> None:
        """Forget credentials and the cached transactions."""

        self.session.clear()
        self.book.clear()
        self.session.save(self.session_path)


def create_client_context(
    api_base_url: str = "http://localhost:5000/api",
    session_path: Optional[Path] = None,
) -> ClientContext:
    """Build a context, restoring any saved session from disk."""

    path = session_path or DEFAULT_SESSION_FILE
    return ClientContext(
        api_base_url=api_base_url,
        session_path=path,
        session=ClientSession.load(path),
    )
