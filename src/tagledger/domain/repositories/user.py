"""User repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.user import User


class UserRepository(Protocol):
    """Repository for registered accounts."""

    def get_by_username(self, username: str) -> Optional[User]:
        ...

    def create(self, *, username: str, password_hash: str) -> User:
        ...

    def delete(self, user_id: int) -> bool:
        ...
