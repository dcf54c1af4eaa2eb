"""SQLModel implementation of the user repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.user import User
from ..database import SessionFactory


class SQLModelUserRepository:
    """SQLModel-based user repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_by_username(self, username: str) -> Optional[User]:
        """Fetch a user by exact username."""
        with self.session_factory() as session:
            user = session.exec(select(User).where(User.username == username)).first()
            if user:
                session.expunge(user)
            return user

    def create(self, *, username: str, password_hash: str) -> User:
        """Insert a user row; the UNIQUE constraint guards the username."""
        with self.session_factory() as session:
            user = User(username=username, password_hash=password_hash)
            session.add(user)
            session.flush()
            session.refresh(user)
            session.expunge(user)
            return user

    def delete(self, user_id: int) -> bool:
        """Delete a user; owned transactions and tags cascade in the database."""
        with self.session_factory() as session:
            user = session.get(User, user_id)
            if user is None:
                return False
            session.delete(user)
            return True
