"""User model supporting authentication."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Registered account; deleting it removes every owned transaction."""

    __tablename__: ClassVar[str] = "users"

    user_id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(nullable=False, unique=True, index=True, max_length=50)
    password_hash: str = Field(nullable=False, max_length=255)
