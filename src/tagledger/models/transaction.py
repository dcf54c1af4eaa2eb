"""SQLModel definitions for ledger transactions and their tags."""

from __future__ import annotations

from typing import ClassVar

from sqlalchemy import ForeignKeyConstraint
from sqlmodel import Field, SQLModel

from ..validation import MAX_AMOUNT_LENGTH


class Transaction(SQLModel, table=True):
    """A dated, signed amount keyed by (user, per-user sequential id)."""

    __tablename__: ClassVar[str] = "transactions"

    user_id: int = Field(foreign_key="users.user_id", ondelete="CASCADE", primary_key=True)
    transaction_id: int = Field(primary_key=True)
    # YYYY-MM-DD so lexical order is calendar order
    date: str = Field(nullable=False, index=True, max_length=10)
    # Sign is mandatory: "+" income, "-" spending
    amount: str = Field(nullable=False, max_length=MAX_AMOUNT_LENGTH)


class TransactionTag(SQLModel, table=True):
    """One label attached to a transaction, with its position in the input."""

    __tablename__: ClassVar[str] = "transaction_tags"
    __table_args__ = (
        ForeignKeyConstraint(
            ["user_id", "transaction_id"],
            ["transactions.user_id", "transactions.transaction_id"],
            ondelete="CASCADE",
        ),
    )

    user_id: int = Field(primary_key=True)
    transaction_id: int = Field(primary_key=True)
    tag: str = Field(primary_key=True, max_length=255)
    position: int = Field(nullable=False)
