"""Transaction repository protocol."""

from __future__ import annotations

from typing import Protocol

from ..records import TransactionRecord


class TransactionRepository(Protocol):
    """Repository for a user's transactions and their tags."""

    def add(self, *, user_id: int, date: str, amount: str, tags: str) -> TransactionRecord:
        """Persist a new transaction and return it with its assigned id."""
        ...

    def update(
        self, *, user_id: int, transaction_id: int, date: str, amount: str, tags: str
    ) -> bool:
        """Replace date, amount and tags; False when nothing matched."""
        ...

    def delete(self, *, user_id: int, transaction_id: int) -> bool:
        """Remove a transaction; False when nothing matched."""
        ...

    def list_for_user(self, *, user_id: int) -> list[TransactionRecord]:
        """All transactions ordered by date then transaction id."""
        ...
