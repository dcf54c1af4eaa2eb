"""Plain transaction records exchanged between the store, API and client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .dates import to_storage_date

@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """A transaction as users see it: display date, signed amount, tag string."""

    transaction_id: int
    date: str
    amount: str
    tags: str = ""

    @property
    def is_income(self) -> bool:
        return self.amount.startswith("+")

    @property
    def is_spending(self) -> bool:
        return self.amount.startswith("-")

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire keys of the HTTP API."""

        return {
            "transactionId": self.transaction_id,
            "date": self.date,
            "amount": self.amount,
            "tags": self.tags,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TransactionRecord:
        return cls(
            transaction_id=int(data["transactionId"]),
            date=str(data["date"]),
            amount=str(data["amount"]),
            tags=str(data.get("tags") or ""),
        )

def chronological_key(record: TransactionRecord) -> tuple[str, int]:
    """Sort key ordering by calendar date, then by transaction id."""

    return to_storage_date(record.date), record.transaction_id
