"""Transaction list state driven by confirmed server responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..domain.records import TransactionRecord
from . import ordering


def _records(items: Iterable[TransactionRecord | Mapping[str, Any]]) -> list[TransactionRecord]:
    return [
        item if isinstance(item, TransactionRecord) else TransactionRecord.from_dict(item)
        for item in items
    ]


@dataclass
class TransactionBook:
    """The signed-in user's transactions, always in (date, id) order.

    Call the ``apply_*`` methods only after the server confirmed the change;
    a failed request simply never reaches this object.
    """

    transactions: list[TransactionRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self):
        return iter(self.transactions)

    def ids(self) -> list[int]:
        return [record.transaction_id for record in self.transactions]

    def apply_fetched(self, items: Iterable[TransactionRecord | Mapping[str, Any]]) -> None:
        """Merge a GET /transactions response (already in server order)."""

        self.transactions = ordering.merge_insert(self.transactions, _records(items))

    def apply_added(self, item: TransactionRecord | Mapping[str, Any]) -> None:
        self.transactions = ordering.merge_insert(self.transactions, _records([item]))

    def apply_updated(self, item: TransactionRecord | Mapping[str, Any]) -> None:
        (record,) = _records([item])
        self.transactions = ordering.update(self.transactions, record)

    def apply_deleted(self, transaction_id: int) -> None:
        self.transactions = ordering.remove(self.transactions, transaction_id)

    def clear(self) -> None:
        self.transactions = []
