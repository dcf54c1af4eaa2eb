"""Keep a transaction list sorted by (calendar date, transaction id).

Every function returns a new list and leaves its inputs untouched.
"""

from __future__ import annotations

from typing import Sequence

from ..domain.records import TransactionRecord, chronological_key


def compare_transactions(left: TransactionRecord, right: TransactionRecord) -> int:
    """Three-way compare; records with the same id compare equal."""

    if left.transaction_id == right.transaction_id:
        return 0
    return -1 if chronological_key(left) < chronological_key(right) else 1


def merge_insert(
    existing: Sequence[TransactionRecord], incoming: Sequence[TransactionRecord]
) -> list[TransactionRecord]:
    """Merge two lists already sorted by the same key in linear time.

    When the two heads share a transaction id the incoming one is dropped and
    the existing record is kept as is. Re-fetching therefore never refreshes
    content; ``update`` is the way to replace a record.
    """

    merged: list[TransactionRecord] = []
    i = j = 0
    while i < len(existing) and j < len(incoming):
        order = compare_transactions(existing[i], incoming[j])
        if order == 0:
            j += 1
        elif order < 0:
            merged.append(existing[i])
            i += 1
        else:
            merged.append(incoming[j])
            j += 1
    merged.extend(existing[i:])
    merged.extend(incoming[j:])
    return merged


def remove(existing: Sequence[TransactionRecord], transaction_id: int) -> list[TransactionRecord]:
    return [record for record in existing if record.transaction_id != transaction_id]


def update(
    existing: Sequence[TransactionRecord], transaction: TransactionRecord
) -> list[TransactionRecord]:
    """Replace a record and move it to where its (possibly new) date belongs."""

    return merge_insert(remove(existing, transaction.transaction_id), [transaction])
