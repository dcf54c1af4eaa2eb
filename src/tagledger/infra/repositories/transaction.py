"""SQLModel implementation of the transaction repository."""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import func
from sqlmodel import Session, select

from ...domain.dates import from_storage_date, to_storage_date
from ...domain.records import TransactionRecord
from ...domain.tags import format_tags, parse_tags
from ...models.transaction import Transaction, TransactionTag
from ..database import SessionFactory


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def add(self, *, user_id: int, date: str, amount: str, tags: str) -> TransactionRecord:
        """Create a transaction with id ``max(existing) + 1`` for the user."""
        with self.session_factory() as session:
            current_max = session.exec(
                select(func.max(Transaction.transaction_id)).where(Transaction.user_id == user_id)
            ).one()
            transaction_id = (current_max or 0) + 1
            session.add(
                Transaction(
                    user_id=user_id,
                    transaction_id=transaction_id,
                    date=to_storage_date(date),
                    amount=amount,
                )
            )
            session.flush()
            tag_list = parse_tags(tags)
            self._insert_tags(session, user_id, transaction_id, tag_list)

        return TransactionRecord(
            transaction_id=transaction_id,
            date=date,
            amount=amount,
            tags=format_tags(tag_list),
        )

    def update(
        self, *, user_id: int, transaction_id: int, date: str, amount: str, tags: str
    ) -> bool:
        """Overwrite date and amount and replace the tag list wholesale."""
        with self.session_factory() as session:
            row = session.get(Transaction, (user_id, transaction_id))
            if row is None:
                return False
            row.date = to_storage_date(date)
            row.amount = amount
            session.add(row)

            old_tags = session.exec(
                select(TransactionTag)
                .where(TransactionTag.user_id == user_id)
                .where(TransactionTag.transaction_id == transaction_id)
            ).all()
            for old in old_tags:
                session.delete(old)
            # Old rows must be gone before re-inserting the same (tag) keys
            session.flush()
            self._insert_tags(session, user_id, transaction_id, parse_tags(tags))
            return True

    def delete(self, *, user_id: int, transaction_id: int) -> bool:
        """Delete a transaction; its tags go with it through the FK cascade."""
        with self.session_factory() as session:
            row = session.get(Transaction, (user_id, transaction_id))
            if row is None:
                return False
            session.delete(row)
            return True

    def get(self, *, user_id: int, transaction_id: int) -> TransactionRecord | None:
        """Return a single transaction, or None when absent or not owned."""
        with self.session_factory() as session:
            row = session.get(Transaction, (user_id, transaction_id))
            if row is None:
                return None
            tags = session.exec(
                select(TransactionTag.tag)
                .where(TransactionTag.user_id == user_id)
                .where(TransactionTag.transaction_id == transaction_id)
                .order_by(TransactionTag.position)
            ).all()
            return self._to_record(row, tags)

    def list_for_user(self, *, user_id: int) -> list[TransactionRecord]:
        """List every transaction of the user ordered by (date, transaction id)."""
        with self.session_factory() as session:
            rows = session.exec(
                select(Transaction)
                .where(Transaction.user_id == user_id)
                .order_by(Transaction.date, Transaction.transaction_id)  # type: ignore[arg-type]
            ).all()
            tag_rows = session.exec(
                select(TransactionTag)
                .where(TransactionTag.user_id == user_id)
                .order_by(TransactionTag.transaction_id, TransactionTag.position)  # type: ignore[arg-type]
            ).all()

            tags_by_id: dict[int, list[str]] = defaultdict(list)
            for tag_row in tag_rows:
                tags_by_id[tag_row.transaction_id].append(tag_row.tag)

            return [self._to_record(row, tags_by_id.get(row.transaction_id, [])) for row in rows]

    @staticmethod
    def _insert_tags(
        session: Session, user_id: int, transaction_id: int, tags: list[str]
    ) -> None:
        for position, tag in enumerate(tags):
            session.add(
                TransactionTag(
                    user_id=user_id,
                    transaction_id=transaction_id,
                    tag=tag,
                    position=position,
                )
            )

    @staticmethod
    def _to_record(row: Transaction, tags: list[str]) -> TransactionRecord:
        return TransactionRecord(
            transaction_id=row.transaction_id,
            date=from_storage_date(row.date),
            amount=row.amount,
            tags=format_tags(tags),
        )
