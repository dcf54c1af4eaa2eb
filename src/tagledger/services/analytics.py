"""Tag-filtered, date-ranged totals over a user's transactions.

Two statement shapes exist and both are fully parameterized:

* no tag filter: the amounts of every matching transaction;
* N-tag filter: transactions are joined to their tags, restricted to the
  filter labels, grouped per transaction and kept only when the number of
  distinct matched labels equals N, so a transaction must carry every
  filter tag to count.

Amounts are stored as signed decimal strings and summed here as ``Decimal``
so totals stay exact.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Any, Iterable, Sequence

from sqlalchemy import and_, func
from sqlalchemy.sql import Select
from sqlmodel import select

from ..domain.dates import to_storage_date
from ..domain.tags import parse_tags
from ..infra.database import SessionFactory
from ..models.transaction import Transaction, TransactionTag

PRECISION = Decimal("0.0001")
# Wide enough for any sum of amounts that pass ``check_amount``
SUM_CONTEXT = Context(prec=256, rounding=ROUND_HALF_UP)


class TotalKind(str, enum.Enum):
    """Which side of the ledger a total covers."""

    SPENDINGS = "spendings"
    INCOME = "income"

    @property
    def sign(self) -> str:
        return "-" if self is TotalKind.SPENDINGS else "+"


@dataclass(frozen=True, slots=True)
class AnalyticsSummary:
    """Spendings and income totals for one query."""

    spendings: Decimal
    income: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"spendings": float(self.spendings), "income": float(self.income)}


def _base_filters(kind: TotalKind, user_id: int, start: str, end: str) -> list[Any]:
    return [
        Transaction.user_id == user_id,
        Transaction.date >= start,
        Transaction.date <= end,
        Transaction.amount.startswith(kind.sign, autoescape=True),  # type: ignore[attr-defined]
    ]


def build_total_statement(
    kind: TotalKind,
    *,
    user_id: int,
    start_date: str,
    end_date: str,
    tags: Sequence[str] = (),
) -> Select:
    """Return the statement selecting matching amounts for the filter shape.

    ``start_date`` and ``end_date`` are display dates (``DD-MM-YYYY``); both
    bounds are inclusive.
    """

    filters = _base_filters(
        kind, user_id, to_storage_date(start_date), to_storage_date(end_date)
    )
    if not tags:
        return select(Transaction.amount).where(*filters)

    tagged = (
        select(Transaction.transaction_id, Transaction.amount)
        .join(
            TransactionTag,
            and_(
                TransactionTag.user_id == Transaction.user_id,
                TransactionTag.transaction_id == Transaction.transaction_id,
            ),
        )
        .where(*filters)
        .where(TransactionTag.tag.in_(list(tags)))  # type: ignore[attr-defined]
        .group_by(Transaction.transaction_id, Transaction.amount)
        .having(func.count(func.distinct(TransactionTag.tag)) == len(tags))
        .subquery()
    )
    return select(tagged.c.amount)


def sum_amounts(amounts: Iterable[str]) -> Decimal:
    """Exact sum of signed decimal strings; an empty input sums to zero."""

    with localcontext(SUM_CONTEXT):
        return sum((Decimal(amount) for amount in amounts), Decimal(0))


def round_total(total: float | Decimal | None) -> Decimal:
    """Round half away from zero to four places; no rows means zero."""

    with localcontext(SUM_CONTEXT):
        if total is None:
            return Decimal(0).quantize(PRECISION)
        return Decimal(str(total)).quantize(PRECISION, rounding=ROUND_HALF_UP)


def compute_total(
    kind: TotalKind | str,
    *,
    user_id: int,
    start_date: str,
    end_date: str,
    tags: str,
    session_factory: SessionFactory,
) -> Decimal:
    """Sum the amounts of one kind for a user, date range and tag filter.

    An unknown ``kind`` raises ``ValueError``; it is a caller bug, never
    user input.
    """

    kind = TotalKind(kind)
    statement = build_total_statement(
        kind,
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        tags=parse_tags(tags),
    )
    with session_factory() as session:
        amounts = session.exec(statement).all()
    return round_total(sum_amounts(amounts))


def summarize(
    *,
    user_id: int,
    start_date: str,
    end_date: str,
    tags: str,
    session_factory: SessionFactory,
) -> AnalyticsSummary:
    """Compute spendings and income independently for the same filter."""

    params = dict(
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        tags=tags,
        session_factory=session_factory,
    )
    return AnalyticsSummary(
        spendings=compute_total(TotalKind.SPENDINGS, **params),
        income=compute_total(TotalKind.INCOME, **params),
    )
