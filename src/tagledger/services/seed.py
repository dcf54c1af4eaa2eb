"""Demo data seeding used by the CLI and by tests."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.repositories import TransactionRepository, UserRepository
from ..logging_config import get_logger
from . import auth

logger = get_logger(__name__)

# (date, amount, tags) for a January 2025 household ledger
SAMPLE_LEDGER: tuple[tuple[str, str, str], ...] = (
    ("01-01-2025", "-185.00", "#food"),
    ("04-01-2025", "-674.06", "#food"),
    ("04-01-2025", "-293.00", "#food"),
    ("07-01-2025", "-46.00", "#food #water"),
    ("07-01-2025", "+3000.00", ""),
    ("08-01-2025", "-212.00", "#food"),
    ("11-01-2025", "-686.96", "#food"),
    ("11-01-2025", "-330.00", "#food"),
    ("12-01-2025", "-46.00", "#food #water"),
    ("14-01-2025", "+1000.00", ""),
    ("15-01-2025", "-162.00", "#food"),
    ("17-01-2025", "-699.00", "#hygiene"),
    ("17-01-2025", "-46.00", "#food #water"),
    ("18-01-2025", "+1000.00", ""),
    ("18-01-2025", "-674.28", "#food"),
    ("18-01-2025", "-308.00", "#food"),
    ("22-01-2025", "-221.00", "#food"),
    ("22-01-2025", "-46.00", "#food #water"),
    ("22-01-2025", "+4000.00", ""),
    ("25-01-2025", "-669.49", "#food"),
    ("25-01-2025", "-300.00", "#food"),
    ("28-01-2025", "-46.00", "#food #water"),
    ("29-01-2025", "-276.78", "#food"),
    ("29-01-2025", "+2000.00", ""),
    ("30-01-2025", "-1171.49", "#food"),
    ("31-01-2025", "-2000.00", "#savings"),
    ("31-01-2025", "-1500.00", "#living-place #rent"),
    ("31-01-2025", "-260.00", "#living-place #electricity"),
    ("31-01-2025", "-103.00", "#living-place #internet"),
)


@dataclass(frozen=True, slots=True)
class SeedSummary:
    user_id: int
    username: str
    transactions: int


def seed_demo_user(
    *,
    username: str,
    password: str,
    users: UserRepository,
    transactions: TransactionRepository,
) -> SeedSummary:
    """Register ``username`` and load the sample ledger into it."""

    user = auth.create_user(username=username, password=password, users=users)
    for date, amount, tags in SAMPLE_LEDGER:
        transactions.add(user_id=user.user_id, date=date, amount=amount, tags=tags)
    logger.info(
        "Demo ledger seeded",
        extra={"user_id": user.user_id, "transactions": len(SAMPLE_LEDGER)},
    )
    return SeedSummary(user_id=user.user_id, username=username, transactions=len(SAMPLE_LEDGER))
