"""SQLModel table exports."""

from .transaction import Transaction, TransactionTag
from .user import User

__all__ = [
    "Transaction",
    "TransactionTag",
    "User",
]
