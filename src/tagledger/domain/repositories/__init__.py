"""Repository protocols for dependency injection."""

from .transaction import TransactionRepository
from .user import UserRepository

__all__ = ["TransactionRepository", "UserRepository"]
