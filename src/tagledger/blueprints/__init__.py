"""Blueprint exports."""

from . import auth, home, transactions

__all__ = ["auth", "home", "transactions"]
