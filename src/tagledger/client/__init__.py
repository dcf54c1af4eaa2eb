"""Client-side state: credentials, form checks and the ordered transaction list."""

from .context import ClientContext, create_client_context
from .forms import analytics_problems, credentials_problems, transaction_problems
from .ordering import compare_transactions, merge_insert, remove, update
from .session import ClientSession
from .state import TransactionBook

__all__ = [
    "ClientContext",
    "ClientSession",
    "TransactionBook",
    "analytics_problems",
    "compare_transactions",
    "create_client_context",
    "credentials_problems",
    "merge_insert",
    "remove",
    "transaction_problems",
    "update",
]
