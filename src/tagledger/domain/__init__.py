"""Domain values and repository protocols."""

from .dates import from_storage_date, to_storage_date
from .records import TransactionRecord, chronological_key
from .tags import format_tags, parse_tags

__all__ = [
    "TransactionRecord",
    "chronological_key",
    "format_tags",
    "from_storage_date",
    "parse_tags",
    "to_storage_date",
]
