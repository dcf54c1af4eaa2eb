"""Service module exports."""

from . import analytics, auth, seed

__all__ = ["analytics", "auth", "seed"]
