"""Transaction and analytics request validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ...validation import check_amount, check_date, check_tags
from ..forms import BaseForm, parse_positive_int


@dataclass(slots=True)
class TransactionForm(BaseForm):
    """Date, signed amount and tag string of a new transaction."""

    date: Any = None
    amount: Any = None
    tags: Any = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TransactionForm:
        form = cls()
        form.load(data)
        return form

    def load(self, data: Mapping[str, Any]) -> None:
        self.date = data.get("date")
        self.amount = data.get("amount")
        tags = data.get("tags")
        self.tags = "" if tags is None else tags

    def validate(self) -> bool:
        self.errors.clear()
        self._validate_fields()
        return not self.errors

    def _validate_fields(self) -> None:
        if not check_date(self.date):
            self._add_error("date", "Should be in DD-MM-YYYY format.")
        if not check_amount(self.amount):
            self._add_error("amount", "Should be like -100.5 or +100")
        if not check_tags(self.tags):
            self._add_error("tags", 'Should be like "#tag1 #tag2"')

    def first_error(self) -> str:
        return "Invalid transaction format!"


@dataclass(slots=True)
class TransactionUpdateForm(TransactionForm):
    """Full replacement of an existing transaction."""

    raw_transaction_id: Any = None
    transaction_id: Optional[int] = None

    def load(self, data: Mapping[str, Any]) -> None:
        TransactionForm.load(self, data)
        self.raw_transaction_id = data.get("transactionId")

    def _validate_fields(self) -> None:
        TransactionForm._validate_fields(self)
        self.transaction_id = parse_positive_int(self.raw_transaction_id)
        if self.transaction_id is None:
            self._add_error("transactionId", "Transaction id must be a positive whole number.")


@dataclass(slots=True)
class TransactionDeleteForm(BaseForm):
    """Identifies the transaction to delete."""

    raw_transaction_id: Any = None
    transaction_id: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TransactionDeleteForm:
        return cls(raw_transaction_id=data.get("transactionId"))

    def validate(self) -> bool:
        self.errors.clear()
        self.transaction_id = parse_positive_int(self.raw_transaction_id)
        if self.transaction_id is None:
            self._add_error("transactionId", "Transaction id must be a positive whole number.")
        return not self.errors


@dataclass(slots=True)
class AnalyticsQueryForm(BaseForm):
    """Query string of the analytics endpoint."""

    start_date: Any = None
    end_date: Any = None
    tags: Any = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AnalyticsQueryForm:
        tags = data.get("tags")
        return cls(
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            tags="" if tags is None else tags,
        )

    def validate(self) -> bool:
        self.errors.clear()
        if not check_date(self.start_date):
            self._add_error("startDate", "Invalid date format!")
        if not check_date(self.end_date):
            self._add_error("endDate", "Invalid date format!")
        if not check_tags(self.tags):
            self._add_error("tags", "Invalid tags format!")
        return not self.errors
