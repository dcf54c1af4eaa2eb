"""Shared plumbing for request schemas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import ValidationError


@dataclass(slots=True)
class BaseForm:
    """Collects per-field errors; subclasses bind and validate their fields."""

    errors: dict[str, list[str]] = field(default_factory=dict, init=False)

    def _add_error(self, field: str, message: str) -> None:
        """Accumulate validation errors for a specific field."""

        self.errors.setdefault(field, []).append(message)

    def first_error(self) -> str:
        for messages in self.errors.values():
            if messages:
                return messages[0]
        return "Invalid input."

    def ensure_valid(self) -> None:
        """Raise ``ValidationError`` unless ``validate()`` passes."""

        if not self.validate():
            raise ValidationError(self.first_error(), self.errors)

    def validate(self) -> bool:  # pragma: no cover - interface
        raise NotImplementedError


def parse_positive_int(value: Any) -> int | None:
    """Accept JSON integers or digit strings; anything else is None."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None


def body_mapping(data: Any) -> Mapping[str, Any]:
    """Treat a missing or non-object JSON body as empty."""

    return data if isinstance(data, Mapping) else {}
