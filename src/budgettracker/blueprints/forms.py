"""Form validation base shared by the JSON blueprints."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, ClassVar, Optional

from ..errors import ValidationError


class EntryForm:
    """Binds a request mapping, validates it and exposes cleaned values.

    With ``partial=True`` only the fields present in the mapping are
    validated and returned, which is what PATCH-style updates need.
    """

    fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, *, partial: bool = False) -> None:
        self.partial = partial
        self.raw_data: dict[str, str] = {}
        self.present: set[str] = set()
        self.cleaned: dict[str, Any] = {}
        self.errors: dict[str, list[str]] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, partial: bool = False):
        """Create a form populated from request data."""

        form = cls(partial=partial)
        form.load(data)
        return form

    def load(self, data: Mapping[str, Any]) -> None:
        """Bind incoming mapping data to the form state."""

        self.raw_data = {}
        self.present = set()
        for key in self.fields:
            if key in data:
                self.present.add(key)
            value = data.get(key)
            if value is None:
                value_str = ""
            elif isinstance(value, str):
                value_str = value
            else:
                value_str = str(value)
            self.raw_data[key] = value_str.strip()

    def validate(self) -> bool:
        self.errors.clear()
        self.cleaned = {}
        for name in self.fields:
            if self.partial and name not in self.present:
                continue
            getattr(self, f"clean_{name}")(self.raw_data.get(name, ""))
        return not self.errors

    def validated_data(self) -> dict[str, Any]:
        """Return cleaned values or raise ``ValidationError``."""

        if not self.validate():
            raise ValidationError(dict(self.errors))
        return dict(self.cleaned)

    def _add_error(self, field: str, message: str) -> None:
        """Accumulate validation errors for a specific field."""

        self.errors.setdefault(field, []).append(message)

    # Field helpers -------------------------------------------------------

    def _text(self, field: str, raw: str, *, required: bool, max_length: int) -> None:
        if not raw:
            if required:
                self._add_error(field, f"{field.replace('_', ' ').capitalize()} is required.")
            else:
                self.cleaned[field] = None
            return
        if len(raw) > max_length:
            self._add_error(field, f"Must be {max_length} characters or fewer.")
            return
        self.cleaned[field] = raw

    def _amount(self, field: str, raw: str, *, allow_zero: bool = False, allow_negative: bool = False) -> None:
        if not raw:
            self._add_error(field, "Amount is required.")
            return
        try:
            value = float(raw)
        except (TypeError, ValueError):
            self._add_error(field, "Enter a valid number for the amount.")
            return
        if value != value or value in (float("inf"), float("-inf")):
            self._add_error(field, "Enter a valid number for the amount.")
        elif value < 0 and not allow_negative:
            self._add_error(field, "Amount cannot be negative.")
        elif value == 0 and not allow_zero:
            self._add_error(field, "Amount cannot be zero.")
        else:
            self.cleaned[field] = round(value, 2)

    def _choice(self, field: str, raw: str, choices: list[str], *, default: Optional[str] = None) -> None:
        value = raw.lower() or default
        if value is None:
            self._add_error(field, f"{field.capitalize()} is required.")
        elif value not in choices:
            self._add_error(field, f"Must be one of: {', '.join(choices)}.")
        else:
            self.cleaned[field] = value


def parse_date(raw: str) -> date:
    """Accept ``YYYY-MM-DD`` or a full ISO timestamp."""

    if len(raw) == 10:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    return datetime.fromisoformat(raw).date()
