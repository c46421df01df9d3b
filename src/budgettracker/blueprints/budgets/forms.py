"""Budget form validation helpers."""

from __future__ import annotations

from ...domain.periods import normalize_period
from ...errors import ValidationError
from ..forms import EntryForm


class BudgetForm(EntryForm):
    fields = ("category", "amount", "period")

    def clean_category(self, raw: str) -> None:
        self._text("category", raw, required=True, max_length=64)

    def clean_amount(self, raw: str) -> None:
        # A zero limit is allowed; any spending against it counts as exceeded.
        self._amount("amount", raw, allow_zero=True)

    def clean_period(self, raw: str) -> None:
        try:
            self.cleaned["period"] = normalize_period(raw or None).value
        except ValidationError as exc:
            for message in exc.fields.get("period", []):
                self._add_error("period", message)
