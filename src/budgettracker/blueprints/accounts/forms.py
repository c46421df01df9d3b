"""Account form validation helpers."""

from __future__ import annotations

from ...constants.categories import ACCOUNT_TYPES
from ..forms import EntryForm


class AccountForm(EntryForm):
    fields = ("name", "type", "balance", "currency")

    def clean_name(self, raw: str) -> None:
        self._text("name", raw, required=True, max_length=128)

    def clean_type(self, raw: str) -> None:
        self._choice("type", raw, ACCOUNT_TYPES, default="checking")

    def clean_balance(self, raw: str) -> None:
        if not raw:
            self.cleaned["balance"] = 0.0
            return
        self._amount("balance", raw, allow_zero=True, allow_negative=True)

    def clean_currency(self, raw: str) -> None:
        value = (raw or "USD").upper()
        if len(value) != 3 or not value.isalpha():
            self._add_error("currency", "Use a three-letter ISO-4217 code.")
            return
        self.cleaned["currency"] = value
