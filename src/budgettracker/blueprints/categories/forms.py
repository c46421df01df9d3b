"""Category form validation helpers."""

from __future__ import annotations

from ...constants.categories import TRANSACTION_TYPES
from ..forms import EntryForm


class CategoryForm(EntryForm):
    fields = ("name", "type", "icon")

    def clean_name(self, raw: str) -> None:
        self._text("name", raw, required=True, max_length=64)

    def clean_type(self, raw: str) -> None:
        self._choice("type", raw, TRANSACTION_TYPES, default="expense")

    def clean_icon(self, raw: str) -> None:
        self._text("icon", raw, required=False, max_length=32)
