"""Transaction form validation helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...constants.categories import TRANSACTION_TYPES
from ...domain.filters import TransactionFilters
from ...errors import ValidationError
from ..forms import EntryForm, parse_date

MAX_PAGE_SIZE = 500


class TransactionForm(EntryForm):
    """Represents transaction input prior to validation."""

    fields = ("date", "amount", "type", "category", "description", "account_id", "budget_id")

    def clean_date(self, raw: str) -> None:
        if not raw:
            self._add_error("date", "Date is required.")
            return
        try:
            self.cleaned["date"] = parse_date(raw)
        except ValueError:
            self._add_error("date", "Enter a valid date (YYYY-MM-DD).")

    def clean_amount(self, raw: str) -> None:
        self._amount("amount", raw)

    def clean_type(self, raw: str) -> None:
        self._choice("type", raw, TRANSACTION_TYPES, default="expense")

    def clean_category(self, raw: str) -> None:
        self._text("category", raw, required=True, max_length=64)

    def clean_description(self, raw: str) -> None:
        self._text("description", raw, required=False, max_length=255)

    def clean_account_id(self, raw: str) -> None:
        self._text("account_id", raw, required=False, max_length=36)

    def clean_budget_id(self, raw: str) -> None:
        self._text("budget_id", raw, required=False, max_length=36)


def _int_arg(args: Mapping[str, Any], key: str, errors: dict[str, list[str]], *, minimum: int) -> int | None:
    raw = (args.get(key) or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        errors.setdefault(key, []).append("Must be a whole number.")
        return None
    if value < minimum:
        errors.setdefault(key, []).append(f"Must be at least {minimum}.")
        return None
    return value


def filters_from_args(args: Mapping[str, Any]) -> TransactionFilters:
    """Build ``TransactionFilters`` from query-string arguments."""

    errors: dict[str, list[str]] = {}
    dates = {}
    for key in ("start_date", "end_date"):
        raw = (args.get(key) or "").strip()
        if not raw:
            dates[key] = None
            continue
        try:
            dates[key] = parse_date(raw)
        except ValueError:
            errors.setdefault(key, []).append("Enter a valid date (YYYY-MM-DD).")
            dates[key] = None

    txn_type = (args.get("type") or "").strip().lower() or None
    if txn_type is not None and txn_type not in TRANSACTION_TYPES:
        errors.setdefault("type", []).append(f"Must be one of: {', '.join(TRANSACTION_TYPES)}.")

    limit = _int_arg(args, "limit", errors, minimum=1)
    if limit is not None and limit > MAX_PAGE_SIZE:
        errors.setdefault("limit", []).append(f"Must be at most {MAX_PAGE_SIZE}.")
    offset = _int_arg(args, "offset", errors, minimum=0) or 0

    if errors:
        raise ValidationError(errors)

    return TransactionFilters(
        start_date=dates["start_date"],
        end_date=dates["end_date"],
        category=(args.get("category") or "").strip() or None,
        type=txn_type,
        account_id=(args.get("account_id") or "").strip() or None,
        limit=limit,
        offset=offset,
    )
