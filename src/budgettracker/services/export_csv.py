"""CSV export helpers for BudgetTracker."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Optional

from ..domain.filters import TransactionFilters
from ..domain.results import StorageResult
from ..infra.repositories.fallback import FallbackRepository
from ..models.transaction import Transaction

HEADERS = ["Date", "Type", "Category", "Amount", "Description"]


def _serialize_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, float):
        # 120.0 -> "120", 12.5 -> "12.5"
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def _quote_field(text: str) -> str:
    """Quote ``text`` only when a reader would otherwise split or unquote it.

    A quote in the middle of a field reads back literally, so such fields are
    written as-is and still split on ``,``/``\\n`` to their original value.
    """

    if "," in text or "\n" in text or "\r" in text or text.startswith('"'):
        return '"' + text.replace('"', '""') + '"'
    return text


def _format_row(values: Iterable[str]) -> str:
    return ",".join(_quote_field(value) for value in values) + "\n"


def _iter_lines(transactions: Iterable[Transaction]) -> Iterable[str]:
    yield _format_row(HEADERS)
    for tx in transactions:
        yield _format_row(
            [
                _serialize_value(tx.date),
                _serialize_value(tx.type),
                _serialize_value(tx.category),
                _serialize_value(float(tx.amount)),
                _serialize_value(tx.description),
            ]
        )


def transactions_to_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions as CSV text.

    Fields containing commas or line breaks, or starting with a quote, are
    quoted with embedded quotes doubled, so the output reads back with any
    CSV parser.
    """

    return "".join(_iter_lines(transactions))


def export_transactions_csv(*, transactions: Iterable[Transaction], output_path: Path) -> Path:
    """Write transactions to CSV at `output_path` and return the path written."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        fh.writelines(_iter_lines(transactions))
    return output_path


def export_user_transactions(
    repo: FallbackRepository,
    *,
    user_id: str,
    filters: Optional[TransactionFilters] = None,
) -> StorageResult[str]:
    """CSV text for every transaction of ``user_id`` matching ``filters``."""

    result = repo.list(user_id=user_id, filters=filters)
    if not result.ok:
        return result  # type: ignore[return-value]
    return StorageResult(
        value=transactions_to_csv(result.value or []),
        source=result.source,
        remote_error=result.remote_error,
    )
