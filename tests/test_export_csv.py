"""Tests for CSV export."""

from __future__ import annotations

import csv
import io
from datetime import date

from budgettracker.domain.filters import TransactionFilters
from budgettracker.domain.results import LOCAL
from budgettracker.services.export_csv import (
    HEADERS,
    export_transactions_csv,
    export_user_transactions,
    transactions_to_csv,
)

from .conftest import USER_ID


def test_plain_rows_split_back_into_original_fields(transaction_factory):
    txns = [
        transaction_factory(amount=120, category="groceries", description="Weekly shop", txn_date=date(2024, 3, 1)),
        transaction_factory(amount=2500.5, category="salary", txn_type="income", description="March pay"),
    ]

    lines = transactions_to_csv(txns).strip("\n").split("\n")

    assert lines[0].split(",") == HEADERS
    assert lines[1].split(",") == ["2024-03-01", "expense", "groceries", "120", "Weekly shop"]
    assert lines[2].split(",") == ["2024-03-10", "income", "salary", "2500.5", "March pay"]


def test_descriptions_with_delimiters_are_quoted(transaction_factory):
    description = 'Dinner, drinks and "tips"\nsplit three ways'
    text = transactions_to_csv([transaction_factory(description=description)])

    rows = list(csv.reader(io.StringIO(text)))

    assert len(rows) == 2
    assert rows[1][4] == description


def test_inner_quotes_are_written_raw(transaction_factory):
    text = transactions_to_csv([transaction_factory(amount=12.5, description='the "good" cheese')])

    fields = text.strip("\n").split("\n")[1].split(",")

    assert fields[3:] == ["12.5", 'the "good" cheese']
    assert list(csv.reader(io.StringIO(text)))[1][4] == 'the "good" cheese'


def test_leading_quote_is_escaped(transaction_factory):
    description = '"Quoted" receipt'
    text = transactions_to_csv([transaction_factory(description=description)])

    assert text.splitlines()[1].endswith(',"""Quoted"" receipt"')
    assert list(csv.reader(io.StringIO(text)))[1][4] == description


def test_missing_description_is_empty(transaction_factory):
    text = transactions_to_csv([transaction_factory(description=None)])

    assert text.splitlines()[1].endswith(",10,")


def test_empty_export_has_header_only():
    assert transactions_to_csv([]) == ",".join(HEADERS) + "\n"


def test_export_transactions_csv_writes_file(tmp_path, transaction_factory):
    output = tmp_path / "nested" / "export.csv"

    path = export_transactions_csv(transactions=[transaction_factory()], output_path=output)

    assert path == output
    with output.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == HEADERS
    assert rows[1][2] == "groceries"


def test_export_user_transactions_applies_filters(transactions, transaction_factory, probe):
    probe.up = False
    transactions.create(transaction_factory(category="groceries"), user_id=USER_ID)
    transactions.create(transaction_factory(category="dining"), user_id=USER_ID)

    result = export_user_transactions(
        transactions, user_id=USER_ID, filters=TransactionFilters(category="dining")
    )

    assert result.source == LOCAL
    rows = list(csv.reader(io.StringIO(result.unwrap())))
    assert [row[2] for row in rows[1:]] == ["dining"]
