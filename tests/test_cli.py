"""Tests for the Flask CLI commands."""

from __future__ import annotations

import json
from datetime import date

from budgettracker.models import Budget, Transaction

from .conftest import USER_ID


def _seed(app):
    context = app.extensions["budgettracker"]
    context.budgets.create(Budget(user_id=USER_ID, category="groceries", amount=100), user_id=USER_ID)
    context.transactions.create(
        Transaction(user_id=USER_ID, amount=85, category="groceries", date=date.today()),
        user_id=USER_ID,
    )


def test_budget_status_command(app):
    _seed(app)

    result = app.test_cli_runner().invoke(args=["budget-status", "--user-id", USER_ID])

    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["period"] == "monthly"
    assert report["alerts"][0]["status"] == "warning"


def test_budget_status_accepts_period_aliases(app):
    runner = app.test_cli_runner()

    for alias, canonical in (("month", "monthly"), ("quarter", "quarterly"), ("year", "yearly")):
        result = runner.invoke(args=["budget-status", "--user-id", USER_ID, "--period", alias])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["period"] == canonical


def test_export_transactions_command(app, tmp_path):
    _seed(app)
    output = tmp_path / "out.csv"

    result = app.test_cli_runner().invoke(
        args=["export-transactions", "--user-id", USER_ID, "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Exported 1 transaction(s)" in result.output
    assert output.read_text(encoding="utf-8").splitlines()[1].endswith(",groceries,85,")


def test_seed_categories_command(app):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed-categories", "--user-id", USER_ID])
    second = runner.invoke(args=["seed-categories", "--user-id", USER_ID])

    assert first.exit_code == 0
    assert first.output == second.output
