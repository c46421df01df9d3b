"""Flask CLI commands for BudgetTracker."""

from __future__ import annotations

import json
from pathlib import Path

import click

from .domain.filters import TransactionFilters
from .domain.periods import PERIOD_CHOICES, BudgetPeriod
from .logging_config import get_logger

logger = get_logger("cli")


def _context():
    from .blueprints.common import get_context

    return get_context()


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("budget-status")
    @click.option("--user-id", required=True, help="Owner of the budgets")
    @click.option(
        "--period",
        type=click.Choice(PERIOD_CHOICES),
        default=BudgetPeriod.MONTHLY.value,
        show_default=True,
    )
    def budget_status(user_id: str, period: str) -> None:
        """Print the current period's budget status as JSON."""

        from .services import budgeting

        context = _context()
        result = budgeting.get_budget_status(
            budgets=context.budgets,
            transactions=context.transactions,
            user_id=user_id,
            period=period,
            alert_threshold=context.config.ALERT_THRESHOLD,
        )
        if result.degraded:
            click.echo("Database unreachable; figures come from the local store.", err=True)
        click.echo(json.dumps(result.unwrap().to_dict(), indent=2))

    @app.cli.command("export-transactions")
    @click.option("--user-id", required=True)
    @click.option("--output", "output_path", type=click.Path(dir_okay=False, path_type=Path), required=True)
    @click.option("--start-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
    @click.option("--end-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
    def export_transactions(user_id: str, output_path: Path, start_date, end_date) -> None:
        """Write the user's transactions to a CSV file."""

        from .services.export_csv import export_transactions_csv

        filters = TransactionFilters(
            start_date=start_date.date() if start_date else None,
            end_date=end_date.date() if end_date else None,
        )
        result = _context().transactions.list(user_id=user_id, filters=filters)
        rows = result.unwrap()
        path = export_transactions_csv(transactions=rows, output_path=output_path)
        click.echo(f"Exported {len(rows)} transaction(s) to {path}")

    @app.cli.command("seed-categories")
    @click.option("--user-id", required=True)
    def seed_categories(user_id: str) -> None:
        """Create the default categories for a user."""

        from .services.categories import initialize_default_categories

        rows = initialize_default_categories(_context().categories, user_id=user_id)
        logger.info("Seeded categories for %s", user_id)
        click.echo(f"{len(rows)} categories available for {user_id}")
