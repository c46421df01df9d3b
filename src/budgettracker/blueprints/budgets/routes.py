"""Budget routes."""

from __future__ import annotations

from flask import jsonify, request

from ...errors import RecordNotFoundError
from ...services import budgeting
from ..common import get_context, request_payload, require_user_id, result_response
from . import bp
from .forms import BudgetForm


def _status_kwargs(user_id: str) -> dict:
    context = get_context()
    return {
        "budgets": context.budgets,
        "transactions": context.transactions,
        "user_id": user_id,
        "period": request.args.get("period"),
        "alert_threshold": context.config.ALERT_THRESHOLD,
    }


@bp.get("/")
def list_budgets():
    user_id = require_user_id()
    result = budgeting.list_budgets(
        get_context().budgets, user_id=user_id, period=request.args.get("period")
    )
    return result_response(result, "budgets")


@bp.get("/status")
def budget_status():
    """Per-category spending against each budget for the current period."""

    user_id = require_user_id()
    result = budgeting.get_budget_status(**_status_kwargs(user_id))
    report = result.unwrap()
    body = report.to_dict()
    body["source"] = result.source
    return jsonify(body)


@bp.get("/alerts")
def budget_alerts():
    user_id = require_user_id()
    result = budgeting.get_budget_alerts(**_status_kwargs(user_id))
    return result_response(result, "alerts", serialize=lambda alert: alert.to_dict())


@bp.post("/")
def create_budget():
    user_id = require_user_id()
    data = BudgetForm.from_mapping(request_payload()).validated_data()
    result = budgeting.create_budget(get_context().budgets, user_id=user_id, **data)
    return result_response(result, "budget", status=201)


@bp.route("/<record_id>", methods=["PATCH", "PUT"])
def update_budget(record_id: str):
    user_id = require_user_id()
    changes = BudgetForm.from_mapping(request_payload(), partial=True).validated_data()
    result = budgeting.update_budget(get_context().budgets, record_id, changes, user_id=user_id)
    return result_response(result, "budget")


@bp.delete("/<record_id>")
def delete_budget(record_id: str):
    user_id = require_user_id()
    result = get_context().budgets.delete(record_id, user_id=user_id)
    if not result.unwrap():
        raise RecordNotFoundError("Budget", record_id)
    return jsonify({"deleted": True, "source": result.source})
