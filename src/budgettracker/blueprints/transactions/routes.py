"""Transaction routes."""

from __future__ import annotations

from datetime import date

from flask import Response, jsonify, request

from ...errors import RecordNotFoundError
from ...models.transaction import Transaction
from ...services import export_csv, ledger_service
from ..common import get_context, request_payload, require_user_id, result_response, serialize_record
from . import bp
from .forms import TransactionForm, filters_from_args


@bp.get("/")
def list_transactions():
    """Return one page of the caller's transactions, newest first."""

    user_id = require_user_id()
    filters = filters_from_args(request.args)
    result = ledger_service.list_page(get_context().transactions, user_id=user_id, filters=filters)
    page = result.unwrap()
    return jsonify(
        {
            "transactions": [serialize_record(txn) for txn in page.items],
            "pagination": {
                "total": page.total,
                "limit": page.limit,
                "offset": page.offset,
                "has_next": page.has_next,
            },
            "source": result.source,
        }
    )


@bp.get("/summary")
def summary():
    user_id = require_user_id()
    result = ledger_service.get_summary(
        get_context().transactions,
        user_id=user_id,
        period=request.args.get("period"),
    )
    return result_response(result, "summary", serialize=lambda value: value.to_dict())


@bp.get("/export.csv")
def export_transactions():
    """Download the filtered transactions as CSV (paging arguments ignored)."""

    user_id = require_user_id()
    filters = filters_from_args(request.args).without_paging()
    result = export_csv.export_user_transactions(
        get_context().transactions, user_id=user_id, filters=filters
    )
    filename = f"transactions_{date.today().isoformat()}.csv"
    return Response(
        result.unwrap(),
        mimetype="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
            "X-Data-Source": result.source,
        },
    )


@bp.get("/<record_id>")
def get_transaction(record_id: str):
    user_id = require_user_id()
    result = get_context().transactions.get(record_id, user_id=user_id)
    return result_response(result, "transaction")


@bp.post("/")
def create_transaction():
    """Persist a new transaction from submitted data."""

    user_id = require_user_id()
    data = TransactionForm.from_mapping(request_payload()).validated_data()
    transaction = Transaction(user_id=user_id, **data)
    result = get_context().transactions.create(transaction, user_id=user_id)
    return result_response(result, "transaction", status=201)


@bp.route("/<record_id>", methods=["PATCH", "PUT"])
def update_transaction(record_id: str):
    user_id = require_user_id()
    changes = TransactionForm.from_mapping(request_payload(), partial=True).validated_data()
    result = get_context().transactions.update(record_id, changes, user_id=user_id)
    return result_response(result, "transaction")


@bp.delete("/<record_id>")
def delete_transaction(record_id: str):
    user_id = require_user_id()
    result = get_context().transactions.delete(record_id, user_id=user_id)
    if not result.unwrap():
        raise RecordNotFoundError("Transaction", record_id)
    return jsonify({"deleted": True, "source": result.source})
