"""Account routes."""

from __future__ import annotations

from flask import jsonify

from ...errors import RecordNotFoundError
from ...models.account import Account
from ..common import get_context, request_payload, require_user_id, result_response
from . import bp
from .forms import AccountForm


@bp.get("/")
def list_accounts():
    user_id = require_user_id()
    return result_response(get_context().accounts.list(user_id=user_id), "accounts")


@bp.get("/<record_id>")
def get_account(record_id: str):
    user_id = require_user_id()
    return result_response(get_context().accounts.get(record_id, user_id=user_id), "account")


@bp.post("/")
def create_account():
    user_id = require_user_id()
    data = AccountForm.from_mapping(request_payload()).validated_data()
    result = get_context().accounts.create(Account(user_id=user_id, **data), user_id=user_id)
    return result_response(result, "account", status=201)


@bp.route("/<record_id>", methods=["PATCH", "PUT"])
def update_account(record_id: str):
    user_id = require_user_id()
    changes = AccountForm.from_mapping(request_payload(), partial=True).validated_data()
    result = get_context().accounts.update(record_id, changes, user_id=user_id)
    return result_response(result, "account")


@bp.delete("/<record_id>")
def delete_account(record_id: str):
    user_id = require_user_id()
    result = get_context().accounts.delete(record_id, user_id=user_id)
    if not result.unwrap():
        raise RecordNotFoundError("Account", record_id)
    return jsonify({"deleted": True, "source": result.source})
