"""Category routes."""

from __future__ import annotations

from flask import jsonify, request

from ...errors import RecordNotFoundError
from ...services import categories as category_service
from ..common import get_context, request_payload, require_user_id, serialize_record
from . import bp
from .forms import CategoryForm


@bp.get("/")
def list_categories():
    user_id = require_user_id()
    rows = category_service.get_categories(
        get_context().categories,
        user_id=user_id,
        category_type=request.args.get("type") or None,
    )
    return jsonify({"categories": [serialize_record(row) for row in rows]})


@bp.post("/")
def create_category():
    user_id = require_user_id()
    data = CategoryForm.from_mapping(request_payload()).validated_data()
    category = category_service.create_category(
        get_context().categories,
        user_id=user_id,
        name=data["name"],
        category_type=data["type"],
        icon=data.get("icon") or "more-horizontal",
    )
    return jsonify({"category": serialize_record(category)}), 201


@bp.route("/<record_id>", methods=["PATCH", "PUT"])
def update_category(record_id: str):
    user_id = require_user_id()
    changes = CategoryForm.from_mapping(request_payload(), partial=True).validated_data()
    category = category_service.update_category(
        get_context().categories, record_id, changes, user_id=user_id
    )
    return jsonify({"category": serialize_record(category)})


@bp.delete("/<record_id>")
def delete_category(record_id: str):
    user_id = require_user_id()
    if not category_service.delete_category(get_context().categories, record_id, user_id=user_id):
        raise RecordNotFoundError("Category", record_id)
    return jsonify({"deleted": True})
