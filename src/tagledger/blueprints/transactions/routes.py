"""Transaction CRUD and analytics routes."""

from __future__ import annotations

from flask import jsonify, request

from ...errors import NotFoundOrUnowned
from ...extensions import get_services
from ...logging_config import get_logger
from ...security import current_user_id, token_required
from ...services import analytics
from ..forms import body_mapping
from . import bp
from .forms import (
    AnalyticsQueryForm,
    TransactionDeleteForm,
    TransactionForm,
    TransactionUpdateForm,
)

logger = get_logger(__name__)


@bp.get("")
@token_required
def list_transactions():
    """Return all of the user's transactions in (date, id) order."""

    user_id = current_user_id()
    logger.info("GET /transactions requested", extra={"user_id": user_id})
    records = get_services().transactions.list_for_user(user_id=user_id)
    return jsonify([record.to_dict() for record in records]), 200


@bp.post("")
@token_required
def create_transaction():
    form = TransactionForm.from_mapping(body_mapping(request.get_json(silent=True)))
    user_id = current_user_id()
    logger.info(
        "POST /transactions requested",
        extra={"user_id": user_id, "date": form.date, "amount": form.amount, "tags": form.tags},
    )
    form.ensure_valid()

    record = get_services().transactions.add(
        user_id=user_id, date=form.date, amount=form.amount, tags=form.tags
    )
    return jsonify(record.to_dict()), 201


@bp.put("")
@token_required
def update_transaction():
    form = TransactionUpdateForm.from_mapping(body_mapping(request.get_json(silent=True)))
    user_id = current_user_id()
    logger.info(
        "PUT /transactions requested",
        extra={"user_id": user_id, "transaction_id": form.raw_transaction_id},
    )
    form.ensure_valid()

    updated = get_services().transactions.update(
        user_id=user_id,
        transaction_id=form.transaction_id,
        date=form.date,
        amount=form.amount,
        tags=form.tags,
    )
    if not updated:
        raise NotFoundOrUnowned("Nothing was updated.")
    return "", 201


@bp.delete("")
@token_required
def delete_transaction():
    form = TransactionDeleteForm.from_mapping(body_mapping(request.get_json(silent=True)))
    user_id = current_user_id()
    logger.info(
        "DELETE /transactions requested",
        extra={"user_id": user_id, "transaction_id": form.raw_transaction_id},
    )
    if not form.validate():
        raise NotFoundOrUnowned("Nothing was deleted.")

    deleted = get_services().transactions.delete(
        user_id=user_id, transaction_id=form.transaction_id
    )
    if not deleted:
        raise NotFoundOrUnowned("Nothing was deleted.")
    return "", 201


@bp.get("/analytics")
@token_required
def transaction_analytics():
    """Total spendings and income for a date range and tag filter."""

    form = AnalyticsQueryForm.from_mapping(request.args)
    user_id = current_user_id()
    logger.info("GET /transactions/analytics requested", extra={"user_id": user_id})
    form.ensure_valid()

    summary = analytics.summarize(
        user_id=user_id,
        start_date=form.start_date,
        end_date=form.end_date,
        tags=form.tags,
        session_factory=get_services().session_factory,
    )
    return jsonify(summary.to_dict()), 200
