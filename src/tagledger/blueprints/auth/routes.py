"""Registration, login and account routes."""

from __future__ import annotations

from flask import current_app, jsonify, request

from ...config import BaseConfig
from ...errors import NotFoundOrUnowned
from ...extensions import get_services
from ...logging_config import get_logger
from ...models.user import User
from ...security import current_user_id, token_required
from ...services import auth
from ..forms import body_mapping
from . import bp
from .forms import CredentialsForm

logger = get_logger(__name__)


def _session_payload(user: User) -> dict:
    config: BaseConfig = current_app.config["TAGLEDGER_CONFIG"]
    token = auth.issue_token(
        user_id=user.user_id,
        username=user.username,
        secret=config.JWT_SECRET,
        ttl_days=config.TOKEN_TTL_DAYS,
        algorithm=config.JWT_ALGORITHM,
    )
    return {"user": {"userId": user.user_id, "username": user.username}, "token": token}


@bp.post("/register")
def register():
    """Create an account and log it in straight away."""

    form = CredentialsForm.from_mapping(body_mapping(request.get_json(silent=True)))
    logger.info("POST /register requested", extra={"username": form.username})
    form.ensure_valid()

    user = auth.create_user(
        username=form.username, password=form.password, users=get_services().users
    )
    return jsonify(_session_payload(user)), 201


@bp.post("/login")
def login():
    form = CredentialsForm.from_mapping(body_mapping(request.get_json(silent=True)))
    logger.info("POST /login requested", extra={"username": form.username})
    form.ensure_valid()

    user = auth.authenticate(
        username=form.username, password=form.password, users=get_services().users
    )
    return jsonify(_session_payload(user)), 201


@bp.get("/verify-token")
@token_required
def verify_token():
    return "", 200


@bp.delete("/users")
@token_required
def delete_account():
    """Delete the calling user together with all owned transactions."""

    user_id = current_user_id()
    logger.info("DELETE /users requested", extra={"user_id": user_id})
    if not auth.delete_user(user_id=user_id, users=get_services().users):
        raise NotFoundOrUnowned("User wasn't deleted.")
    return "", 201
