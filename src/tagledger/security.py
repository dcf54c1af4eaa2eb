"""Bearer credential enforcement for protected endpoints."""

from __future__ import annotations

from functools import wraps
from typing import Callable, TypeVar

from flask import current_app, g, request

from .config import BaseConfig
from .errors import AuthError
from .services import auth

F = TypeVar("F", bound=Callable)


def _bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def token_required(view: F) -> F:
    """Reject the request before the view runs unless a valid token is sent.

    A missing credential is a 401; a malformed, forged or expired one is a
    403. On success the claims are available as ``g.current_user``.
    """

    @wraps(view)
    def wrapped(*args, **kwargs):
        token = _bearer_token()
        if token is None:
            raise AuthError("Missing bearer token.", status_code=401)
        config: BaseConfig = current_app.config["TAGLEDGER_CONFIG"]
        g.current_user = auth.decode_token(
            token, secret=config.JWT_SECRET, algorithm=config.JWT_ALGORITHM
        )
        return view(*args, **kwargs)

    return wrapped  # type: ignore[return-value]


def current_user_id() -> int:
    return g.current_user.user_id
