"""Authentication, account management and bearer credentials."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from jwt import ExpiredSignatureError, InvalidTokenError
from sqlalchemy.exc import IntegrityError

from ..domain.repositories import UserRepository
from ..errors import AuthError, DuplicateUsernameError, StorageError
from ..logging_config import get_logger
from ..models.user import User

logger = get_logger(__name__)

_hasher = PasswordHasher()

DEFAULT_ALGORITHM = "HS256"


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identity carried by a verified bearer credential."""

    user_id: int
    username: str
    expires_at: datetime

    def public_user(self) -> dict[str, Any]:
        return {"userId": self.user_id, "username": self.username}


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    try:
        return _hasher.verify(password_hash, password)
    except (VerifyMismatchError, InvalidHash, VerificationError):
        return False


def create_user(*, username: str, password: str, users: UserRepository) -> User:
    """Register a new account with an argon2 password hash."""

    if users.get_by_username(username) is not None:
        raise DuplicateUsernameError(username)
    try:
        user = users.create(username=username, password_hash=hash_password(password))
    except StorageError as exc:
        # Lost a race against a concurrent registration of the same name
        if isinstance(exc.__cause__, IntegrityError):
            raise DuplicateUsernameError(username) from exc
        raise
    logger.info("User registered", extra={"user_id": user.user_id, "username": username})
    return user


def authenticate(*, username: str, password: str, users: UserRepository) -> User:
    """Return the user for valid credentials, raising ``AuthError`` otherwise."""

    user = users.get_by_username(username)
    if user is None:
        raise AuthError("User with provided username is not found!")
    if not verify_password(user.password_hash, password):
        raise AuthError("Invalid password!")
    return user


def delete_user(*, user_id: int, users: UserRepository) -> bool:
    """Delete an account and, through the cascade, all of its transactions."""

    deleted = users.delete(user_id)
    if deleted:
        logger.info("User deleted", extra={"user_id": user_id})
    return deleted


def issue_token(
    *,
    user_id: int,
    username: str,
    secret: str,
    ttl_days: int,
    algorithm: str = DEFAULT_ALGORITHM,
    now: Optional[datetime] = None,
) -> str:
    """Sign a credential carrying ``userId`` and ``username``."""

    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=ttl_days),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, *, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> TokenClaims:
    """Verify signature and expiry; any failure is a 403 ``AuthError``."""

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "userId", "username"]},
        )
    except ExpiredSignatureError as exc:
        raise AuthError("Token has expired.", status_code=403) from exc
    except InvalidTokenError as exc:
        raise AuthError("Invalid token.", status_code=403) from exc

    user_id = payload["userId"]
    username = payload["username"]
    if not isinstance(user_id, int) or not isinstance(username, str):
        raise AuthError("Invalid token.", status_code=403)
    return TokenClaims(
        user_id=user_id,
        username=username,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
