# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service.

Resolves a session token to a user, gates admin access and handles the
login/logout flow. Tokens come from the ``session_token`` cookie; the
store they are checked against is passed in by the caller.
"""

import logging
from dataclasses import dataclass

from fastapi import Response
from sqlalchemy.orm import Session

from linkhub.config import get_settings
from linkhub.models import User
from linkhub.security import verify_password
from linkhub.services import user_service
from linkhub.services.session_store import SessionStore

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session_token"


class AuthError(Exception):
    """Base exception for authentication failures."""


class UnauthorizedError(AuthError):
    """No valid session."""


class ForbiddenError(AuthError):
    """Valid session without the required privilege."""


@dataclass
class AuthContext:
    """Identity derived from a request's session cookie."""

    user: User | None
    is_authenticated: bool
    is_admin: bool


@dataclass
class LoginResult:
    user: User
    token: str


ANONYMOUS = AuthContext(user=None, is_authenticated=False, is_admin=False)


def auth_middleware(
    db: Session, store: SessionStore, token: str | None
) -> AuthContext:
    """Work out who a request belongs to. Never raises.

    The user is re-read on every call, so deactivating a user locks them
    out even while their session token is still unexpired.
    """
    if not token:
        return ANONYMOUS

    session = store.get(token)
    if not session:
        return ANONYMOUS

    user = user_service.get_user_by_id(db, session.user_id)
    if not user or not user.is_active:
        return ANONYMOUS

    return AuthContext(user=user, is_authenticated=True, is_admin=user.is_admin)


def get_current_user(
    db: Session, store: SessionStore, token: str | None
) -> User | None:
    """Get the authenticated user, or None."""
    return auth_middleware(db, store, token).user


def require_auth(db: Session, store: SessionStore, token: str | None) -> User:
    """Get the authenticated user or raise UnauthorizedError."""
    user = get_current_user(db, store, token)
    if not user:
        raise UnauthorizedError("Unauthorized")
    return user


def require_admin(db: Session, store: SessionStore, token: str | None) -> User:
    """Get the authenticated admin or raise.

    Raises UnauthorizedError without a session and ForbiddenError for
    authenticated non-admins.
    """
    user = require_auth(db, store, token)
    if not user.is_admin:
        raise ForbiddenError("Admin access required")
    return user


def login(
    db: Session, store: SessionStore, email: str, password: str
) -> LoginResult | None:
    """Check credentials and open a session.

    Unknown email, inactive account and wrong password all return None so
    callers cannot tell them apart.
    """
    user = user_service.get_user_by_email_with_password(db, email)
    if not user or not user.is_active:
        logger.info("Login rejected")
        return None
    if not verify_password(password, user.password_hash):
        logger.info("Login rejected")
        return None

    token = store.create(user.id, user.role)
    logger.info(f"User {user.id} logged in")
    return LoginResult(user=user, token=token)


def logout(store: SessionStore, token: str | None) -> None:
    """Close the session behind a token. No token is not an error."""
    if token:
        store.delete(token)
        logger.info("Session closed")


def set_auth_cookie(
    response: Response, token: str, max_age: int | None = None
) -> None:
    """Attach the session cookie to a response."""
    settings = get_settings()
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        max_age=max_age if max_age is not None else settings.session_duration_seconds,
        path="/",
    )


def clear_auth_cookie(response: Response) -> None:
    """Remove the session cookie from the client."""
    settings = get_settings()
    response.delete_cookie(
        key=SESSION_COOKIE,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )
