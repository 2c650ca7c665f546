# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Cookie, Depends, Request
from sqlalchemy.orm import Session

from linkhub.database import get_db
from linkhub.models import User
from linkhub.services import auth_service
from linkhub.services.auth_service import AuthContext
from linkhub.services.session_store import SessionStore

__all__ = [
    "get_auth_context",
    "get_current_admin",
    "get_current_user",
    "get_db",
    "get_session_store",
]


def get_session_store(request: Request) -> SessionStore:
    """Get the application's session store."""
    return request.app.state.session_store


def get_auth_context(
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
    session_token: str | None = Cookie(default=None),
) -> AuthContext:
    """Resolve the session cookie to an identity. Never fails."""
    return auth_service.auth_middleware(db, store, session_token)


def get_current_user(
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
    session_token: str | None = Cookie(default=None),
) -> User:
    """Get current authenticated user from session cookie.

    Raises UnauthorizedError, which the app maps to 401.
    """
    return auth_service.require_auth(db, store, session_token)


def get_current_admin(
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
    session_token: str | None = Cookie(default=None),
) -> User:
    """Get current user and verify they are an admin.

    Raises UnauthorizedError (401) or ForbiddenError (403).
    """
    return auth_service.require_admin(db, store, session_token)
