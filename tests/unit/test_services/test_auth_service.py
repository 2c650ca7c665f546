# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

import pytest
from fastapi import Response

from linkhub.config import Settings
from linkhub.models.enums import UserRole, UserStatus
from linkhub.services import auth_service
from linkhub.services.auth_service import (
    AuthError,
    ForbiddenError,
    UnauthorizedError,
)
from linkhub.services.session_store import SessionStore


def test_login_success_returns_token_and_user(db_session, make_user):
    user = make_user(email="a@x.com", password="secret1")
    store = SessionStore()

    result = auth_service.login(db_session, store, "a@x.com", "secret1")

    assert result is not None
    assert result.user.id == user.id
    session = store.get(result.token)
    assert session is not None
    assert session.user_id == user.id
    assert session.role == UserRole.USER


def test_login_email_is_case_insensitive(db_session, make_user):
    make_user(email="a@x.com", password="secret1")
    store = SessionStore()
    assert auth_service.login(db_session, store, "  A@X.com ", "secret1") is not None


def test_login_failures_are_indistinguishable(db_session, make_user):
    make_user(email="a@x.com", password="secret1")
    make_user(email="off@x.com", password="secret1", status=UserStatus.INACTIVE)
    store = SessionStore()

    assert auth_service.login(db_session, store, "a@x.com", "wrong") is None
    assert auth_service.login(db_session, store, "nobody@x.com", "secret1") is None
    assert auth_service.login(db_session, store, "off@x.com", "secret1") is None
    assert len(store) == 0


def test_logout_removes_session(db_session, make_user):
    make_user(email="a@x.com", password="secret1")
    store = SessionStore()
    result = auth_service.login(db_session, store, "a@x.com", "secret1")

    auth_service.logout(store, result.token)

    assert store.get(result.token) is None


def test_logout_without_token_is_noop():
    store = SessionStore()
    auth_service.logout(store, None)
    auth_service.logout(store, "")


def test_auth_middleware_anonymous(db_session):
    store = SessionStore()
    for token in (None, "", "unknown-token"):
        context = auth_service.auth_middleware(db_session, store, token)
        assert context.user is None
        assert context.is_authenticated is False
        assert context.is_admin is False


def test_auth_middleware_user_and_admin(db_session, make_user):
    user = make_user(email="u@x.com")
    admin = make_user(email="admin@x.com", role=UserRole.ADMIN)
    store = SessionStore()

    user_ctx = auth_service.auth_middleware(
        db_session, store, store.create(user.id, user.role)
    )
    assert user_ctx.is_authenticated is True
    assert user_ctx.is_admin is False
    assert user_ctx.user.id == user.id

    admin_ctx = auth_service.auth_middleware(
        db_session, store, store.create(admin.id, admin.role)
    )
    assert admin_ctx.is_authenticated is True
    assert admin_ctx.is_admin is True


def test_deactivated_user_loses_access_mid_session(db_session, make_user):
    user = make_user(email="a@x.com", password="secret1")
    store = SessionStore()
    token = auth_service.login(db_session, store, "a@x.com", "secret1").token
    assert store.get(token) is not None

    user.status = UserStatus.INACTIVE
    db_session.commit()

    context = auth_service.auth_middleware(db_session, store, token)
    assert context.is_authenticated is False
    assert context.user is None
    # The token itself has not expired
    assert store.get(token) is not None


def test_deleted_user_loses_access(db_session, make_user):
    user = make_user(email="gone@x.com")
    store = SessionStore()
    token = store.create(user.id, user.role)

    db_session.delete(user)
    db_session.commit()

    assert auth_service.get_current_user(db_session, store, token) is None


def test_admin_flag_follows_live_role(db_session, make_user):
    user = make_user(email="a@x.com", role=UserRole.ADMIN)
    store = SessionStore()
    token = store.create(user.id, user.role)

    user.role = UserRole.USER
    db_session.commit()

    assert auth_service.auth_middleware(db_session, store, token).is_admin is False


def test_require_auth(db_session, make_user):
    user = make_user(email="a@x.com")
    store = SessionStore()
    with pytest.raises(UnauthorizedError):
        auth_service.require_auth(db_session, store, None)
    assert auth_service.require_auth(
        db_session, store, store.create(user.id, user.role)
    ).id == user.id


def test_require_admin_distinguishes_failures(db_session, make_user):
    user = make_user(email="a@x.com")
    admin = make_user(email="b@x.com", role=UserRole.ADMIN)
    store = SessionStore()

    with pytest.raises(UnauthorizedError):
        auth_service.require_admin(db_session, store, "bogus")
    with pytest.raises(ForbiddenError):
        auth_service.require_admin(db_session, store, store.create(user.id, user.role))
    assert auth_service.require_admin(
        db_session, store, store.create(admin.id, admin.role)
    ).id == admin.id

    assert issubclass(UnauthorizedError, AuthError)
    assert issubclass(ForbiddenError, AuthError)
    assert not issubclass(ForbiddenError, UnauthorizedError)


def test_set_auth_cookie_attributes(monkeypatch):
    monkeypatch.setattr(
        auth_service, "get_settings", lambda: Settings(environment="development")
    )
    response = Response()
    auth_service.set_auth_cookie(response, "abc123")

    cookie = response.headers["set-cookie"]
    assert cookie.startswith("session_token=abc123")
    assert "HttpOnly" in cookie
    assert "Max-Age=86400" in cookie
    assert "Path=/" in cookie
    assert "SameSite=lax" in cookie
    assert "Secure" not in cookie


def test_set_auth_cookie_secure_in_production(monkeypatch):
    monkeypatch.setattr(
        auth_service, "get_settings", lambda: Settings(environment="production")
    )
    response = Response()
    auth_service.set_auth_cookie(response, "abc123", max_age=60)

    cookie = response.headers["set-cookie"]
    assert "Secure" in cookie
    assert "Max-Age=60" in cookie


def test_clear_auth_cookie():
    response = Response()
    auth_service.clear_auth_cookie(response)

    cookie = response.headers["set-cookie"]
    assert cookie.startswith('session_token=""')
    assert "Max-Age=0" in cookie
    assert "Path=/" in cookie
