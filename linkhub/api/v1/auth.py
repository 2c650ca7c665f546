# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from linkhub.api.deps import get_auth_context, get_db, get_session_store
from linkhub.schemas.auth import (
    AuthData,
    AuthResponse,
    CurrentUserData,
    CurrentUserResponse,
    LoginRequest,
)
from linkhub.schemas.common import SuccessResponse
from linkhub.schemas.user import UserResponse
from linkhub.services import auth_service
from linkhub.services.auth_service import AuthContext, UnauthorizedError
from linkhub.services.session_store import SessionStore

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> AuthResponse:
    """Login with email and password."""
    if not data.email or not data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password required",
        )

    result = auth_service.login(db, store, data.email, data.password)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    auth_service.set_auth_cookie(
        response, result.token, max_age=int(store.duration.total_seconds())
    )
    return AuthResponse(data=AuthData(user=UserResponse.model_validate(result.user)))


@router.post("/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    store: SessionStore = Depends(get_session_store),
    session_token: str | None = Cookie(default=None),
) -> SuccessResponse:
    """Logout. Succeeds without an active session too."""
    auth_service.logout(store, session_token)
    auth_service.clear_auth_cookie(response)
    return SuccessResponse()


@router.get("/me", response_model=CurrentUserResponse)
def get_current_user_info(
    context: AuthContext = Depends(get_auth_context),
) -> CurrentUserResponse:
    """Get current authenticated user."""
    if not context.is_authenticated or context.user is None:
        raise UnauthorizedError("Not authenticated")
    return CurrentUserResponse(
        data=CurrentUserData(
            user=UserResponse.model_validate(context.user),
            is_admin=context.is_admin,
        )
    )
