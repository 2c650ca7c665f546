# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

from pydantic import BaseModel

from linkhub.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login credentials. Presence is checked by the endpoint."""

    email: str | None = None
    password: str | None = None


class AuthData(BaseModel):
    user: UserResponse


class AuthResponse(BaseModel):
    """Response for a successful login."""

    success: bool = True
    data: AuthData


class CurrentUserData(BaseModel):
    user: UserResponse
    is_admin: bool


class CurrentUserResponse(BaseModel):
    """Response for the current-user endpoint."""

    success: bool = True
    data: CurrentUserData
