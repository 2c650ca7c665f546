# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from linkhub.models.enums import UserRole, UserStatus

PASSWORD_MIN_LENGTH = 6
# bcrypt ignores (newer releases reject) anything past 72 bytes
PASSWORD_MAX_LENGTH = 72


def normalize_email(value: str) -> str:
    return value.strip().lower()


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_LENGTH:
        raise ValueError(
            f"Password must be at most {PASSWORD_MAX_LENGTH} bytes when encoded"
        )
    return value


class UserCreate(BaseModel):
    """Schema for creating a user (admin use)."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_bytes(v)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v) if isinstance(v, str) else v


class UserUpdate(BaseModel):
    """Schema for updating a user (admin use)."""

    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(
        None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> Optional[str]:
        return check_password_bytes(v) if v is not None else v

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if isinstance(v, str) else v


class UserResponse(BaseModel):
    """Public projection of a user. Never includes the password hash."""

    id: int
    name: str
    email: str
    role: UserRole
    status: UserStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class UserList(BaseModel):
    """A page of users plus the total matching the filters."""

    users: list[UserResponse]
    total: int


class UserListResponse(BaseModel):
    success: bool = True
    data: UserList


class UserEnvelope(BaseModel):
    success: bool = True
    data: UserResponse
