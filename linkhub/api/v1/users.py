# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints (admin only)."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from linkhub.api.deps import get_current_admin, get_db
from linkhub.models import User
from linkhub.models.enums import UserRole, UserStatus
from linkhub.schemas.common import SuccessResponse
from linkhub.schemas.user import (
    UserCreate,
    UserEnvelope,
    UserList,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from linkhub.services import user_service
from linkhub.services.user_service import DuplicateEmailError, UserFilters

router = APIRouter()


@router.get("", response_model=UserListResponse, summary="List users")
def list_users(
    search: str | None = None,
    role: UserRole | None = None,
    user_status: UserStatus | None = Query(None, alias="status"),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> UserListResponse:
    """List users, newest first, with optional filters."""
    users, total = user_service.get_users(
        db,
        UserFilters(search=search, role=role, status=user_status),
        limit=limit,
        offset=offset,
    )
    return UserListResponse(
        data=UserList(
            users=[UserResponse.model_validate(u) for u in users],
            total=total,
        )
    )


@router.post("", response_model=UserEnvelope, summary="Create a new user")
def create_user(
    data: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> UserEnvelope:
    """Create a new user."""
    try:
        user = user_service.create_user(db, data)
    except DuplicateEmailError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already exists",
        ) from None
    return UserEnvelope(data=UserResponse.model_validate(user))


@router.put("", response_model=UserEnvelope, summary="Update a user")
def update_user(
    data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> UserEnvelope:
    """Update a user's profile, role, status or password."""
    if data.status == UserStatus.INACTIVE and data.id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot deactivate your own account",
        )

    user = user_service.get_user_by_id(db, data.id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    try:
        user = user_service.update_user(db, user, data)
    except DuplicateEmailError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already exists",
        ) from None
    return UserEnvelope(data=UserResponse.model_validate(user))


@router.delete(
    "", response_model=SuccessResponse, summary="Deactivate or delete a user"
)
def delete_user(
    user_id: int = Query(..., alias="id"),
    hard: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> SuccessResponse:
    """Deactivate a user, or delete them permanently with hard=true."""
    if user_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete your own account",
        )

    if hard:
        if not user_service.delete_user(db, user_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return SuccessResponse(message="User deleted permanently")

    if not user_service.deactivate_user(db, user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return SuccessResponse(message="User deactivated")
