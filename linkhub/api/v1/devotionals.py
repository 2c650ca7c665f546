# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Devotional API endpoints: admin management and the public feed."""

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from linkhub.api.deps import get_current_admin, get_db
from linkhub.models import User
from linkhub.models.enums import DevotionalStatus
from linkhub.schemas.common import SuccessResponse
from linkhub.schemas.devotional import (
    DevotionalCreate,
    DevotionalEnvelope,
    DevotionalListResponse,
    DevotionalResponse,
    DevotionalUpdate,
)
from linkhub.services import devotional_service

router = APIRouter()
public_router = APIRouter()


class DeleteAction(str, Enum):
    SOFT = "soft"
    RESTORE = "restore"


@router.get("", response_model=DevotionalListResponse)
def list_devotionals(
    devotional_status: DevotionalStatus | None = Query(None, alias="status"),
    search: str | None = None,
    include_deleted: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> DevotionalListResponse:
    """List devotionals with filters."""
    devotionals = devotional_service.list_devotionals(
        db,
        status=devotional_status,
        search=search,
        include_deleted=include_deleted,
    )
    return DevotionalListResponse(
        devotionals=[DevotionalResponse.model_validate(d) for d in devotionals]
    )


@router.post(
    "", response_model=DevotionalEnvelope, status_code=status.HTTP_201_CREATED
)
def create_devotional(
    data: DevotionalCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> DevotionalEnvelope:
    """Create a new devotional."""
    devotional = devotional_service.create_devotional(db, data)
    return DevotionalEnvelope(devotional=DevotionalResponse.model_validate(devotional))


@router.patch("", response_model=DevotionalEnvelope)
def update_devotional(
    data: DevotionalUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> DevotionalEnvelope:
    """Update a devotional."""
    devotional = devotional_service.get_devotional(db, data.id)
    if not devotional:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Devotional not found",
        )
    devotional = devotional_service.update_devotional(db, devotional, data)
    return DevotionalEnvelope(devotional=DevotionalResponse.model_validate(devotional))


@router.delete("", response_model=SuccessResponse)
def delete_devotional(
    devotional_id: int = Query(..., alias="id"),
    action: DeleteAction = DeleteAction.SOFT,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> SuccessResponse:
    """Soft delete a devotional, or restore one with action=restore."""
    if not devotional_service.get_devotional(db, devotional_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Devotional not found",
        )

    if action == DeleteAction.RESTORE:
        if not devotional_service.restore_devotional(db, devotional_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Devotional is not deleted",
            )
    elif not devotional_service.soft_delete_devotional(db, devotional_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Devotional not found or already deleted",
        )

    return SuccessResponse()


@public_router.get("", response_model=DevotionalListResponse)
def list_published_devotionals(
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
) -> DevotionalListResponse:
    """Published devotionals for the public profile page."""
    devotionals = devotional_service.list_published(db, limit=limit)
    return DevotionalListResponse(
        devotionals=[DevotionalResponse.model_validate(d) for d in devotionals]
    )
