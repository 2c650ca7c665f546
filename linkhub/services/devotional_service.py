# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Devotional service."""

from sqlalchemy import or_
from sqlalchemy.orm import Session

from linkhub.database import like_pattern
from linkhub.models import Devotional
from linkhub.models.base import utcnow
from linkhub.models.enums import DevotionalStatus
from linkhub.schemas.devotional import DevotionalCreate, DevotionalUpdate


def list_devotionals(
    db: Session,
    status: DevotionalStatus | None = None,
    search: str | None = None,
    include_deleted: bool = False,
) -> list[Devotional]:
    """List devotionals, newest devotional date first."""
    query = db.query(Devotional)
    if not include_deleted:
        query = query.filter(Devotional.deleted_at.is_(None))
    if status:
        query = query.filter(Devotional.status == status)
    if search:
        pattern = like_pattern(search.strip())
        query = query.filter(
            or_(
                Devotional.title.ilike(pattern, escape="\\"),
                Devotional.content.ilike(pattern, escape="\\"),
            )
        )
    return query.order_by(Devotional.devotional_date.desc(), Devotional.id.desc()).all()


def list_published(db: Session, limit: int = 10) -> list[Devotional]:
    """Published, non-deleted devotionals for the public page."""
    return (
        db.query(Devotional)
        .filter(
            Devotional.status == DevotionalStatus.PUBLISHED,
            Devotional.deleted_at.is_(None),
        )
        .order_by(Devotional.devotional_date.desc(), Devotional.id.desc())
        .limit(limit)
        .all()
    )


def get_devotional(db: Session, devotional_id: int) -> Devotional | None:
    """Get a devotional by ID, including soft-deleted ones."""
    return db.query(Devotional).filter(Devotional.id == devotional_id).first()


def create_devotional(db: Session, data: DevotionalCreate) -> Devotional:
    """Create a new devotional."""
    devotional = Devotional(
        title=data.title,
        content=data.content,
        devotional_date=data.devotional_date,
        status=data.status,
    )
    db.add(devotional)
    db.commit()
    db.refresh(devotional)
    return devotional


def update_devotional(
    db: Session, devotional: Devotional, data: DevotionalUpdate
) -> Devotional:
    """Update an existing devotional."""
    if data.title is not None:
        devotional.title = data.title
    if data.content is not None:
        devotional.content = data.content
    if data.devotional_date is not None:
        devotional.devotional_date = data.devotional_date
    if data.status is not None:
        devotional.status = data.status

    db.commit()
    db.refresh(devotional)
    return devotional


def soft_delete_devotional(db: Session, devotional_id: int) -> bool:
    """Mark a devotional deleted. False if missing or already deleted."""
    devotional = get_devotional(db, devotional_id)
    if not devotional or devotional.is_deleted:
        return False
    devotional.deleted_at = utcnow()
    db.commit()
    return True


def restore_devotional(db: Session, devotional_id: int) -> bool:
    """Undo a soft delete. False if missing or not deleted."""
    devotional = get_devotional(db, devotional_id)
    if not devotional or not devotional.is_deleted:
        return False
    devotional.deleted_at = None
    db.commit()
    return True
