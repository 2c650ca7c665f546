# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management service."""

import logging
from dataclasses import dataclass

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from linkhub.database import like_pattern
from linkhub.models import User
from linkhub.models.enums import UserRole, UserStatus
from linkhub.schemas.user import UserCreate, UserUpdate, normalize_email
from linkhub.security import get_password_hash

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Another user already uses this email address."""


@dataclass
class UserFilters:
    """Filters for listing users."""

    search: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_email_with_password(db: Session, email: str) -> User | None:
    """Get a user by email for credential checks.

    Unlike the other lookups this one is meant to have its password hash
    read. Callers outside the auth service should not use it.
    """
    return get_user_by_email(db, email)


def get_users(
    db: Session,
    filters: UserFilters | None = None,
    limit: int = 100,
    offset: int = 0,
) -> tuple[list[User], int]:
    """List users matching the filters. Returns (page, total)."""
    filters = filters or UserFilters()
    query = db.query(User)
    if filters.search:
        pattern = like_pattern(filters.search.strip().lower())
        query = query.filter(
            or_(
                func.lower(User.name).like(pattern, escape="\\"),
                User.email.like(pattern, escape="\\"),
            )
        )
    if filters.role:
        query = query.filter(User.role == filters.role)
    if filters.status:
        query = query.filter(User.status == filters.status)

    total = query.count()
    users = (
        query.order_by(User.created_at.desc(), User.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return users, total


def create_user(db: Session, data: UserCreate) -> User:
    """Create a new user."""
    if get_user_by_email(db, data.email):
        raise DuplicateEmailError(data.email)

    user = User(
        name=data.name,
        email=data.email,
        password_hash=get_password_hash(data.password),
        role=data.role,
        status=data.status,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError(data.email) from e
    db.refresh(user)

    logger.info(f"Created user {user.id} with role {user.role.value}")
    return user


def update_user(db: Session, user: User, data: UserUpdate) -> User:
    """Update an existing user, including the password when given."""
    if data.email is not None and data.email != user.email:
        existing = get_user_by_email(db, data.email)
        if existing and existing.id != user.id:
            raise DuplicateEmailError(data.email)
        user.email = data.email
    if data.name is not None:
        user.name = data.name
    if data.role is not None:
        user.role = data.role
    if data.status is not None:
        user.status = data.status
    if data.password:
        user.password_hash = get_password_hash(data.password)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError(data.email) from e
    db.refresh(user)
    return user


def set_user_status(db: Session, user_id: int, status: UserStatus) -> bool:
    """Set a user's status. Returns False if the user does not exist."""
    user = get_user_by_id(db, user_id)
    if not user:
        return False
    user.status = status
    db.commit()
    logger.info(f"User {user_id} set to {status.value}")
    return True


def deactivate_user(db: Session, user_id: int) -> bool:
    """Deactivate a user. Their sessions stop working on the next request."""
    return set_user_status(db, user_id, UserStatus.INACTIVE)


def delete_user(db: Session, user_id: int) -> bool:
    """Permanently delete a user."""
    user = get_user_by_id(db, user_id)
    if not user:
        return False
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")
    return True
