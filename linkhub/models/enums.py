# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration."""

    ADMIN = "admin"
    USER = "user"


class UserStatus(str, Enum):
    """User status enumeration. Only active users may sign in."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class DevotionalStatus(str, Enum):
    """Devotional publication status."""

    DRAFT = "draft"
    PUBLISHED = "published"


class PaymentStatus(str, Enum):
    """Payment status enumeration.

    Status flow:
        PENDING → COMPLETED
           ↓
        CANCELLED
    """

    PENDING = "pending"  # Recorded, awaiting collection
    COMPLETED = "completed"  # Collected
    CANCELLED = "cancelled"  # Voided by an admin
