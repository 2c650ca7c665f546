# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from linkhub.models.base import Base, TimestampMixin
from linkhub.models.devotional import Devotional
from linkhub.models.enums import (
    DevotionalStatus,
    PaymentStatus,
    UserRole,
    UserStatus,
)
from linkhub.models.payment import Payment
from linkhub.models.user import User

__all__ = [
    "Base",
    "Devotional",
    "DevotionalStatus",
    "Payment",
    "PaymentStatus",
    "TimestampMixin",
    "User",
    "UserRole",
    "UserStatus",
]
