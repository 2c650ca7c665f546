# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Devotional post model."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from linkhub.models.base import Base, TimestampMixin
from linkhub.models.enums import DevotionalStatus


class Devotional(Base, TimestampMixin):
    """A devotional post. Deletion is soft via deleted_at."""

    __tablename__ = "devotionals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    devotional_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[DevotionalStatus] = mapped_column(
        Enum(DevotionalStatus, values_callable=lambda e: [m.value for m in e]),
        default=DevotionalStatus.DRAFT,
        nullable=False,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
