# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Devotional schemas."""

import datetime

from pydantic import BaseModel, Field, field_validator

from linkhub.models.enums import DevotionalStatus


class DevotionalCreate(BaseModel):
    """Schema for creating a devotional."""

    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    devotional_date: datetime.date
    status: DevotionalStatus = DevotionalStatus.DRAFT

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v


class DevotionalUpdate(BaseModel):
    """Schema for updating a devotional."""

    id: int
    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = Field(None, min_length=1)
    devotional_date: datetime.date | None = None
    status: DevotionalStatus | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v


class DevotionalResponse(BaseModel):
    """Schema for devotional response."""

    id: int
    title: str
    content: str
    devotional_date: datetime.date
    status: DevotionalStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime
    deleted_at: datetime.datetime | None = None

    model_config = {"from_attributes": True}


class DevotionalEnvelope(BaseModel):
    devotional: DevotionalResponse


class DevotionalListResponse(BaseModel):
    devotionals: list[DevotionalResponse]
