# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Collector job schemas."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CollectorResultSchema(BaseModel):
    """Counters for one collector run."""

    processed: int = 0
    completed: int = 0
    failed: int = 0
    errors: list[str] = Field(default_factory=list)
    timestamp: datetime.datetime


class CollectorSummary(BaseModel):
    total_completed: Decimal
    total_pending: Decimal
    total_amount: Decimal


class CollectorResponse(BaseModel):
    """Response of the collector trigger endpoint."""

    success: bool = True
    message: str
    result: CollectorResultSchema
    summary: CollectorSummary | None = None
    execution_time_ms: int
