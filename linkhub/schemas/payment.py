# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Payment schemas."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from linkhub.models.enums import PaymentStatus


class PaymentCreate(BaseModel):
    """Schema for recording a payment."""

    payment_recorder_id: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., decimal_places=2)
    date: datetime.date
    description: str = Field(..., min_length=1)
    status: PaymentStatus = PaymentStatus.PENDING

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Validate that amount is positive and round to 2 decimal places."""
        if v <= 0:
            raise ValueError("Amount must be a positive number")
        return round(v, 2)


class PaymentUpdate(BaseModel):
    """Schema for updating a payment."""

    id: int
    payment_recorder_id: str | None = Field(None, min_length=1, max_length=100)
    amount: Decimal | None = Field(None, decimal_places=2)
    date: datetime.date | None = None
    description: str | None = Field(None, min_length=1)
    status: PaymentStatus | None = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal | None) -> Decimal | None:
        """Validate that amount is positive and round to 2 decimal places."""
        if v is not None:
            if v <= 0:
                raise ValueError("Amount must be a positive number")
            return round(v, 2)
        return v


class PaymentResponse(BaseModel):
    """Schema for payment response."""

    id: int
    payment_recorder_id: str
    amount: Decimal
    date: datetime.date
    description: str
    status: PaymentStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class PaymentEnvelope(BaseModel):
    payment: PaymentResponse


class PaymentListResponse(BaseModel):
    payments: list[PaymentResponse]


class PaymentSummary(BaseModel):
    """Totals across all payments."""

    total_completed: Decimal
    total_pending: Decimal
    total_amount: Decimal
    count_completed: int
    count_pending: int


class MonthlyTotal(BaseModel):
    """Completed payments aggregated per calendar month."""

    month: str  # YYYY-MM
    total: Decimal
    count: int


class PaymentSummaryResponse(BaseModel):
    summary: PaymentSummary
    monthly: list[MonthlyTotal]
