# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Payment API endpoints (admin only)."""

import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from linkhub.api.deps import get_current_admin, get_db
from linkhub.models import User
from linkhub.models.enums import PaymentStatus
from linkhub.schemas.common import SuccessResponse
from linkhub.schemas.payment import (
    PaymentCreate,
    PaymentEnvelope,
    PaymentListResponse,
    PaymentResponse,
    PaymentSummaryResponse,
    PaymentUpdate,
)
from linkhub.services import payment_service
from linkhub.services.payment_service import PaymentFilters

router = APIRouter()


@router.get("", response_model=PaymentListResponse | PaymentSummaryResponse)
def list_payments(
    start_date: datetime.date | None = None,
    end_date: datetime.date | None = None,
    payment_status: PaymentStatus | None = Query(None, alias="status"),
    recorder_id: str | None = None,
    summary: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> PaymentListResponse | PaymentSummaryResponse:
    """List payments with filters, or totals when summary=true."""
    if summary:
        return PaymentSummaryResponse(
            summary=payment_service.get_summary(db),
            monthly=payment_service.get_monthly_totals(db),
        )

    payments = payment_service.get_payments(
        db,
        PaymentFilters(
            start_date=start_date,
            end_date=end_date,
            status=payment_status,
            recorder_id=recorder_id,
        ),
    )
    return PaymentListResponse(
        payments=[PaymentResponse.model_validate(p) for p in payments]
    )


@router.post("", response_model=PaymentEnvelope, status_code=status.HTTP_201_CREATED)
def create_payment(
    data: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> PaymentEnvelope:
    """Record a new payment."""
    payment = payment_service.create_payment(db, data)
    return PaymentEnvelope(payment=PaymentResponse.model_validate(payment))


@router.patch("", response_model=PaymentEnvelope)
def update_payment(
    data: PaymentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> PaymentEnvelope:
    """Update a payment."""
    payment = payment_service.get_payment(db, data.id)
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found",
        )
    payment = payment_service.update_payment(db, payment, data)
    return PaymentEnvelope(payment=PaymentResponse.model_validate(payment))


@router.delete("", response_model=SuccessResponse)
def delete_payment(
    payment_id: int = Query(..., alias="id"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
) -> SuccessResponse:
    """Delete a payment."""
    if not payment_service.delete_payment(db, payment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found",
        )
    return SuccessResponse()
