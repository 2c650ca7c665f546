# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Payment service."""

import datetime
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from linkhub.models import Payment
from linkhub.models.enums import PaymentStatus
from linkhub.schemas.payment import (
    MonthlyTotal,
    PaymentCreate,
    PaymentSummary,
    PaymentUpdate,
)

MONTHLY_HISTORY = 12
ZERO = Decimal("0.00")


@dataclass
class PaymentFilters:
    """Filters for listing payments. Date bounds are inclusive."""

    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    status: PaymentStatus | None = None
    recorder_id: str | None = None


def get_payments(db: Session, filters: PaymentFilters | None = None) -> list[Payment]:
    """List payments, newest first."""
    filters = filters or PaymentFilters()
    query = db.query(Payment)
    if filters.start_date:
        query = query.filter(Payment.date >= filters.start_date)
    if filters.end_date:
        query = query.filter(Payment.date <= filters.end_date)
    if filters.status:
        query = query.filter(Payment.status == filters.status)
    if filters.recorder_id:
        query = query.filter(Payment.payment_recorder_id == filters.recorder_id)
    return query.order_by(Payment.date.desc(), Payment.id.desc()).all()


def get_payment(db: Session, payment_id: int) -> Payment | None:
    """Get a payment by ID."""
    return db.query(Payment).filter(Payment.id == payment_id).first()


def create_payment(db: Session, data: PaymentCreate) -> Payment:
    """Record a new payment."""
    payment = Payment(
        payment_recorder_id=data.payment_recorder_id,
        amount=data.amount,
        date=data.date,
        description=data.description,
        status=data.status,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


def update_payment(db: Session, payment: Payment, data: PaymentUpdate) -> Payment:
    """Update an existing payment."""
    if data.payment_recorder_id is not None:
        payment.payment_recorder_id = data.payment_recorder_id
    if data.amount is not None:
        payment.amount = data.amount
    if data.date is not None:
        payment.date = data.date
    if data.description is not None:
        payment.description = data.description
    if data.status is not None:
        payment.status = data.status

    db.commit()
    db.refresh(payment)
    return payment


def set_payment_status(db: Session, payment: Payment, status: PaymentStatus) -> None:
    """Change only the status of a payment."""
    payment.status = status
    db.commit()


def delete_payment(db: Session, payment_id: int) -> bool:
    """Delete a payment. Returns False if it does not exist."""
    payment = get_payment(db, payment_id)
    if not payment:
        return False
    db.delete(payment)
    db.commit()
    return True


def get_summary(db: Session) -> PaymentSummary:
    """Totals for completed and pending payments.

    total_amount covers completed and pending; cancelled payments are
    excluded everywhere.
    """
    rows = (
        db.query(
            Payment.status,
            func.coalesce(func.sum(Payment.amount), 0),
            func.count(Payment.id),
        )
        .group_by(Payment.status)
        .all()
    )
    totals = {status: (Decimal(str(total)), count) for status, total, count in rows}
    completed, count_completed = totals.get(PaymentStatus.COMPLETED, (ZERO, 0))
    pending, count_pending = totals.get(PaymentStatus.PENDING, (ZERO, 0))
    return PaymentSummary(
        total_completed=round(completed, 2),
        total_pending=round(pending, 2),
        total_amount=round(completed + pending, 2),
        count_completed=count_completed,
        count_pending=count_pending,
    )


def get_monthly_totals(
    db: Session, months: int = MONTHLY_HISTORY
) -> list[MonthlyTotal]:
    """Completed payments per month, newest month first."""
    payments = (
        db.query(Payment)
        .filter(Payment.status == PaymentStatus.COMPLETED)
        .order_by(Payment.date.desc())
        .all()
    )
    buckets: dict[str, list[Decimal]] = {}
    for payment in payments:
        buckets.setdefault(payment.date.strftime("%Y-%m"), []).append(payment.amount)

    result = [
        MonthlyTotal(
            month=month, total=round(sum(amounts, ZERO), 2), count=len(amounts)
        )
        for month, amounts in sorted(buckets.items(), reverse=True)
    ]
    return result[:months]
