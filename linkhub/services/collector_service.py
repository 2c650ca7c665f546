# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Payment collector job.

Walks every pending payment and marks it completed once it checks out.
Payments that fail stay pending so the next run retries them. There is
no payment-provider integration yet: ``process_payment`` only validates
the recorded data.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from linkhub.models import Payment
from linkhub.models.base import utcnow
from linkhub.models.enums import PaymentStatus
from linkhub.services import payment_service
from linkhub.services.payment_service import PaymentFilters

logger = logging.getLogger(__name__)


@dataclass
class CollectorResult:
    """Counters for one collector run."""

    processed: int = 0
    completed: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=utcnow)


@dataclass
class ProcessOutcome:
    success: bool
    error: str | None = None


def process_payment(payment: Payment) -> ProcessOutcome:
    """Check a single pending payment."""
    if not payment.payment_recorder_id or payment.amount <= 0:
        return ProcessOutcome(False, f"Payment {payment.id}: invalid data")
    return ProcessOutcome(True)


def run_collector(db: Session) -> CollectorResult:
    """Process all pending payments."""
    result = CollectorResult()

    pending = payment_service.get_payments(
        db, PaymentFilters(status=PaymentStatus.PENDING)
    )
    logger.info(f"[COLLECTOR] Found {len(pending)} pending payments")

    for payment in pending:
        result.processed += 1
        logger.info(
            f"[COLLECTOR] Processing payment {payment.id} - "
            f"{payment.amount} - {payment.description}"
        )
        outcome = process_payment(payment)
        if outcome.success:
            payment_service.set_payment_status(db, payment, PaymentStatus.COMPLETED)
            result.completed += 1
        else:
            result.failed += 1
            if outcome.error:
                result.errors.append(outcome.error)
            logger.warning(f"[COLLECTOR] Payment {payment.id} failed: {outcome.error}")

    logger.info(
        f"[COLLECTOR] Run finished: processed={result.processed} "
        f"completed={result.completed} failed={result.failed}"
    )
    return result
