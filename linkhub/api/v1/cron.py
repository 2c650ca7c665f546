# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cron trigger endpoints.

Meant to be called by an external scheduler with
``Authorization: Bearer <CRON_SECRET>``.
"""

import logging
import secrets
import time

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from linkhub.api.deps import get_db
from linkhub.config import get_settings
from linkhub.schemas.collector import (
    CollectorResponse,
    CollectorResultSchema,
    CollectorSummary,
)
from linkhub.services import collector_service, payment_service

router = APIRouter()
logger = logging.getLogger(__name__)


def verify_cron_secret(authorization: str | None = Header(default=None)) -> None:
    """Reject requests without the configured bearer secret."""
    expected = get_settings().cron_secret
    if expected is None or not expected.get_secret_value():
        logger.error("[COLLECTOR] CRON_SECRET is not configured")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing CRON_SECRET",
        )

    token = (authorization or "").removeprefix("Bearer ").strip()
    if not secrets.compare_digest(
        token.encode("utf-8"), expected.get_secret_value().encode("utf-8")
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing CRON_SECRET",
        )


@router.api_route(
    "/collector",
    methods=["GET", "POST"],
    response_model=CollectorResponse,
    dependencies=[Depends(verify_cron_secret)],
)
def run_collector(db: Session = Depends(get_db)) -> CollectorResponse:
    """Process pending payments."""
    start = time.monotonic()
    logger.info("[COLLECTOR] Starting run")

    result = collector_service.run_collector(db)
    result_schema = CollectorResultSchema(
        processed=result.processed,
        completed=result.completed,
        failed=result.failed,
        errors=result.errors,
        timestamp=result.timestamp,
    )

    if result.processed == 0:
        return CollectorResponse(
            message="No pending payments",
            result=result_schema,
            execution_time_ms=int((time.monotonic() - start) * 1000),
        )

    summary = payment_service.get_summary(db)
    return CollectorResponse(
        message="Collector run completed",
        result=result_schema,
        summary=CollectorSummary(
            total_completed=summary.total_completed,
            total_pending=summary.total_pending,
            total_amount=summary.total_amount,
        ),
        execution_time_ms=int((time.monotonic() - start) * 1000),
    )
