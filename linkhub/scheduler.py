# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Periodic background jobs.

Runs inside the application's event loop via APScheduler:
- session sweep: drops expired sessions nobody looks up anymore
- collector: processes pending payments (optional, off by default)

Both intervals come from settings; an interval of 0 disables the job.
"""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from linkhub.config import Settings
from linkhub.database import SessionLocal
from linkhub.services import collector_service
from linkhub.services.session_store import SessionStore

logger = logging.getLogger(__name__)

SWEEP_JOB_ID = "session_sweep"
COLLECTOR_JOB_ID = "payment_collector"


def run_scheduled_collector() -> None:
    """Collector entry point for the scheduler, with its own DB session."""
    db = SessionLocal()
    try:
        collector_service.run_collector(db)
    except Exception:
        logger.exception("[COLLECTOR] Scheduled run failed")
    finally:
        db.close()


class JobScheduler:
    """Owns the APScheduler instance for the app's lifetime."""

    def __init__(self, settings: Settings, store: SessionStore) -> None:
        self.settings = settings
        self.store = store
        self._scheduler: AsyncIOScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def start(self) -> None:
        """Register the enabled jobs and start. Does nothing if none are enabled."""
        if self.running:
            return

        scheduler = AsyncIOScheduler(
            job_defaults={
                "coalesce": True,  # Combine missed runs into one
                "max_instances": 1,
                "misfire_grace_time": 300,
            },
            timezone="UTC",
        )
        jobs: list[str] = []
        if self.settings.session_sweep_minutes > 0:
            scheduler.add_job(
                self.store.sweep_expired,
                trigger=IntervalTrigger(minutes=self.settings.session_sweep_minutes),
                id=SWEEP_JOB_ID,
                name="Session sweep",
                replace_existing=True,
            )
            jobs.append("Session sweep")
        if self.settings.collector_interval_minutes > 0:
            scheduler.add_job(
                run_scheduled_collector,
                trigger=IntervalTrigger(
                    minutes=self.settings.collector_interval_minutes
                ),
                id=COLLECTOR_JOB_ID,
                name="Payment collector",
                replace_existing=True,
            )
            jobs.append("Payment collector")

        if not jobs:
            logger.info("No background jobs enabled")
            return

        scheduler.start()
        self._scheduler = scheduler
        logger.info(f"Scheduler started with jobs: {jobs}")

    def stop(self) -> None:
        """Stop the scheduler."""
        if self._scheduler is not None:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("Scheduler stopped")
