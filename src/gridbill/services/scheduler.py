"""Service for scheduling background jobs."""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from gridbill.config import Settings, settings as default_settings
from gridbill.services.billing import UtilityService

logger = logging.getLogger(__name__)


class SchedulerService:
    """Manages scheduled tasks for the application."""

    def __init__(
        self,
        utility_service: UtilityService,
        scheduler: AsyncIOScheduler,
        config: Settings | None = None,
    ):
        self._utility_service = utility_service
        self._scheduler = scheduler
        self._config = config or default_settings

    def start(self):
        """Starts the scheduler and adds jobs."""
        logger.info("Starting scheduler...")
        self._scheduler.add_job(
            self._run_dunning,
            trigger=CronTrigger(
                hour=self._config.DUNNING_HOUR, minute=self._config.DUNNING_MINUTE
            ),
            id="dunning_sweep",
            replace_existing=True,
        )
        self._scheduler.start()
        logger.info("Scheduler started.")

    def shutdown(self):
        logger.info("Stopping scheduler...")
        self._scheduler.shutdown(wait=False)

    async def _run_dunning(self):
        """Escalates every bill that is unpaid past its due date."""
        logger.info("Starting dunning sweep.")
        escalated = self._utility_service.apply_dunning()
        logger.info(f"Dunning sweep finished, {len(escalated)} bill(s) escalated.")
