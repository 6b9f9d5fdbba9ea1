"""Cron-driven periodic execution of the news agent."""

import asyncio
import signal
from datetime import datetime
from typing import Callable, Optional

from croniter import croniter

from .agent import NewsAgent
from .common.logger import get_component_logger

logger = get_component_logger("scheduler")

# Maximum time in seconds the scheduler sleeps without re-checking the clock
MAX_INACTIVITY_INTERVAL = 300


def local_now() -> datetime:
    return datetime.now().astimezone()


class AgentScheduler:
    """Triggers agent runs according to a cron expression until shutdown is requested.

    Runs are executed inline, so a new run never starts before the previous one
    has finished; triggers missed while a run was in progress are skipped.
    """

    def __init__(
        self,
        agent: NewsAgent,
        cron_schedule: str,
        max_inactivity_interval: float = MAX_INACTIVITY_INTERVAL,
        clock: Callable[[], datetime] = local_now
    ):
        self._agent = agent
        self._cron_schedule = cron_schedule
        self._max_inactivity_interval = max_inactivity_interval
        self._clock = clock
        self._shutdown_event = asyncio.Event()

    def next_trigger(self, current_time: datetime) -> datetime:
        return croniter(self._cron_schedule, current_time).get_next(datetime)

    async def _execute_run(self) -> None:
        logger.info("Scheduled run triggered")
        try:
            await self._agent.run()
        except Exception as e:
            logger.error(f"❌ Job execution failed: {e}", exc_info=True)

    async def run(self) -> None:
        """Run the scheduler until shutdown is requested."""
        next_run = self.next_trigger(self._clock())
        logger.info(f"Scheduler started, first run at {next_run.isoformat()}")

        while not self._shutdown_event.is_set():
            current_time = self._clock()

            if current_time >= next_run:
                await self._execute_run()
                next_run = self.next_trigger(self._clock())
                logger.info(f"Next run scheduled for {next_run.isoformat()}")
                continue

            sleep_duration = min(
                self._max_inactivity_interval,
                (next_run - current_time).total_seconds()
            )
            logger.debug(f"Waiting {sleep_duration:.1f} seconds (next run at {next_run.isoformat()})")

            try:
                await asyncio.wait_for(self._shutdown_event.wait(), timeout=sleep_duration)
            except asyncio.TimeoutError:
                pass

        logger.info("Scheduler stopped")

    def request_shutdown(self) -> None:
        """Request the scheduler to stop after the current wait or run."""
        logger.info("Shutdown requested")
        self._shutdown_event.set()


async def run_scheduler(agent: NewsAgent, cron_schedule: str, scheduler: Optional[AgentScheduler] = None) -> None:
    """Run the scheduler with SIGINT/SIGTERM handling."""
    if scheduler is None:
        scheduler = AgentScheduler(agent, cron_schedule)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle_signal, sig, scheduler)

    try:
        await scheduler.run()
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)


def handle_signal(sig: signal.Signals, scheduler: AgentScheduler) -> None:
    """Handle shutdown signals."""
    logger.info(f"Received signal {sig.name}")
    scheduler.request_shutdown()
