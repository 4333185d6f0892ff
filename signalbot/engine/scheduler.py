"""APScheduler integration for FastAPI.

Owns the process-wide AsyncIOScheduler that drives the detection stream.
"""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from signalbot.config import settings
from signalbot.engine.detection_stream import DetectionStream

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


def start_scheduler(stream: DetectionStream):
    """Start the scheduler and arm the stream if autostart is on."""
    if settings.autostart_stream:
        stream.start()

    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")


def stop_scheduler(stream: DetectionStream | None = None):
    """Cancel the stream job and shut down the scheduler."""
    if stream is not None:
        stream.stop()
    if scheduler.running:
        scheduler.shutdown(wait=False)
    logger.info("Scheduler stopped")


def get_scheduler_status() -> dict:
    """Return current scheduler state for the API."""
    jobs = scheduler.get_jobs()
    return {
        "running": scheduler.running,
        "job_count": len(jobs),
        "jobs": [
            {
                "id": j.id,
                "name": j.name,
                "next_run": str(j.next_run_time) if getattr(j, "next_run_time", None) else None,
                "trigger": str(j.trigger),
            }
            for j in jobs
        ],
    }
