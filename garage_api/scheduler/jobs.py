"""APScheduler jobs — periodic sweep for users left without an auth mapping."""

import pytz
import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from starlette.concurrency import run_in_threadpool

from garage_api.config import get_settings
from garage_api.infrastructure.database import SessionLocal

settings = get_settings()
logger = structlog.get_logger(__name__)
tz = pytz.timezone(settings.TIMEZONE)

scheduler = AsyncIOScheduler(timezone=tz)

# Users younger than this may still be mid-provisioning.
ORPHAN_GRACE_MINUTES = 5


def run_orphan_sweep(delete: bool = False) -> dict:
    """One sweep over the users table in its own session."""
    from garage_api.application.services.employee_service import reconcile_orphans
    from garage_api.domain.models.user import User
    from garage_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        return reconcile_orphans(repo, delete=delete, grace_minutes=ORPHAN_GRACE_MINUTES)
    finally:
        db.close()


async def orphan_sweep_job():
    """Periodic job: report (and optionally delete) orphaned users."""
    logger.info("orphan_sweep.started", delete=settings.ORPHAN_SWEEP_DELETE)
    try:
        await run_in_threadpool(run_orphan_sweep, settings.ORPHAN_SWEEP_DELETE)
    except Exception:
        logger.exception("orphan_sweep.failed")


def start_scheduler():
    """Start the APScheduler with the orphan sweep job."""
    scheduler.add_job(
        orphan_sweep_job,
        trigger=IntervalTrigger(minutes=settings.ORPHAN_SWEEP_INTERVAL_MINUTES, timezone=tz),
        id="orphan_sweep",
        name=f"Orphaned user sweep (every {settings.ORPHAN_SWEEP_INTERVAL_MINUTES} mins)",
        replace_existing=True,
    )

    scheduler.start()
    logger.info("Scheduler started", orphan_sweep_interval_minutes=settings.ORPHAN_SWEEP_INTERVAL_MINUTES)


def stop_scheduler():
    """Stop the scheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
