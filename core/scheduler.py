# core/scheduler.py
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from datetime import datetime, timezone
from typing import Optional

from core.config import settings
from core.logging_config import logger
from core.notifications import send_webhook_message
from core.supabase_client import get_supabase_client
from repositories.supabase_store import SupabaseContentStore
from services.expiry import ExpirySweeper, SweepReport


EXPIRY_JOB_ID = "expiry_sweep_job"


def format_sweep_summary(report: SweepReport) -> str:
    lines = [f"Expiry sweep removed {report.total_deleted} past record(s)."]
    for kind, result in report.results.items():
        lines.append(f"• {kind.value}: {result.deleted} of {result.checked} removed")
    for kind, error in report.errors.items():
        lines.append(f"• {kind}: FAILED — {error}")
    return "\n".join(lines)


def run_expiry_sweep(now: Optional[datetime] = None) -> SweepReport:
    """Sweep every configured kind and post a summary when anything changed."""
    started = datetime.now(timezone.utc)
    logger.info("[SCHEDULER] Starting expiry sweep...")

    sweeper = ExpirySweeper(SupabaseContentStore(get_supabase_client()))
    report = sweeper.sweep_all(settings.EXPIRY_SWEEP_KINDS, now=now)

    duration = (datetime.now(timezone.utc) - started).total_seconds()
    logger.info(
        f"[SCHEDULER] Expiry sweep finished in {duration:.2f}s — "
        f"{report.total_deleted} removed, {len(report.errors)} failed"
    )

    if report.total_deleted or report.errors:
        send_webhook_message(format_sweep_summary(report))

    return report


def _scheduled_sweep():
    try:
        run_expiry_sweep()
    except Exception as e:
        logger.error(f"[SCHEDULER] ❌ Expiry sweep crashed: {e}", exc_info=True)


def start_scheduler() -> BackgroundScheduler:
    """
    Start the APScheduler background process.
    Sweeps once immediately, then every EXPIRY_SWEEP_INTERVAL_MINUTES.
    """
    scheduler = BackgroundScheduler(timezone="UTC")

    scheduler.add_job(
        _scheduled_sweep,
        trigger=IntervalTrigger(minutes=settings.EXPIRY_SWEEP_INTERVAL_MINUTES),
        id=EXPIRY_JOB_ID,
        next_run_time=datetime.now(timezone.utc),
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )

    scheduler.start()
    logger.info(
        f"⏰ Scheduler started. Expiry sweep every {settings.EXPIRY_SWEEP_INTERVAL_MINUTES} minutes."
    )
    return scheduler
