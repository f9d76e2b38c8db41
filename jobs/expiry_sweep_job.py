# jobs/expiry_sweep_job.py

from core.scheduler import run_expiry_sweep
from core.supabase_client import get_supabase_client


def run():
    """
    CLI entry point for the expiry sweep.
    Lets an external cron prune past events/opportunities even when the
    API process (and its scheduler) is not running.
    """
    if not get_supabase_client():
        raise RuntimeError("Supabase not configured")

    report = run_expiry_sweep()
    if report.errors:
        raise SystemExit(1)


if __name__ == "__main__":
    run()
