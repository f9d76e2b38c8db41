# services/dashboard.py

from core.logging_config import logger
from models.dashboard import DashboardStats
from models.entities import entity_spec
from models.enums import EntityKind, SubmissionStatus
from models.newsletter import NewsletterSignup
from models.submission import Submission
from repositories.base import AbstractContentStore


class AdminDashboard:
    def __init__(self, store: AbstractContentStore):
        self.store = store

    def stats(self) -> DashboardStats:
        counts = {
            kind.value: self.store.count(entity_spec(kind).table)
            for kind in EntityKind
        }
        pending = self.store.count(
            "submissions",
            filters={"status": SubmissionStatus.pending.value},
        )
        logger.debug(f"Dashboard counts: {counts}, pending={pending}")

        return DashboardStats(
            events=counts["event"],
            opportunities=counts["opportunity"],
            resources=counts["resource"],
            jobs=counts["job"],
            pending_submissions=pending,
        )

    def recent_submissions(self, limit: int = 5):
        rows = self.store.select(
            "submissions",
            order_by="created_at",
            desc=True,
            limit=limit,
        )
        return tuple(Submission.model_validate(r) for r in rows)

    def newsletter_signups(self):
        rows = self.store.select("newsletter_signups", order_by="created_at", desc=True)
        return tuple(NewsletterSignup.model_validate(r) for r in rows)
