# services/feedback.py

from core.errors import InvalidTransition, NotFoundError
from core.logging_config import logger
from core.notifications import send_email
from models.enums import FeedbackStatus
from models.feedback import Feedback, FeedbackGroups
from repositories.base import AbstractContentStore


FEEDBACK_TABLE = "feedback"

# Status only moves forward
ALLOWED_TRANSITIONS = {
    FeedbackStatus.pending: {FeedbackStatus.reviewed, FeedbackStatus.archived},
    FeedbackStatus.reviewed: {FeedbackStatus.archived},
    FeedbackStatus.archived: set(),
}


class FeedbackInbox:
    def __init__(self, store: AbstractContentStore):
        self.store = store

    def list(self):
        rows = self.store.select(FEEDBACK_TABLE, order_by="created_at", desc=True)
        return tuple(Feedback.model_validate(r) for r in rows)

    def list_grouped(self) -> FeedbackGroups:
        groups = {status: [] for status in FeedbackStatus}
        for item in self.list():
            groups[item.status].append(item)

        return FeedbackGroups(
            pending=groups[FeedbackStatus.pending],
            reviewed=groups[FeedbackStatus.reviewed],
            archived=groups[FeedbackStatus.archived],
        )

    def get(self, feedback_id: str) -> Feedback:
        row = self.store.get(FEEDBACK_TABLE, feedback_id)
        if not row:
            raise NotFoundError(f"Feedback {feedback_id} not found")
        return Feedback.model_validate(row)

    def update_status(self, feedback_id: str, status: FeedbackStatus) -> Feedback:
        status = FeedbackStatus(status)
        current = self.get(feedback_id)

        if status not in ALLOWED_TRANSITIONS[current.status]:
            raise InvalidTransition(
                f"Feedback {feedback_id} cannot move from {current.status.value} to {status.value}"
            )

        row = self.store.update(FEEDBACK_TABLE, feedback_id, {"status": status.value})
        if not row:
            raise NotFoundError(f"Feedback {feedback_id} not found")

        logger.info(f"Feedback {feedback_id}: {current.status.value} → {status.value}")
        return Feedback.model_validate(row)

    def delete(self, feedback_id: str):
        self.get(feedback_id)
        self.store.delete(FEEDBACK_TABLE, feedback_id)
        logger.info(f"Feedback {feedback_id} deleted")

    def respond(self, feedback_id: str, subject: str, content: str) -> bool:
        """Email the person who left the feedback. False when email is not configured."""
        item = self.get(feedback_id)
        if not item.email:
            raise InvalidTransition(f"Feedback {feedback_id} has no email address to reply to")

        return send_email(subject=subject, body=content, to=item.email)
