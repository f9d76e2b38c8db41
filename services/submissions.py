# services/submissions.py

"""
Submission lifecycle: pending → approved (row copied into a published
table, then removed) | rejected (row retained or removed, per type).

Approval is copy-then-delete with no transaction. Every published row
derived from a submission carries `source_submission_id`, so a retried
approve after a failed delete reuses the row it already published instead
of inserting a second one.
"""

from typing import Dict, Optional, Tuple

from core.errors import InvalidTransition, NotFoundError, ValidationFailure
from core.logging_config import logger
from core.utils import sanitize
from models.entities import (
    SUBMISSION_TARGETS,
    PublishedRecord,
    entity_spec,
    record_from_row,
)
from models.enums import RejectionPolicy, SubmissionStatus, SubmissionType
from models.submission import Submission, SubmissionDecision
from repositories.base import AbstractContentStore


SUBMISSIONS_TABLE = "submissions"
IDEMPOTENCY_KEY = "source_submission_id"

DEFAULT_REJECTION_POLICIES: Dict[SubmissionType, RejectionPolicy] = {
    SubmissionType.event: RejectionPolicy.retain,
    SubmissionType.opportunity: RejectionPolicy.delete,
}


# -----------------------------------------------------
# Field mapping: submission → published row
# -----------------------------------------------------
def event_fields(submission: Submission) -> dict:
    return {
        "title": submission.title,
        "description": submission.description,
        "date": submission.date,
        "time": submission.time,
        "location": submission.location,
        "location_type": submission.location_type,
        "is_free": submission.is_free,
        "link": submission.link,
    }


def opportunity_fields(submission: Submission) -> dict:
    return {
        "title": submission.title,
        "description": submission.description,
        "deadline": submission.deadline,
        "eligibility": submission.eligibility,
        "category": submission.category,
        "is_free": submission.is_free,
        "link": submission.link,
        "featured": False,
    }


FIELD_MAPPERS = {
    SubmissionType.event: event_fields,
    SubmissionType.opportunity: opportunity_fields,
}


def build_published_row(submission: Submission) -> dict:
    """Published row for an approved submission, keyed for idempotency."""
    mapper = FIELD_MAPPERS.get(submission.submission_type)
    if mapper is None:
        raise ValidationFailure(
            f"Unsupported submission type: {submission.submission_type}"
        )

    row = sanitize(mapper(submission))
    row[IDEMPOTENCY_KEY] = submission.id
    return row


class SubmissionLifecycleManager:
    def __init__(
        self,
        store: AbstractContentStore,
        rejection_policies: Optional[Dict[SubmissionType, RejectionPolicy]] = None,
    ):
        self.store = store
        self.rejection_policies = dict(DEFAULT_REJECTION_POLICIES)
        if rejection_policies:
            self.rejection_policies.update(
                {SubmissionType(k): RejectionPolicy(v) for k, v in rejection_policies.items()}
            )

    # -----------------------------------------------------
    # Queries
    # -----------------------------------------------------
    def list_by_status(
        self,
        status: SubmissionStatus,
        submission_type: Optional[SubmissionType] = None,
    ) -> Tuple[Submission, ...]:
        filters = {"status": SubmissionStatus(status).value}
        if submission_type:
            filters["submission_type"] = SubmissionType(submission_type).value

        rows = self.store.select(
            SUBMISSIONS_TABLE,
            filters=filters,
            order_by="created_at",
            desc=True,
        )
        return tuple(Submission.model_validate(r) for r in rows)

    def list_pending(self, submission_type: Optional[SubmissionType] = None):
        return self.list_by_status(SubmissionStatus.pending, submission_type)

    def list_rejected(self, submission_type: Optional[SubmissionType] = None):
        return self.list_by_status(SubmissionStatus.rejected, submission_type)

    def get(self, submission_id: str) -> Submission:
        row = self.store.get(SUBMISSIONS_TABLE, submission_id)
        if not row:
            raise NotFoundError(f"Submission {submission_id} not found")
        return Submission.model_validate(row)

    def _get_pending(self, submission_id: str, action: str) -> Submission:
        submission = self.get(submission_id)
        if submission.status != SubmissionStatus.pending:
            raise InvalidTransition(
                f"Cannot {action} submission {submission_id}: already {submission.status.value}"
            )
        return submission

    # -----------------------------------------------------
    # approve(id)
    # -----------------------------------------------------
    def approve(self, submission_id: str) -> PublishedRecord:
        """
        Copy a pending submission into its published table, then delete it.

        Insert failure: StoreFailure propagates, submission untouched.
        Delete failure: StoreFailure propagates after the insert committed,
        leaving the record both published and still pending.
        """
        submission = self._get_pending(submission_id, "approve")
        kind = SUBMISSION_TARGETS[submission.submission_type]
        table = entity_spec(kind).table

        existing = self.store.select(
            table,
            filters={IDEMPOTENCY_KEY: submission.id},
            limit=1,
        )

        if existing:
            published_row = existing[0]
            logger.warning(
                f"Submission {submission.id} already published as {table}/{published_row.get('id')}; "
                "completing the earlier approve"
            )
        else:
            published_row = self.store.insert(table, build_published_row(submission))
            logger.info(f"Published submission {submission.id} as {table}/{published_row.get('id')}")

        self.store.delete(SUBMISSIONS_TABLE, submission.id)
        logger.info(f"Submission {submission.id} approved and removed from the review queue")

        return record_from_row(kind, published_row)

    # -----------------------------------------------------
    # reject(id)
    # -----------------------------------------------------
    def reject(self, submission_id: str) -> SubmissionDecision:
        submission = self._get_pending(submission_id, "reject")
        policy = self.rejection_policies.get(submission.submission_type, RejectionPolicy.retain)

        if policy == RejectionPolicy.delete:
            self.store.delete(SUBMISSIONS_TABLE, submission.id)
            logger.info(f"Submission {submission.id} rejected and deleted")
            deleted = True
        else:
            self.store.update(
                SUBMISSIONS_TABLE,
                submission.id,
                {"status": SubmissionStatus.rejected.value},
            )
            logger.info(f"Submission {submission.id} rejected and retained")
            deleted = False

        return SubmissionDecision(
            submission_id=submission.id,
            status=SubmissionStatus.rejected,
            submission_deleted=deleted,
        )
