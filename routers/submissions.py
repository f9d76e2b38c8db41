# routers/submissions.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.logging_config import logger
from dependencies.auth import get_current_admin, CurrentAdmin
from dependencies.services import get_lifecycle_manager
from models.enums import SubmissionStatus, SubmissionType
from models.submission import Submission, SubmissionDecision
from services.submissions import SubmissionLifecycleManager


router = APIRouter(
    prefix="/submissions",
    tags=["Submissions"],
    dependencies=[Depends(get_current_admin)],
)


# -----------------------------------------------------
# LIST: pending by default
# -----------------------------------------------------
@router.get("", response_model=List[Submission], summary="List submissions")
def list_submissions(
    submission_type: Optional[SubmissionType] = Query(None, alias="type"),
    status: SubmissionStatus = SubmissionStatus.pending,
    manager: SubmissionLifecycleManager = Depends(get_lifecycle_manager),
):
    return list(manager.list_by_status(status, submission_type))


@router.get("/{submission_id}", response_model=Submission, summary="Get submission")
def get_submission(
    submission_id: str,
    manager: SubmissionLifecycleManager = Depends(get_lifecycle_manager),
):
    return manager.get(submission_id)


# -----------------------------------------------------
# APPROVE: copy into events/opportunities, then delete
# -----------------------------------------------------
@router.post(
    "/{submission_id}/approve",
    response_model=SubmissionDecision,
    summary="Approve and publish a submission",
)
def approve_submission(
    submission_id: str,
    manager: SubmissionLifecycleManager = Depends(get_lifecycle_manager),
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    record = manager.approve(submission_id)
    logger.info(f"Submission {submission_id} approved by {current_admin.email}")
    return SubmissionDecision(
        submission_id=submission_id,
        status=SubmissionStatus.approved,
        submission_deleted=True,
        published=record.model_dump(mode="json"),
    )


# -----------------------------------------------------
# REJECT
# -----------------------------------------------------
@router.post(
    "/{submission_id}/reject",
    response_model=SubmissionDecision,
    summary="Reject a submission",
)
def reject_submission(
    submission_id: str,
    manager: SubmissionLifecycleManager = Depends(get_lifecycle_manager),
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    decision = manager.reject(submission_id)
    logger.info(f"Submission {submission_id} rejected by {current_admin.email}")
    return decision
