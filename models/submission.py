from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .enums import SubmissionStatus, SubmissionType


# --------------------------------------------------------------------
# SUPABASE ROW → API RESPONSE
# A user-contributed candidate event/opportunity awaiting review.
# --------------------------------------------------------------------
class Submission(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str

    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None

    title: str
    description: Optional[str] = None
    submission_type: SubmissionType

    # event-specific
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    location_type: Optional[str] = None
    is_free: Optional[bool] = None

    # opportunity-specific
    deadline: Optional[str] = None
    eligibility: Optional[str] = None
    category: Optional[str] = None

    link: Optional[str] = None

    # System populated
    status: SubmissionStatus = SubmissionStatus.pending
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    def id_to_str(cls, v):
        return str(v)

    @field_validator("status", mode="before")
    def default_status(cls, v):
        return v or SubmissionStatus.pending

    @field_validator("created_at", mode="before")
    def parse_created_at(cls, v):
        if isinstance(v, str) and v.endswith("Z"):
            return v.replace("Z", "+00:00")
        return v


class SubmissionDecision(BaseModel):
    """Outcome of approve / reject, returned by the submissions router."""

    submission_id: str
    status: SubmissionStatus
    submission_deleted: bool
    published: Optional[dict] = None
