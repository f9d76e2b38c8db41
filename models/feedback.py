from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .enums import FeedbackStatus
from .published import RequiredText


class Feedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    message: str
    status: FeedbackStatus = FeedbackStatus.pending
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    def id_to_str(cls, v):
        return str(v)

    # Rows written before the status column existed have NULL status
    @field_validator("status", mode="before")
    def default_status(cls, v):
        return v or FeedbackStatus.pending


class FeedbackGroups(BaseModel):
    pending: List[Feedback] = []
    reviewed: List[Feedback] = []
    archived: List[Feedback] = []


class FeedbackStatusUpdate(BaseModel):
    status: Literal["reviewed", "archived"]


class FeedbackResponse(BaseModel):
    """Email reply to the person who left the feedback."""

    subject: RequiredText
    content: RequiredText
