from datetime import date as CalendarDate
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from .published import PublishedBase, PublishedCreate, RequiredText


# -------------------------------------------------
# Read Opportunity (row snapshot)
# -------------------------------------------------
class Opportunity(PublishedBase):
    kind: Literal["opportunity"] = "opportunity"

    title: str
    description: Optional[str] = None
    deadline: Optional[str] = None      # calendar date, "YYYY-MM-DD"
    eligibility: Optional[str] = None
    category: Optional[str] = None
    is_free: Optional[bool] = None
    link: Optional[str] = None


# -------------------------------------------------
# Create Opportunity
# -------------------------------------------------
class OpportunityCreate(PublishedCreate):
    title: RequiredText
    description: RequiredText
    deadline: CalendarDate
    eligibility: RequiredText
    category: RequiredText
    is_free: Optional[bool] = None
    link: RequiredText

    @field_validator("category", mode="after")
    def lower_category(cls, v):
        return v.lower()


# -------------------------------------------------
# Update Opportunity (partial)
# -------------------------------------------------
class OpportunityUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[CalendarDate] = None
    eligibility: Optional[str] = None
    category: Optional[str] = None
    is_free: Optional[bool] = None
    link: Optional[str] = None
    featured: Optional[bool] = None

    @field_validator("title", mode="before")
    def not_blank(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be blank")
        return v
