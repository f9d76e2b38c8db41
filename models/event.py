from datetime import date as CalendarDate
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from .enums import LocationType
from .published import PublishedBase, PublishedCreate, RequiredText


# -------------------------------------------------
# Read Event (row snapshot)
# -------------------------------------------------
class Event(PublishedBase):
    kind: Literal["event"] = "event"

    title: str
    description: Optional[str] = None
    date: Optional[str] = None          # calendar date, "YYYY-MM-DD"
    time: Optional[str] = None
    location: Optional[str] = None
    location_type: Optional[str] = None
    is_free: Optional[bool] = None
    link: Optional[str] = None


# -------------------------------------------------
# Create Event
# -------------------------------------------------
class EventCreate(PublishedCreate):
    """
    Admin "new event" form.
    Supabase generates id & created_at.
    """

    title: RequiredText
    description: RequiredText
    date: CalendarDate
    time: RequiredText
    location: RequiredText
    location_type: LocationType = LocationType.online
    is_free: bool = True
    link: Optional[str] = None


# -------------------------------------------------
# Update Event (partial)
# -------------------------------------------------
class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[CalendarDate] = None
    time: Optional[str] = None
    location: Optional[str] = None
    location_type: Optional[LocationType] = None
    is_free: Optional[bool] = None
    link: Optional[str] = None
    featured: Optional[bool] = None

    @field_validator("title", "time", mode="before")
    def not_blank(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be blank")
        return v
