from datetime import date as CalendarDate
from typing import Literal, Optional

from pydantic import BaseModel

from .enums import JobType
from .published import PublishedBase, PublishedCreate, RequiredText


# -------------------------------------------------
# Read Job (row snapshot)
# -------------------------------------------------
class Job(PublishedBase):
    kind: Literal["job"] = "job"

    title: str
    description: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary_range: Optional[str] = None
    deadline: Optional[str] = None
    requirements: Optional[str] = None
    link: Optional[str] = None


# -------------------------------------------------
# Create Job
# -------------------------------------------------
class JobCreate(PublishedCreate):
    title: RequiredText
    description: RequiredText
    company: RequiredText
    location: RequiredText
    job_type: JobType = JobType.full_time
    salary_range: Optional[str] = None
    deadline: CalendarDate
    requirements: RequiredText
    link: RequiredText


# -------------------------------------------------
# Update Job (partial)
# -------------------------------------------------
class JobUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    salary_range: Optional[str] = None
    deadline: Optional[CalendarDate] = None
    requirements: Optional[str] = None
    link: Optional[str] = None
    featured: Optional[bool] = None
