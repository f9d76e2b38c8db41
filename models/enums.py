from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# PUBLISHED ENTITY KIND
# -----------------------------------------------------
class EntityKind(BaseStrEnum):
    """Tag shared by every published record variant."""

    event = "event"
    opportunity = "opportunity"
    job = "job"
    resource = "resource"


# -----------------------------------------------------
# SUBMISSIONS
# -----------------------------------------------------
class SubmissionType(BaseStrEnum):
    """Which published table an approved submission lands in."""

    event = "event"
    opportunity = "opportunity"


class SubmissionStatus(BaseStrEnum):
    """pending → approved | rejected. Both outcomes are terminal."""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class RejectionPolicy(BaseStrEnum):
    """What rejecting a submission does to its row."""

    retain = "retain"   # status → rejected, row kept
    delete = "delete"   # row removed


# -----------------------------------------------------
# FEEDBACK STATUS
# -----------------------------------------------------
class FeedbackStatus(BaseStrEnum):
    """Moves forward only: pending → reviewed → archived."""

    pending = "pending"
    reviewed = "reviewed"
    archived = "archived"


# -----------------------------------------------------
# EVENT LOCATION TYPE
# -----------------------------------------------------
class LocationType(BaseStrEnum):
    online = "online"
    physical = "physical"
    hybrid = "hybrid"


# -----------------------------------------------------
# JOB TYPE
# -----------------------------------------------------
class JobType(BaseStrEnum):
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    internship = "internship"
    remote = "remote"
    graduate_trainee = "graduate-trainee"


# -----------------------------------------------------
# RESOURCE CATEGORY
# -----------------------------------------------------
class ResourceCategory(BaseStrEnum):
    career_development = "career development"
    study_materials = "study materials"
    templates = "templates"
    guides = "guides"
    worksheets = "worksheets"
    courses = "courses"
    other = "other"
