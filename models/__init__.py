# -------------------------
# Enums
# -------------------------
from .enums import (
    EntityKind,
    SubmissionType,
    SubmissionStatus,
    RejectionPolicy,
    FeedbackStatus,
    LocationType,
    JobType,
    ResourceCategory,
)

# -------------------------
# Published records
# -------------------------
from .published import PublishedBase, PublishedCreate
from .event import Event, EventCreate, EventUpdate
from .opportunity import Opportunity, OpportunityCreate, OpportunityUpdate
from .job import Job, JobCreate, JobUpdate
from .resource import Resource, ResourceCreate, ResourceUpdate
from .entities import (
    PublishedRecord,
    EntitySpec,
    ENTITIES,
    SUBMISSION_TARGETS,
    entity_spec,
    record_from_row,
)

# -------------------------
# Review queue
# -------------------------
from .submission import Submission, SubmissionDecision

# -------------------------
# Feedback / newsletter / dashboard
# -------------------------
from .feedback import Feedback, FeedbackGroups, FeedbackStatusUpdate, FeedbackResponse
from .newsletter import NewsletterSignup
from .dashboard import DashboardStats

# -------------------------
# Auth
# -------------------------
from .auth import LoginRequest, SignupRequest, TokenResponse, CurrentAdmin
