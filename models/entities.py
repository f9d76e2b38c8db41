from dataclasses import dataclass
from typing import Annotated, Dict, Optional, Type, Union

from pydantic import BaseModel, Field, TypeAdapter

from .enums import EntityKind, SubmissionType
from .event import Event, EventCreate, EventUpdate
from .job import Job, JobCreate, JobUpdate
from .opportunity import Opportunity, OpportunityCreate, OpportunityUpdate
from .resource import Resource, ResourceCreate, ResourceUpdate


# -------------------------------------------------
# Tagged union over every published variant
# -------------------------------------------------
PublishedRecord = Annotated[
    Union[Event, Opportunity, Job, Resource],
    Field(discriminator="kind"),
]

_published_adapter = TypeAdapter(PublishedRecord)


@dataclass(frozen=True)
class EntitySpec:
    kind: EntityKind
    table: str
    label: str
    read_model: Type[BaseModel]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    # Column compared against "today" by the expiry sweep
    expiry_field: Optional[str] = None


ENTITIES: Dict[EntityKind, EntitySpec] = {
    EntityKind.event: EntitySpec(
        kind=EntityKind.event,
        table="events",
        label="Event",
        read_model=Event,
        create_model=EventCreate,
        update_model=EventUpdate,
        expiry_field="date",
    ),
    EntityKind.opportunity: EntitySpec(
        kind=EntityKind.opportunity,
        table="opportunities",
        label="Opportunity",
        read_model=Opportunity,
        create_model=OpportunityCreate,
        update_model=OpportunityUpdate,
        expiry_field="deadline",
    ),
    EntityKind.job: EntitySpec(
        kind=EntityKind.job,
        table="jobs",
        label="Job",
        read_model=Job,
        create_model=JobCreate,
        update_model=JobUpdate,
        expiry_field="deadline",
    ),
    EntityKind.resource: EntitySpec(
        kind=EntityKind.resource,
        table="resources",
        label="Resource",
        read_model=Resource,
        create_model=ResourceCreate,
        update_model=ResourceUpdate,
    ),
}

# Approved submissions land in these published kinds
SUBMISSION_TARGETS: Dict[SubmissionType, EntityKind] = {
    SubmissionType.event: EntityKind.event,
    SubmissionType.opportunity: EntityKind.opportunity,
}


def entity_spec(kind) -> EntitySpec:
    return ENTITIES[EntityKind(kind)]


def record_from_row(kind, row: dict) -> PublishedRecord:
    """Validate a raw store row into its tagged published variant."""
    return _published_adapter.validate_python({**row, "kind": EntityKind(kind).value})
