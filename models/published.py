from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator


# -------------------------------------------------
# Required text: stripped, never empty
# -------------------------------------------------
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# -------------------------------------------------
# Shared contract of every published record
# -------------------------------------------------
class PublishedBase(BaseModel):
    """
    Immutable snapshot of a row from a published table.
    Subclasses add a `kind` tag and their entity-specific columns.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    featured: bool = False
    created_at: Optional[datetime] = None

    # Set when the row was derived from an approved submission
    source_submission_id: Optional[str] = None

    @field_validator("id", "source_submission_id", mode="before")
    def id_to_str(cls, v):
        if v is None or isinstance(v, str):
            return v
        # uuid / bigint primary keys
        return str(v)

    @field_validator("featured", mode="before")
    def null_featured(cls, v):
        return bool(v) if v is not None else False

    @field_validator("created_at", mode="before")
    def parse_created_at(cls, v):
        if isinstance(v, str) and v.endswith("Z"):
            return v.replace("Z", "+00:00")
        return v


class PublishedCreate(BaseModel):
    """Fields every create payload accepts."""

    featured: bool = False
