from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class NewsletterSignup(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    agreed: bool = False
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    def id_to_str(cls, v):
        return str(v)
