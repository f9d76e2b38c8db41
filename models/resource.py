from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .enums import ResourceCategory
from .published import PublishedBase, PublishedCreate, RequiredText


# -------------------------------------------------
# Read Resource (row snapshot)
# -------------------------------------------------
class Resource(PublishedBase):
    kind: Literal["resource"] = "resource"

    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    is_premium: bool = False
    price: float = 0
    file_url: Optional[str] = None
    link: Optional[str] = None


# -------------------------------------------------
# Create Resource
# -------------------------------------------------
class ResourceCreate(PublishedCreate):
    """
    Premium resources point at an external `link`.
    Free resources carry a `file_url` returned by POST /resources/upload.
    """

    title: RequiredText
    description: RequiredText
    category: ResourceCategory
    is_premium: bool = False
    price: float = Field(0, ge=0)
    file_url: Optional[str] = None
    link: Optional[str] = None

    @model_validator(mode="after")
    def premium_needs_link(self):
        if self.is_premium and not (self.link or "").strip():
            raise ValueError("premium resources require a link")
        return self


# -------------------------------------------------
# Update Resource (partial)
# -------------------------------------------------
class ResourceUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ResourceCategory] = None
    is_premium: Optional[bool] = None
    price: Optional[float] = Field(None, ge=0)
    file_url: Optional[str] = None
    link: Optional[str] = None
    featured: Optional[bool] = None
