"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    ``name`` is optional at the parsing layer so that a missing name reaches the
    service and is reported with the same message as an empty one.
    """

    name: str | None = None


class ProjectCreated(BaseModel):
    id: UUID
    name: str

    model_config = {"from_attributes": True}


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
