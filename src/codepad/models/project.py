"""Project model - a named container of files."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from src.codepad.models.base import utc_now


class Project(SQLModel, table=True):
    """Project row. Created once and never updated through the API."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now, index=True)
