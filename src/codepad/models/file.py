"""File model - a path/content pair owned by a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.codepad.core.validators import MAX_PATH_LENGTH
from src.codepad.models.base import utc_now


class File(SQLModel, table=True):
    """File row.

    Listing order is ``(created_at, position)``: files written by one bulk replace
    share a timestamp and keep the order they were submitted in via ``position``.
    """

    __tablename__ = "files"
    __table_args__ = (UniqueConstraint("project_id", "path", name="uq_files_project_path"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    path: str = Field(max_length=MAX_PATH_LENGTH)
    content: str = Field(default="", sa_type=Text)
    position: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
