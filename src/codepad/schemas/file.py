"""File schemas for API request/response."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel


class FileCreate(BaseModel):
    path: str | None = None


class FileContentUpdate(BaseModel):
    """Content update. An empty string is valid content; absence is not."""

    content: str | None = None


class FileRename(BaseModel):
    path: str | None = None


class FilesReplace(BaseModel):
    """Bulk replace payload.

    ``files`` is left untyped here; its shape is checked by the file service so
    that a wrong shape is reported as a validation failure with a precise message.
    """

    files: Any = None


class FileRead(BaseModel):
    """Schema for reading a file."""

    id: UUID
    path: str
    content: str

    model_config = {"from_attributes": True}


class FileEntry(BaseModel):
    """A validated ``{path, content}`` pair from a bulk replace payload."""

    path: str
    content: str = ""
