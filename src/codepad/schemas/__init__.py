from src.codepad.schemas.common import DatabaseCheckResponse, HealthResponse, SuccessResponse
from src.codepad.schemas.file import (
    FileContentUpdate,
    FileCreate,
    FileEntry,
    FileRead,
    FileRename,
    FilesReplace,
)
from src.codepad.schemas.project import ProjectCreate, ProjectCreated, ProjectRead

__all__ = [
    "DatabaseCheckResponse",
    "FileContentUpdate",
    "FileCreate",
    "FileEntry",
    "FileRead",
    "FileRename",
    "FilesReplace",
    "HealthResponse",
    "ProjectCreate",
    "ProjectCreated",
    "ProjectRead",
    "SuccessResponse",
]
