"""Repository layer - data access abstraction."""

from src.codepad.repositories.base import BaseRepository
from src.codepad.repositories.file import FileRepository
from src.codepad.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "FileRepository",
    "ProjectRepository",
]
