"""Model exports.

Import from here: `from src.codepad.models import File, Project`
"""

from src.codepad.models.file import File
from src.codepad.models.project import Project

__all__ = [
    "File",
    "Project",
]
