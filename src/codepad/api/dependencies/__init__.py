"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

from src.codepad.api.dependencies.db import (
    DatabaseDep,
    DBSession,
    SettingsDep,
    get_app_settings,
    get_database,
    get_db_session,
)
from src.codepad.api.dependencies.repositories import (
    FileRepo,
    ProjectRepo,
    get_file_repository,
    get_project_repository,
)
from src.codepad.api.dependencies.services import (
    ArchiveServiceDep,
    FileServiceDep,
    ProjectServiceDep,
    get_archive_service,
    get_file_service,
    get_project_service,
)

__all__ = [
    # Database
    "DatabaseDep",
    "DBSession",
    "SettingsDep",
    "get_app_settings",
    "get_database",
    "get_db_session",
    # Repositories
    "FileRepo",
    "ProjectRepo",
    "get_file_repository",
    "get_project_repository",
    # Services
    "ArchiveServiceDep",
    "FileServiceDep",
    "ProjectServiceDep",
    "get_archive_service",
    "get_file_service",
    "get_project_service",
]
