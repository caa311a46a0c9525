"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.codepad.api.dependencies.db import DatabaseDep, DBSession, SettingsDep
from src.codepad.api.dependencies.repositories import FileRepo, ProjectRepo
from src.codepad.services import ArchiveService, FileService, ProjectService


def get_project_service(
    project_repo: ProjectRepo,
    session: DBSession,
    database: DatabaseDep,
) -> ProjectService:
    return ProjectService(project_repo, session, database.timeout)


def get_file_service(
    file_repo: FileRepo,
    project_repo: ProjectRepo,
    session: DBSession,
    database: DatabaseDep,
) -> FileService:
    return FileService(file_repo, project_repo, session, database.timeout)


def get_archive_service(
    file_repo: FileRepo,
    database: DatabaseDep,
    settings: SettingsDep,
) -> ArchiveService:
    """Get archive service with chunking settings."""
    return ArchiveService(
        file_repo,
        database.timeout,
        chunk_size=settings.archive_chunk_size,
        compression_level=settings.archive_compression_level,
    )


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
FileServiceDep = Annotated[FileService, Depends(get_file_service)]
ArchiveServiceDep = Annotated[ArchiveService, Depends(get_archive_service)]
