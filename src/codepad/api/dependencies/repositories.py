"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.codepad.api.dependencies.db import DBSession
from src.codepad.repositories import FileRepository, ProjectRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_file_repository(session: DBSession) -> FileRepository:
    return FileRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
FileRepo = Annotated[FileRepository, Depends(get_file_repository)]
