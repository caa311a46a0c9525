"""Project endpoints - create/list projects and operate on a project's files."""

from uuid import UUID

from fastapi import APIRouter, status
from fastapi.responses import StreamingResponse

from src.codepad.api.dependencies import ArchiveServiceDep, FileServiceDep, ProjectServiceDep
from src.codepad.core.logging import bind_project_context
from src.codepad.schemas import (
    FileCreate,
    FileRead,
    FilesReplace,
    ProjectCreate,
    ProjectCreated,
    ProjectRead,
    SuccessResponse,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post(
    "",
    response_model=ProjectCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project and return its id and name with 201 Created.",
    responses={400: {"description": "Name missing or blank"}},
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectCreated:
    project = await service.create_project(request.name)
    return ProjectCreated.model_validate(project)


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List every project, newest first.",
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    projects = await service.list_projects()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}/files",
    response_model=list[FileRead],
    summary="List files",
    description="List a project's files, oldest first. Unknown projects have no files.",
)
async def list_files(project_id: UUID, service: FileServiceDep) -> list[FileRead]:
    files = await service.list_files(project_id)
    return [FileRead.model_validate(f) for f in files]


@router.post(
    "/{project_id}/files",
    response_model=SuccessResponse,
    summary="Replace all files",
    description="Atomically replace every file of the project with the submitted list.",
    responses={
        400: {"description": "files is not an array of {path, content} objects"},
        404: {"description": "Project not found"},
        500: {"description": "Write failed; the previous files are unchanged"},
    },
)
async def replace_files(
    project_id: UUID,
    request: FilesReplace,
    service: FileServiceDep,
) -> SuccessResponse:
    bind_project_context(project_id)
    await service.replace_all_files(project_id, request.files)
    return SuccessResponse()


@router.post(
    "/{project_id}/files/new",
    response_model=FileRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create file",
    description="Create an empty file at the given path and return it with 201 Created.",
    responses={
        400: {"description": "Path missing or unsafe"},
        404: {"description": "Project not found"},
        409: {"description": "A file with this path already exists"},
    },
)
async def create_file(
    project_id: UUID,
    request: FileCreate,
    service: FileServiceDep,
) -> FileRead:
    bind_project_context(project_id)
    file = await service.create_file(project_id, request.path)
    return FileRead.model_validate(file)


@router.get(
    "/{project_id}/download",
    summary="Download project as zip",
    response_class=StreamingResponse,
    responses={
        200: {"content": {"application/zip": {}}, "description": "Zip archive stream"},
        500: {"description": "Archive could not be generated"},
    },
)
async def download_project(project_id: UUID, service: ArchiveServiceDep) -> StreamingResponse:
    bind_project_context(project_id)
    archive = await service.export_project(project_id)
    return StreamingResponse(
        archive.chunks,
        media_type="application/zip",
        headers={"Content-Disposition": f"attachment; filename={archive.filename}"},
    )
