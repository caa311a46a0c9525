"""File endpoints - edit, rename and delete single files."""

from uuid import UUID

from fastapi import APIRouter

from src.codepad.api.dependencies import FileServiceDep
from src.codepad.schemas import FileContentUpdate, FileRename, SuccessResponse

router = APIRouter(prefix="/files", tags=["files"])


@router.patch(
    "/{file_id}",
    response_model=SuccessResponse,
    summary="Update file content",
    responses={
        400: {"description": "content missing"},
        404: {"description": "File not found"},
    },
)
async def update_file_content(
    file_id: UUID,
    request: FileContentUpdate,
    service: FileServiceDep,
) -> SuccessResponse:
    await service.update_file_content(file_id, request.content)
    return SuccessResponse()


@router.patch(
    "/{file_id}/rename",
    response_model=SuccessResponse,
    summary="Rename file",
    responses={
        400: {"description": "Path missing or unsafe"},
        404: {"description": "File not found"},
        409: {"description": "A file with this path already exists"},
    },
)
async def rename_file(
    file_id: UUID,
    request: FileRename,
    service: FileServiceDep,
) -> SuccessResponse:
    await service.rename_file(file_id, request.path)
    return SuccessResponse()


@router.delete(
    "/{file_id}",
    response_model=SuccessResponse,
    summary="Delete file",
    description="Delete a file. Deleting a file that does not exist also succeeds.",
)
async def delete_file(file_id: UUID, service: FileServiceDep) -> SuccessResponse:
    await service.delete_file(file_id)
    return SuccessResponse()
