"""Repository for File entity."""

from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select

from src.codepad.models import File
from src.codepad.repositories.base import BaseRepository


class FileRepository(BaseRepository[File]):
    model = File

    async def list_by_project(self, project_id: UUID) -> list[File]:
        """List a project's files, oldest first, in submission order within a batch."""
        result = await self.session.execute(
            select(File)
            .where(File.project_id == project_id)
            .order_by(File.created_at, File.position)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())

    async def get_by_path(self, project_id: UUID, path: str) -> File | None:
        result = await self.session.execute(
            select(File).where(File.project_id == project_id, File.path == path)
        )
        return result.scalar_one_or_none()

    async def update_content(self, file_id: UUID, content: str) -> int:
        """Overwrite a file's content. Returns the number of rows changed."""
        result = await self.session.execute(
            update(File).where(File.id == file_id).values(content=content)  # type: ignore[arg-type]
        )
        return result.rowcount

    async def update_path(self, file_id: UUID, path: str) -> int:
        """Overwrite a file's path. Returns the number of rows changed."""
        result = await self.session.execute(
            update(File).where(File.id == file_id).values(path=path)  # type: ignore[arg-type]
        )
        return result.rowcount

    async def delete_by_id(self, file_id: UUID) -> int:
        result = await self.session.execute(delete(File).where(File.id == file_id))  # type: ignore[arg-type]
        return result.rowcount

    async def delete_by_project(self, project_id: UUID) -> int:
        """Delete every file of a project. Returns the number of rows removed."""
        result = await self.session.execute(
            delete(File).where(File.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount
