"""Repository for Project entity."""

from uuid import UUID

from sqlmodel import select

from src.codepad.models import Project
from src.codepad.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_all(self) -> list[Project]:
        """List every project, newest first."""
        result = await self.session.execute(
            select(Project).order_by(Project.created_at.desc(), Project.id)  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def get_for_update(self, project_id: UUID) -> Project | None:
        """Get a project and lock its row until the transaction ends.

        Writers that rebuild a project's file set take this lock first so that
        they serialize instead of interleaving. Dialects without row locks
        (SQLite) ignore FOR UPDATE.
        """
        result = await self.session.execute(
            select(Project).where(Project.id == project_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def exists(self, project_id: UUID) -> bool:
        result = await self.session.execute(select(Project.id).where(Project.id == project_id))
        return result.scalar_one_or_none() is not None
