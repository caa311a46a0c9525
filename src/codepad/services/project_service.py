"""Project service - create and list projects."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.codepad.core.db import store_timeout
from src.codepad.core.exceptions import ValidationError
from src.codepad.core.logging import get_logger
from src.codepad.models import Project
from src.codepad.repositories import ProjectRepository

logger = get_logger(__name__)


class ProjectService:
    """Project operations - business logic only."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        session: AsyncSession,
        timeout: float,
    ):
        self.project_repo = project_repo
        self.session = session
        self.timeout = timeout

    async def create_project(self, name: str | None) -> Project:
        """Create a project. A valid name is stored exactly as sent.

        Raises:
            ValidationError: If name is missing, not a string or blank.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name required")

        project = Project(name=name)
        try:
            async with store_timeout(self.timeout):
                self.project_repo.add(project)
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("project_created", project_id=str(project.id))
        return project

    async def list_projects(self) -> list[Project]:
        """List all projects, newest first."""
        async with store_timeout(self.timeout):
            return await self.project_repo.list_all()
