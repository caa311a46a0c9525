"""File service - single-file edits and bulk replace of a project's files."""

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.codepad.core.db import store_timeout
from src.codepad.core.exceptions import (
    DuplicatePathError,
    NotFoundError,
    ReferentialIntegrityError,
    TransactionAborted,
    ValidationError,
)
from src.codepad.core.logging import get_logger
from src.codepad.core.validators import normalize_file_path
from src.codepad.models import File
from src.codepad.models.base import utc_now
from src.codepad.repositories import FileRepository, ProjectRepository
from src.codepad.schemas.file import FileEntry

logger = get_logger(__name__)


def _require_path(path: Any, prefix: str = "") -> str:
    """Check that ``path`` is present and safe, and return it unchanged.

    Paths are stored exactly as sent; normalization only decides whether a path
    would stay inside the project once exported.
    """
    if not isinstance(path, str) or not path.strip():
        raise ValidationError(f"{prefix}Path required")
    try:
        normalize_file_path(path)
    except ValueError as e:
        raise ValidationError(f"{prefix}{e}") from e
    return path


def parse_file_entries(files: Any) -> list[FileEntry]:
    """Validate a bulk replace payload into ordered ``FileEntry`` values.

    Raises:
        ValidationError: If ``files`` is not an array of ``{path, content}`` objects.
    """
    if isinstance(files, str | bytes) or not isinstance(files, Sequence):
        raise ValidationError("files must be an array")

    entries: list[FileEntry] = []
    for index, item in enumerate(files):
        field = f"files[{index}]"
        if not isinstance(item, Mapping):
            raise ValidationError(f"{field} must be an object with path and content")
        path = _require_path(item.get("path"), f"{field}: ")
        content = item.get("content", "")
        if not isinstance(content, str):
            raise ValidationError(f"{field}: content must be a string")
        entries.append(FileEntry(path=path, content=content))
    return entries


class FileService:
    """File operations - business logic only."""

    def __init__(
        self,
        file_repo: FileRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
        timeout: float,
    ):
        self.file_repo = file_repo
        self.project_repo = project_repo
        self.session = session
        self.timeout = timeout

    async def list_files(self, project_id: UUID) -> list[File]:
        """List a project's files in creation order.

        An unknown project simply has no files.
        """
        async with store_timeout(self.timeout):
            return await self.file_repo.list_by_project(project_id)

    async def create_file(self, project_id: UUID, path: str | None) -> File:
        """Create an empty file under a project.

        Raises:
            ValidationError: If path is missing or unsafe.
            DuplicatePathError: If the project already has a file at this path.
            ReferentialIntegrityError: If the project does not exist.
        """
        path = _require_path(path)
        file = File(project_id=project_id, path=path, content="")

        try:
            async with store_timeout(self.timeout):
                # Check for duplicate path before insert
                if await self.file_repo.get_by_path(project_id, path) is not None:
                    raise DuplicatePathError(f"File '{path}' already exists")
                self.file_repo.add(file)
                await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            async with store_timeout(self.timeout):
                project_exists = await self.project_repo.exists(project_id)
            if not project_exists:
                raise ReferentialIntegrityError(f"Project {project_id} not found") from e
            # Fallback in case of race condition on the unique path constraint
            raise DuplicatePathError(f"File '{path}' already exists") from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("file_created", project_id=str(project_id), file_id=str(file.id))
        return file

    async def update_file_content(self, file_id: UUID, content: str | None) -> None:
        """Overwrite a file's content. An empty string is valid content.

        Raises:
            ValidationError: If content is absent.
            NotFoundError: If no file has this id.
        """
        if content is None:
            raise ValidationError("Content required")
        if not isinstance(content, str):
            raise ValidationError("Content must be a string")

        try:
            async with store_timeout(self.timeout):
                updated = await self.file_repo.update_content(file_id, content)
                if updated == 0:
                    raise NotFoundError(f"File {file_id} not found")
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.debug("file_content_updated", file_id=str(file_id), size=len(content))

    async def rename_file(self, file_id: UUID, path: str | None) -> None:
        """Move a file to a new path within its project.

        Raises:
            ValidationError: If path is missing or unsafe.
            NotFoundError: If no file has this id.
            DuplicatePathError: If another file in the project already uses the path.
        """
        path = _require_path(path)

        try:
            async with store_timeout(self.timeout):
                file = await self.file_repo.get_by_id(file_id)
                if file is None:
                    raise NotFoundError(f"File {file_id} not found")
                if file.path == path:
                    return
                existing = await self.file_repo.get_by_path(file.project_id, path)
                if existing is not None:
                    raise DuplicatePathError(f"File '{path}' already exists")
                await self.file_repo.update_path(file_id, path)
                await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicatePathError(f"File '{path}' already exists") from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("file_renamed", file_id=str(file_id))

    async def delete_file(self, file_id: UUID) -> bool:
        """Delete a file. Deleting a missing file is not an error.

        Returns:
            True if a row was removed.
        """
        try:
            async with store_timeout(self.timeout):
                deleted = await self.file_repo.delete_by_id(file_id)
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("file_deleted", file_id=str(file_id), existed=deleted > 0)
        return deleted > 0

    async def replace_all_files(self, project_id: UUID, files: Any) -> list[File]:
        """Atomically replace every file of a project.

        All existing rows are deleted and one row per entry is inserted in a single
        transaction. Entries share one ``created_at`` and keep their submitted order
        through ``position``. The project row is locked for the duration so that
        concurrent replaces of the same project apply one after the other (the last
        commit wins).

        Raises:
            ValidationError: If ``files`` is not an array of ``{path, content}`` objects.
            NotFoundError: If the project does not exist.
            TransactionAborted: If any statement fails; nothing is changed.
        """
        entries = parse_file_entries(files)
        created_at = utc_now()
        new_files = [
            File(
                project_id=project_id,
                path=entry.path,
                content=entry.content,
                position=position,
                created_at=created_at,
            )
            for position, entry in enumerate(entries)
        ]

        try:
            async with store_timeout(self.timeout):
                project = await self.project_repo.get_for_update(project_id)
                if project is None:
                    raise NotFoundError(f"Project {project_id} not found")
                removed = await self.file_repo.delete_by_project(project_id)
                self.file_repo.add_all(new_files)
                await self.session.flush()
                await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning(
                "files_replace_rolled_back",
                project_id=str(project_id),
                error=repr(e),
            )
            raise TransactionAborted(
                "Failed to replace project files; no changes were applied"
            ) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "files_replaced",
            project_id=str(project_id),
            removed=removed,
            inserted=len(new_files),
        )
        return new_files
