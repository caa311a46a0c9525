"""Archive export service - stream a project's files as a zip download."""

from collections.abc import Iterator
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.codepad.core.archive import ArchiveEntry, iter_zip
from src.codepad.core.db import store_timeout
from src.codepad.core.exceptions import ArchiveExportError
from src.codepad.core.logging import get_logger
from src.codepad.core.validators import normalize_file_path
from src.codepad.repositories import FileRepository

logger = get_logger(__name__)


@dataclass
class ProjectArchive:
    filename: str
    entries: list[ArchiveEntry]
    chunks: Iterator[bytes]


class ArchiveService:
    """Builds zip exports. Files are read once; encoding happens as chunks are pulled."""

    def __init__(
        self,
        file_repo: FileRepository,
        timeout: float,
        chunk_size: int = 64 * 1024,
        compression_level: int = 6,
    ):
        self.file_repo = file_repo
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.compression_level = compression_level

    async def export_project(self, project_id: UUID) -> ProjectArchive:
        """Prepare a zip export of a project's current files.

        An unknown project yields an empty archive. Stored paths are normalized
        before they become entry names; rows whose path is unsafe or
        collides with an earlier entry are left out.

        Raises:
            ArchiveExportError: If the files cannot be read.
        """
        try:
            async with store_timeout(self.timeout):
                files = await self.file_repo.list_by_project(project_id)
        except SQLAlchemyError as e:
            raise ArchiveExportError() from e

        entries: list[ArchiveEntry] = []
        seen: set[str] = set()
        for file in files:
            try:
                name = normalize_file_path(file.path)
            except ValueError:
                logger.warning("archive_entry_skipped", file_id=str(file.id), reason="unsafe_path")
                continue
            if name in seen:
                logger.warning("archive_entry_skipped", file_id=str(file.id), reason="duplicate_path")
                continue
            seen.add(name)
            entries.append(ArchiveEntry(name=name, content=file.content))

        logger.info("archive_export_started", project_id=str(project_id), entries=len(entries))
        return ProjectArchive(
            filename=f"project-{project_id}.zip",
            entries=entries,
            chunks=self._stream(project_id, entries),
        )

    def _stream(self, project_id: UUID, entries: list[ArchiveEntry]) -> Iterator[bytes]:
        try:
            yield from iter_zip(entries, self.chunk_size, self.compression_level)
        except Exception as e:
            # Headers are already sent; the client sees a truncated body.
            logger.exception("archive_export_failed", project_id=str(project_id))
            raise ArchiveExportError() from e
        logger.info("archive_export_finished", project_id=str(project_id))
