from src.codepad.services.archive_service import ArchiveService, ProjectArchive
from src.codepad.services.file_service import FileService, parse_file_entries
from src.codepad.services.project_service import ProjectService

__all__ = ["ArchiveService", "FileService", "ProjectArchive", "ProjectService", "parse_file_entries"]
