"""Validation of user-supplied file paths."""

import re
from typing import Final

MAX_PATH_LENGTH: Final[int] = 1024

_DRIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")
_CONTROL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x7f]")


def normalize_file_path(path: str) -> str:
    """Normalize a project file path into a safe, relative, POSIX-style path.

    Backslashes become forward slashes, whitespace around each segment is
    trimmed, and empty and ``.`` segments are dropped, so ``"./src//main.py "``
    becomes ``"src/main.py"``. Normalizing a normalized path returns it unchanged.

    Raises:
        ValueError: If the path is empty, absolute, escapes the project root with
            ``..``, contains control characters or is too long.
    """
    if len(path) > MAX_PATH_LENGTH:
        raise ValueError(f"Path must be at most {MAX_PATH_LENGTH} characters")
    candidate = path.replace("\\", "/")
    if _CONTROL_PATTERN.search(candidate):
        raise ValueError("Path must not contain control characters")
    if candidate.lstrip().startswith("/"):
        raise ValueError(f"Path must be relative: {path!r}")

    segments = [segment.strip() for segment in candidate.split("/")]
    segments = [segment for segment in segments if segment not in ("", ".")]
    if not segments:
        raise ValueError("Path must not be empty")
    if ".." in segments:
        raise ValueError(f"Path must not contain '..' segments: {path!r}")

    normalized = "/".join(segments)
    if _DRIVE_PATTERN.match(normalized):
        raise ValueError(f"Path must be relative: {path!r}")
    return normalized


def is_safe_file_path(path: str) -> bool:
    """Return True if ``path`` is already in normalized, safe form."""
    try:
        return normalize_file_path(path) == path
    except ValueError:
        return False
