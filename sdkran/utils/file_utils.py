"""Read-only helpers for small SDKMAN metadata files."""

import logging
import os
import stat
from pathlib import Path
from typing import Union

from ..errors import EmptyContentError, VersionFileNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def validate_exists(path: PathLike) -> Path:
    """Check that a path exists and is a regular file.

    Directories, dangling symlinks, sockets and other non-regular entries
    are rejected the same way as a missing path.

    Args:
        path: Path to check

    Returns:
        The same path, as a Path

    Raises:
        VersionFileNotFoundError: If the path is not an existing regular file
    """
    file_path = Path(path)
    try:
        mode = file_path.stat().st_mode
    except OSError as e:
        # Any lookup failure (ENOENT, EACCES, ENAMETOOLONG, ...) means not found
        logger.debug(f"Cannot stat {file_path}: {e}")
        raise VersionFileNotFoundError(detail=str(file_path)) from e

    if stat.S_ISREG(mode):
        return file_path

    logger.debug(f"Not a valid file path: {file_path}")
    raise VersionFileNotFoundError(detail=str(file_path))


def read_trimmed_content(path: PathLike) -> str:
    """Read a text file and strip surrounding whitespace.

    Any non-empty text is accepted; the content is not checked against a
    version format.

    Args:
        path: File to read

    Returns:
        File content without leading or trailing whitespace

    Raises:
        EmptyContentError: If nothing is left after stripping
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    content = Path(path).read_text(encoding="utf-8")
    trimmed = content.strip()
    if not trimmed:
        raise EmptyContentError(detail=str(path))
    return trimmed
