"""Utility modules for sdkran."""

from .directory_utils import fallback_sdkman_dir, resolve_base_directory
from .file_utils import read_trimmed_content, validate_exists

__all__ = [
    # Directory resolution
    "resolve_base_directory",
    "fallback_sdkman_dir",
    # File access
    "validate_exists",
    "read_trimmed_content",
]
