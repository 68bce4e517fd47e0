"""Error types raised while locating and reading SDKMAN metadata."""

from typing import Optional


class SdkranError(Exception):
    """Base class for sdkran errors."""

    message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DirectoryResolutionError(SdkranError):
    """The SDKMAN directory could not be inferred."""

    message = "Could not determine home directory"


class VersionFileNotFoundError(SdkranError):
    """Path is missing or is not a regular file.

    ``detail`` carries the offending path for logging. It is not meant
    to be shown to the user.
    """

    message = "Not a valid file path"


class EmptyContentError(SdkranError):
    """File exists but holds nothing besides whitespace."""

    message = "File is empty"
