"""Report the installed SDKMAN script version and the sdkran version.

Reads ``<SDKMAN_DIR>/var/version`` and prints:

    SDKRAN!
    script: 5.9.0
    native: 0.1.0 (linux x86_64)

Usage:
    sdkran-version
    python -m sdkran
"""

import logging
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from .__version__ import __version__
from .errors import DirectoryResolutionError, EmptyContentError, VersionFileNotFoundError
from .ui.output import create_console, print_error, print_info, print_plain
from .utils.constants import CLI_VERSION_FILE, VAR_DIR
from .utils.directory_utils import resolve_base_directory
from .utils.env_loader import load_env
from .utils.file_utils import read_trimmed_content, validate_exists
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

BANNER = "SDKRAN!"

# platform.system() / platform.machine() spellings mapped to the usual names
_OS_ALIASES = {
    "darwin": "macos",
}
_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i686": "x86",
}


def platform_name() -> tuple[str, str]:
    """Get the operating system and CPU architecture names.

    Returns:
        Tuple of (os, arch), e.g. ("linux", "x86_64") or ("macos", "aarch64")
    """
    system = platform.system().lower()
    machine = platform.machine().lower()
    return _OS_ALIASES.get(system, system), _ARCH_ALIASES.get(machine, machine)


@dataclass(frozen=True)
class VersionReport:
    """Versions shown by ``sdkran-version``."""

    script_version: str
    native_version: str
    os_name: str
    arch: str

    @classmethod
    def for_current_platform(cls, script_version: str) -> "VersionReport":
        os_name, arch = platform_name()
        return cls(
            script_version=script_version,
            native_version=__version__,
            os_name=os_name,
            arch=arch,
        )

    def lines(self) -> list[str]:
        return [
            f"script: {self.script_version}",
            f"native: {self.native_version} ({self.os_name} {self.arch})",
        ]

    def render(self) -> str:
        """Render the report, including the trailing blank line."""
        return "\n".join(self.lines()) + "\n\n"


def run(
    environ: Optional[Mapping[str, str]] = None,
    stdout: Optional[Console] = None,
    stderr: Optional[Console] = None,
) -> int:
    """Locate the version file, read it and print the report.

    Nothing is written to stdout unless every lookup succeeds.

    Args:
        environ: Environment for SDKMAN_DIR and colour settings. Defaults to os.environ.
        stdout: Console for the report
        stderr: Console for errors

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    if stdout is None:
        stdout = create_console(environ=environ)
    if stderr is None:
        stderr = create_console(stderr=True, environ=environ)

    try:
        sdkman_dir = resolve_base_directory(environ)
    except DirectoryResolutionError as e:
        logger.debug(f"Directory resolution failed: {e.detail}")
        print_error(stderr, f"Failed to infer SDKMAN directory: {e}")
        return 1

    cli_version_file = sdkman_dir / VAR_DIR / CLI_VERSION_FILE

    try:
        validate_exists(cli_version_file)
    except VersionFileNotFoundError as e:
        logger.debug(f"Version file missing: {e.detail}")
        print_error(stderr, "CLI version file not found.")
        return 1

    try:
        cli_version = read_trimmed_content(cli_version_file)
    except (EmptyContentError, OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {cli_version_file}: {e!r}")
        print_error(stderr, f"Failed to read file content: {e}")
        return 1

    report = VersionReport.for_current_platform(cli_version)
    print_info(stdout, BANNER)
    for line in report.lines():
        print_plain(stdout, line)
    print_plain(stdout, "")
    return 0


def main() -> None:
    """CLI entry point."""
    # .env first so SDKRAN_LOG_LEVEL can live there
    load_env()
    setup_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
