"""Locate the SDKMAN installation directory.

The directory comes from the ``SDKMAN_DIR`` environment variable when it is
set, and otherwise defaults to ``~/.sdkman``.

Usage:
    from sdkran.utils.directory_utils import resolve_base_directory

    sdkman_dir = resolve_base_directory()
    sdkman_dir = resolve_base_directory({"SDKMAN_DIR": "/opt/sdkman"})
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from ..errors import DirectoryResolutionError
from .constants import DEFAULT_SDKMAN_HOME, SDKMAN_DIR_ENV_VAR

logger = logging.getLogger(__name__)


def resolve_base_directory(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Determine the SDKMAN directory.

    If ``SDKMAN_DIR`` is set to a non-empty value it is returned as a path
    without checking that it exists. Otherwise falls back to
    :func:`fallback_sdkman_dir`.

    Args:
        environ: Environment to read the override from. Defaults to os.environ.

    Returns:
        Path to the SDKMAN directory

    Raises:
        DirectoryResolutionError: No override and no home directory.
    """
    if environ is None:
        environ = os.environ

    override = environ.get(SDKMAN_DIR_ENV_VAR, "")
    if override:
        logger.debug(f"Using {SDKMAN_DIR_ENV_VAR} override: {override}")
        return Path(override)

    return fallback_sdkman_dir()


def fallback_sdkman_dir(home: Optional[Path] = None) -> Path:
    """Return the default SDKMAN directory under the user's home.

    Args:
        home: Home directory to use. Defaults to Path.home().

    Returns:
        ``<home>/.sdkman``

    Raises:
        DirectoryResolutionError: If the home directory cannot be determined
    """
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise DirectoryResolutionError(detail=str(e)) from e

    # expanduser() hands back "~" untouched when there is no profile to use
    if str(home) == "~" or not home.is_absolute():
        raise DirectoryResolutionError(detail=f"Unusable home directory: {home}")

    sdkman_dir = home / DEFAULT_SDKMAN_HOME
    logger.debug(f"Falling back to default SDKMAN directory: {sdkman_dir}")
    return sdkman_dir
