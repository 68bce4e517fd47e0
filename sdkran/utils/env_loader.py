"""Environment variable loader for sdkran configuration.

Loads an optional user-global ``.env`` file so settings such as
``SDKMAN_DIR`` or ``SDKRAN_LOG_LEVEL`` can be kept out of shell profiles:

    ~/.config/sdkran/.env   (or $XDG_CONFIG_HOME/sdkran/.env)

Variables already present in the process environment always win.

Usage:
    from sdkran.utils.env_loader import load_env, reload_env
    load_env()    # no-op after the first call
    reload_env()  # force reload
"""

import logging
import os
import stat
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Flag to track if environment has been loaded
_env_loaded = False


def get_global_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the global configuration directory path.

    Args:
        environ: Environment to read XDG_CONFIG_HOME from. Defaults to os.environ.

    Returns:
        Path to ~/.config/sdkran/
    """
    if environ is None:
        environ = os.environ

    config_home = environ.get("XDG_CONFIG_HOME", "")
    if not config_home:
        config_home = str(Path.home() / ".config")

    return Path(config_home) / "sdkran"


def _is_regular_file(path: Path) -> bool:
    """is_file() that treats any OSError (EACCES, ENAMETOOLONG, ...) as absent."""
    try:
        return stat.S_ISREG(path.stat().st_mode)
    except OSError as e:
        logger.debug(f"Cannot stat {path}: {e}")
        return False


def load_env(force: bool = False) -> bool:
    """Load environment variables from the global .env file.

    Args:
        force: If True, reload even if already loaded

    Returns:
        True if a .env file was loaded
    """
    global _env_loaded

    if _env_loaded and not force:
        return False

    loaded = False
    try:
        global_env = get_global_config_path() / ".env"
    except (RuntimeError, KeyError) as e:
        # No home directory; nothing to load
        logger.debug(f"Skipping .env loading: {e}")
        global_env = None

    if global_env is not None and _is_regular_file(global_env):
        try:
            loaded = load_dotenv(global_env, override=False)
            logger.debug(f"Loaded global config from {global_env}")
        except OSError as e:
            logger.warning(f"Could not read {global_env}: {e}")

    _env_loaded = True
    return loaded


def reload_env() -> bool:
    """Force reload environment from the .env file.

    Returns:
        True if a .env file was loaded
    """
    return load_env(force=True)


def get_env_sources() -> dict[str, Optional[str]]:
    """Describe the .env file sdkran would read.

    Useful for debugging configuration issues.

    Returns:
        Dictionary with global_path and global_exists
    """
    global_path = get_global_config_path() / ".env"
    return {
        "global_path": str(global_path),
        "global_exists": _is_regular_file(global_path),
    }
