"""Native companion tools for SDKMAN.

Reports the installed SDKMAN script version alongside the sdkran version.
"""

from .__version__ import __version__, __version_info__
from .version import VersionReport, run

__all__ = ["VersionReport", "run", "__version__", "__version_info__"]
