"""Version information for the sdkran native tooling."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))
