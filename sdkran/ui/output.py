"""Styled terminal output built on Rich.

Text handed to these helpers is printed literally; Rich markup and
highlighting are never applied to it.
"""

import os
from collections.abc import Mapping
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..utils.constants import PLAIN_OUTPUT_ENV_VAR

INFO_STYLE = "bold yellow"
ERROR_STYLE = "red"


def use_color(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether styled output is allowed.

    Returns False if:
    - NO_COLOR is set (any value)
    - SDKRAN_PLAIN_OUTPUT is "1" or "true"

    Whether the stream is a terminal is left to Rich.
    """
    if environ is None:
        environ = os.environ

    if environ.get(PLAIN_OUTPUT_ENV_VAR, "").lower() in ("true", "1"):
        return False

    if environ.get("NO_COLOR") is not None:
        return False

    return True


def create_console(stderr: bool = False, environ: Optional[Mapping[str, str]] = None) -> Console:
    """Create a console for stdout or stderr.

    Args:
        stderr: Write to stderr instead of stdout
        environ: Environment used for colour detection. Defaults to os.environ.

    Returns:
        Rich Console
    """
    return Console(
        stderr=stderr,
        no_color=not use_color(environ),
        highlight=False,
        emoji=False,
        markup=False,
    )


def print_info(console: Console, message: str) -> None:
    """Print a bold yellow line."""
    console.print(Text(message, style=INFO_STYLE), soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    """Print ``Error: <message>`` in red."""
    console.print(Text(f"Error: {message}", style=ERROR_STYLE), soft_wrap=True)


def print_plain(console: Console, text: str) -> None:
    """Write a line to the console's stream exactly as given.

    Bypasses Rich rendering, which would expand tabs and drop control
    characters.
    """
    console.file.write(text + "\n")
    console.file.flush()
