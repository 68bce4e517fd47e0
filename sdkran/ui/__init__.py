"""Terminal output helpers."""

from sdkran.ui.output import create_console, print_error, print_info, print_plain, use_color

__all__ = [
    "create_console",
    "print_error",
    "print_info",
    "print_plain",
    "use_color",
]
