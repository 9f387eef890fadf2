"""System error messages, error reporting and coloured console output."""

from __future__ import annotations

import enum
import os
import sys
from typing import IO, Any, Optional

INLINE_BUFFER_SIZE = 500
RESET_COLOR = "\x1b[0m"

_SEP = ": "
_ERROR_STR = "error "


class Color(enum.IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class FormatError(ValueError):
    """A format specification could not be applied."""


def format_error_code(error_code: int, message: str) -> str:
    """``"<message>: error <code>"``, dropping the message if it is too long."""
    code_text = f"{_ERROR_STR}{error_code}"
    if len(message) <= INLINE_BUFFER_SIZE - len(_SEP) - len(code_text):
        return f"{message}{_SEP}{code_text}"
    return code_text


def format_system_error(error_code: int, message: str) -> str:
    """``"<message>: <system description of the code>"``.

    Falls back to :func:`format_error_code` when the system has no
    description for the code.
    """
    try:
        description = os.strerror(error_code)
    except (ValueError, OverflowError):
        return format_error_code(error_code, message)
    return f"{message}{_SEP}{description}"


class SystemFailure(RuntimeError):
    """An error from the operating system, described with its message."""

    def __init__(self, error_code: int, template: str, *args: Any, **kwargs: Any) -> None:
        self.error_code = error_code
        super().__init__(format_system_error(error_code, template.format(*args, **kwargs)))


def report_system_error(error_code: int, message: str, stream: Optional[IO[str]] = None) -> None:
    """Write the system error message and a newline to ``stream`` (stderr)."""
    out = sys.stderr if stream is None else stream
    out.write(format_system_error(error_code, message) + "\n")


def report_unknown_type(code: str, type_name: str) -> None:
    """Raise FormatError for a format code that does not apply to a type."""
    if " " <= code <= "~":
        raise FormatError(f"unknown format code '{code}' for {type_name}")
    raise FormatError(f"unknown format code '\\x{ord(code) & 0xFF:02x}' for {type_name}")


def print_colored(color: Color, template: str, *args: Any, **kwargs: Any) -> None:
    """Print formatted text to stdout in an ANSI foreground colour."""
    sys.stdout.write(f"\x1b[3{int(color)}m")
    sys.stdout.write(template.format(*args, **kwargs))
    sys.stdout.write(RESET_COLOR)