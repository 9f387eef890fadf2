"""HTML escaping and whitespace scanning helpers for template processing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

EscapeFunc = Callable[[str], str]

_HTML_ENTITIES = {
    "&": "&amp;",
    "'": "&#39;",
    '"': "&quot;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
}


@dataclass
class _EscapeConfig:
    """Holds the escape function installed in place of the built-in one."""

    func: Optional[EscapeFunc] = None

    def replace(self, func: Optional[EscapeFunc]) -> Optional[EscapeFunc]:
        if func is not None and not callable(func):
            raise TypeError(f"escape function must be callable, got {type(func).__name__}")
        previous = self.func
        self.func = func
        return previous


_config = _EscapeConfig()


def set_escape(func: Optional[EscapeFunc]) -> Optional[EscapeFunc]:
    """Install a replacement for the built-in HTML escaping.

    Passing None restores the built-in behaviour. Returns the function that
    was installed before, so callers can put it back. Raises TypeError when
    ``func`` is neither None nor callable.
    """
    return _config.replace(func)


def html_escape(text: str) -> str:
    """Escape ``& ' " < > /`` as HTML entities, or apply the installed escape."""
    if _config.func is not None:
        return _config.func(text)
    return "".join(_HTML_ENTITIES.get(ch, ch) for ch in text)


def first_not_ws(text: str, start: int, end: int) -> int:
    """Index of the first non-space character in ``text[start:end]``.

    Returns ``end`` when the range holds only spaces.
    """
    return next((i for i in range(start, end) if text[i] != " "), end)


def last_not_ws(text: str, start: int, end: int) -> int:
    """Index of the last non-space character in ``text[start:end]``.

    Returns ``start - 1`` when the range holds only spaces.
    """
    return next((i for i in range(end - 1, start - 1, -1) if text[i] != " "), start - 1)