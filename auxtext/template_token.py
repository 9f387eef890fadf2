"""Tokens of a mustache-style template."""

from __future__ import annotations

import enum

from auxtext.escaping import first_not_ws, last_not_ws


class TokenType(enum.Enum):
    TEXT = "text"
    VARIABLE = "variable"
    SECTION_OPEN = "section_open"
    SECTION_CLOSE = "section_close"
    INVERTED_SECTION_OPEN = "inverted_section_open"
    UNESCAPED_VARIABLE = "unescaped_variable"
    COMMENT = "comment"
    PARTIAL = "partial"
    DELIMITER_CHANGE = "delimiter_change"


_SIGILS = {
    ">": TokenType.PARTIAL,
    "^": TokenType.INVERTED_SECTION_OPEN,
    "/": TokenType.SECTION_CLOSE,
    "&": TokenType.UNESCAPED_VARIABLE,
    "#": TokenType.SECTION_OPEN,
    "!": TokenType.COMMENT,
}

_WHITESPACE = " \r\n\t"


def token_type_for(char: str) -> TokenType:
    """The tag type that a leading sigil character selects."""
    return _SIGILS.get(char, TokenType.VARIABLE)


class Token:
    """One piece of a template: plain text or a tag.

    ``left`` and ``right`` are the lengths of the opening and closing
    delimiters around a tag; when either is zero the piece is text.
    """

    def __init__(self, raw: str, left: int = 0, right: int = 0) -> None:
        self.raw = raw
        self.name = ""
        self.partial_prefix = ""
        self.delims: tuple[str, str] = ("", "")
        self.eol = False
        self.ws_only = False

        if left and right:
            close_at = len(raw) - right
            if raw[left] == "=" and raw[close_at - 1] == "=":
                self.type = TokenType.DELIMITER_CHANGE
            elif raw[left] == "{" and raw[close_at - 1] == "}":
                self.type = TokenType.UNESCAPED_VARIABLE
                start = first_not_ws(raw, left + 1, close_at)
                stop = last_not_ws(raw, left, close_at - 1) + 1
                self.name = raw[start:stop]
            else:
                start = first_not_ws(raw, left, close_at)
                self.type = token_type_for(raw[start])
                if self.type is not TokenType.VARIABLE:
                    start = first_not_ws(raw, start + 1, close_at)
                stop = last_not_ws(raw, left, close_at) + 1
                self.name = raw[start:stop]
                self.delims = (raw[:left], raw[close_at:])
        else:
            self.type = TokenType.TEXT
            self.eol = raw.endswith("\n")
            self.ws_only = all(ch in _WHITESPACE for ch in raw)

    def __repr__(self) -> str:
        return f"Token(type={self.type.name}, name={self.name!r}, raw={self.raw!r})"