"""Minimal delimited-text reading and writing with escape-string handling.

Fields are separated by a single delimiter character. A delimiter that occurs
inside a value is written as an escape string ("##" by default) and turned
back into the delimiter on reading. Values may optionally be surrounded by a
quote character on writing and stripped of it on reading.
"""

from __future__ import annotations

import io
from typing import IO, Any, Iterator

DEFAULT_DELIMITER = ","
DEFAULT_ESCAPE = "##"
DEFAULT_QUOTE = '"'


def trim_right(text: str, trim_chars: str) -> str:
    """Strip trailing ``trim_chars``; a string made only of them is kept whole."""
    stripped = text.rstrip(trim_chars)
    return stripped if stripped else text


def trim_left(text: str, trim_chars: str) -> str:
    """Strip leading ``trim_chars``; a string made only of them is kept whole."""
    stripped = text.lstrip(trim_chars)
    return stripped if stripped else text


def trim(text: str, trim_chars: str) -> str:
    """Strip ``trim_chars`` from both ends, as trim_right then trim_left."""
    return trim_left(trim_right(text, trim_chars), trim_chars)


def _check_char(value: str, what: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


class CsvReader:
    """Reads delimited lines and fields from a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._eof = False
        self._line = ""
        self._pos = 0
        self._delimiter = DEFAULT_DELIMITER
        self._unescape_str = DEFAULT_ESCAPE
        self._trim_quote = False
        self._quote = DEFAULT_QUOTE
        self.terminate_on_blank_line = True

    @classmethod
    def open(cls, path: Any) -> "CsvReader":
        """Open a file for reading; only ``\\n`` ends a line."""
        return cls(open(path, "r", encoding="utf-8", newline="\n"))

    @classmethod
    def from_text(cls, text: str) -> "CsvReader":
        """Read from an in-memory string."""
        return cls(io.StringIO(text))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "CsvReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        while self.read_line():
            yield self._line

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def unescape_str(self) -> str:
        return self._unescape_str

    @property
    def line(self) -> str:
        """The current line, or what the field reader has left of it."""
        return self._line

    def enable_trim_quote(self, enable: bool, quote: str) -> None:
        """Strip ``quote`` around fields and ignore delimiters inside quotes."""
        self._trim_quote = bool(enable)
        self._quote = _check_char(quote, "quote")

    def set_delimiter(self, delimiter: str, unescape_str: str) -> None:
        self._delimiter = _check_char(delimiter, "delimiter")
        self._unescape_str = unescape_str

    def _getline(self) -> str:
        raw = self._stream.readline()
        if not raw.endswith("\n"):
            self._eof = True
            return raw
        return raw[:-1]

    def skip_line(self) -> None:
        """Read and discard one line."""
        if not self._eof:
            self._line = self._getline()
            self._pos = 0

    def read_line(self) -> bool:
        """Advance to the next line; return False when there is none.

        A blank line ends reading unless ``terminate_on_blank_line`` is off,
        in which case blank lines are skipped.
        """
        self._line = ""
        while not self._eof:
            self._line = self._getline()
            self._pos = 0
            if not self._line:
                if self.terminate_on_blank_line:
                    break
                continue
            return True
        return False

    def next_field(self) -> str:
        """Return the next field of the current line, unescaped."""
        line = self._line
        chars: list[str] = []
        within_quote = False
        while True:
            if self._pos >= len(line):
                self._line = ""
                return self.unescape("".join(chars))
            ch = line[self._pos]
            if self._trim_quote:
                if (
                    not within_quote
                    and ch == self._quote
                    and (self._pos == 0 or line[self._pos - 1] == self._delimiter)
                ):
                    within_quote = True
                elif within_quote and ch == self._quote:
                    within_quote = False
            self._pos += 1
            if ch == self._delimiter and not within_quote:
                break
            if ch in "\r\n":
                break
            chars.append(ch)
        return self.unescape("".join(chars))

    def read(self, kind: type = str) -> Any:
        """Read the next field and convert it to ``kind``.

        Raises ValueError when the field cannot be converted.
        """
        field = self.next_field()
        if kind is str:
            return field
        if kind is bool:
            value = field.strip()
            if value == "1":
                return True
            if value == "0":
                return False
            raise ValueError(f"cannot read {field!r} as bool")
        return kind(field)

    def unescape(self, text: str) -> str:
        if self._unescape_str:
            text = text.replace(self._unescape_str, self._delimiter)
        return trim(text, self._quote) if self._trim_quote else text

    def delimiter_count(self) -> int:
        """Number of delimiter characters in the current line."""
        return self._line.count(self._delimiter)

    def rest_of_line(self) -> str:
        """The part of the current line not yet read as fields."""
        return self._line[self._pos:]


class CsvWriter:
    """Writes delimited values to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self.after_newline = True
        self._delimiter = DEFAULT_DELIMITER
        self._escape_str = DEFAULT_ESCAPE
        self._surround_quote = False
        self._quote = DEFAULT_QUOTE

    @classmethod
    def open(cls, path: Any) -> "CsvWriter":
        """Create or truncate a file for writing."""
        return cls(open(path, "w", encoding="utf-8", newline="\n"))

    @classmethod
    def in_memory(cls) -> "CsvWriter":
        """Write to an in-memory buffer whose contents ``text()`` returns."""
        return cls(io.StringIO())

    def __enter__(self) -> "CsvWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def escape_str(self) -> str:
        return self._escape_str

    def enable_surround_quote(self, enable: bool, quote: str) -> None:
        """Surround string values with ``quote`` when writing."""
        self._surround_quote = bool(enable)
        self._quote = _check_char(quote, "quote")

    def set_delimiter(self, delimiter: str, escape_str: str) -> None:
        self._delimiter = _check_char(delimiter, "delimiter")
        self._escape_str = escape_str

    def _escape(self, text: str) -> str:
        if not self._escape_str:
            return text
        return text.replace(self._delimiter, self._escape_str)

    @staticmethod
    def _format(value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, float):
            return f"{value:g}"
        return str(value)

    def write(self, value: Any) -> "CsvWriter":
        """Write one field, preceded by the delimiter unless at line start."""
        if not self.after_newline:
            self._stream.write(self._delimiter)
        if isinstance(value, str):
            escaped = self._escape(value)
            if self._surround_quote:
                escaped = f"{self._quote}{escaped}{self._quote}"
            self._stream.write(escaped)
        else:
            self._stream.write(self._escape(self._format(value)))
        self.after_newline = False
        return self

    def end_line(self) -> "CsvWriter":
        self._stream.write("\n")
        self.after_newline = True
        return self

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        self._stream.close()

    def text(self) -> str:
        """Everything written so far by an in-memory writer."""
        if not isinstance(self._stream, io.StringIO):
            raise ValueError("writer does not write to memory")
        return self._stream.getvalue()