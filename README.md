# auxtext

A handful of small text utilities with no third-party dependencies.

## Modules

### `auxtext.csvstream`

This module reads and writes delimited text. A delimiter that occurs inside a
value is not quoted. It is replaced with an escape string (`##` by default),
and the reader turns that string back into the delimiter.

```python
from auxtext.csvstream import CsvReader, CsvWriter

writer = CsvWriter.in_memory()
writer.write("apple")
writer.write(3)
writer.write("a,b")
writer.end_line()
text = writer.text()          # "apple,3,a##b\n"

reader = CsvReader.from_text(text)
while reader.read_line():
    name = reader.next_field()     # "apple"
    count = reader.read(int)       # 3
    pair = reader.next_field()     # "a,b"
```

Writing:

- `CsvWriter.write(value)` writes one field. It puts the delimiter first unless the field starts a line.
- Booleans are written as `1` and `0`, and floats in `%g` form.
- `end_line()` ends the current line.
- `CsvWriter.open(path)` writes to a file.
- `text()` returns everything written so far by an in-memory writer.

Reading:

- `read_line()` moves to the next line and returns `False` when there are no more lines.
- By default a blank line also ends reading. Set `terminate_on_blank_line = False` to skip blank lines instead.
- Iterating over a `CsvReader` yields each line.
- `next_field()` returns the next field as a string.
- `read(kind)` converts the field with `kind`. For `bool` it accepts only `1` and `0`.
- `delimiter_count()` counts the delimiters in the current line.
- `rest_of_line()` returns the part of the line not yet read.
- `skip_line()` discards one line.

Both classes work as context managers. Both also have `set_delimiter(delimiter, escape_str)`, which takes a single-character delimiter.

For quoted string fields, `enable_surround_quote` on the writer surrounds string values with a quote character. `enable_trim_quote` on the reader strips that quote again and ignores delimiters inside quotes.

The helpers `trim`, `trim_left` and `trim_right` strip a given set of characters. A string made only of those characters is returned unchanged.

### `auxtext.escaping`

- `html_escape(text)` replaces `& ' " < > /` with HTML entities.
- `set_escape(func)` installs a replacement escaping function and returns the previous one.
- `set_escape(None)` restores the built-in escaping.
- `first_not_ws(text, start, end)` returns the index of the first character in `text[start:end]` that is not a space. If there is none, it returns `end`.
- `last_not_ws(text, start, end)` returns the index of the last such character. If there is none, it returns `start - 1`.

### `auxtext.template_token`

`Token(raw, left, right)` classifies one piece of a Mustache-style template.

- Give the lengths of the opening and closing delimiters as `left` and `right`.
- When either is zero, the piece is plain text.
- A token has:
  - `type`: a `TokenType`
  - `name`
  - `delims`
  - `eol` and `ws_only`, for text pieces

`token_type_for(char)` maps a tag sigil to its token type: `#`, `^`, `/`, `&`, `!` or `>`. Any other character gives `TokenType.VARIABLE`.

### `auxtext.syserror`

This module builds messages for operating-system error codes:

```python
from auxtext.syserror import format_system_error, SystemFailure

format_system_error(2, "cannot open file")
# "cannot open file: No such file or directory" on most systems

raise SystemFailure(2, "cannot open {}", "data.csv")
```

- `SystemFailure` keeps the code in `error_code`.
- `report_system_error(code, message, stream)` writes the message and a newline to `stream`, or to stderr when no stream is given.
- `format_error_code` gives the plain `"message: error N"` form.
- `report_unknown_type` raises `FormatError` for an unknown format code.
- `print_colored(color, template, ...)` prints formatted text to stdout in one of the `Color` values, using ANSI escape sequences.

## What it does not do

- `auxtext.template_token` only classifies template pieces that have already been cut out. The package does not split a whole template into tokens, and it does not render templates.
- There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```