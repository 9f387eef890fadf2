import pytest

from auxtext.escaping import first_not_ws, html_escape, last_not_ws, set_escape


@pytest.mark.parametrize(
    "char, entity",
    [
        ("&", "&amp;"),
        ("'", "&#39;"),
        ('"', "&quot;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ("/", "&#x2F;"),
    ],
)
def test_each_special_character_is_escaped(char, entity):
    assert html_escape(char) == entity
    assert html_escape("a" + char + "b") == "a" + entity + "b"


def test_plain_text_is_unchanged():
    assert html_escape("hello world 123") == "hello world 123"


def test_empty_string():
    assert html_escape("") == ""


def test_mixed_text():
    assert html_escape("<a>") == "&lt;a&gt;"


def test_escaped_output_has_no_raw_specials():
    result = html_escape("x<y>'z'\"w\"/v")
    for ch in "<>'\"/":
        assert ch not in result


def test_custom_escape_is_used_and_restored():
    previous = set_escape(str.upper)
    try:
        assert html_escape("a<b") == "a<b".upper()
    finally:
        set_escape(previous)
    assert html_escape("<") == "&lt;"


def test_set_escape_returns_previous():
    first = set_escape(str.lower)
    try:
        assert set_escape(str.upper) is str.lower
    finally:
        set_escape(first)


def test_first_not_ws_finds_first_char():
    text = "   abc  "
    idx = first_not_ws(text, 0, len(text))
    assert text[idx] == "a"
    assert text[:idx].strip(" ") == ""


def test_first_not_ws_all_spaces_returns_end():
    text = "     "
    assert first_not_ws(text, 1, 4) == 4


def test_last_not_ws_finds_last_char():
    text = "   abc  "
    idx = last_not_ws(text, 0, len(text))
    assert text[idx] == "c"
    assert text[idx + 1:].strip(" ") == ""


def test_last_not_ws_all_spaces_returns_before_start():
    text = "     "
    assert last_not_ws(text, 2, 5) == 2 - 1


def test_ws_scans_respect_bounds():
    text = "x   y"
    assert first_not_ws(text, 1, len(text)) == text.index("y")
    assert last_not_ws(text, 0, len(text) - 1) == text.index("x")