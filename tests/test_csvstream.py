import pytest

from auxtext.csvstream import CsvReader, CsvWriter, trim, trim_left, trim_right


def test_trim_strips_quotes_both_sides():
    assert trim('"abc"', '"') == "abc"
    assert trim_left("  x ", " ") == "x "
    assert trim_right("  x ", " ") == "  x"


def test_trim_keeps_string_made_only_of_trim_chars():
    assert trim_right("###", "#") == "###"
    assert trim_left("###", "#") == "###"
    assert trim("", "#") == ""


def test_reader_reads_typed_fields():
    reader = CsvReader.from_text("1,hello,2.5\n")
    assert reader.read_line() is True
    assert reader.read(int) == 1
    assert reader.next_field() == "hello"
    assert reader.read(float) == 2.5
    assert reader.read_line() is False


def test_reader_unescapes_delimiter():
    reader = CsvReader.from_text("a##b,c\n")
    assert reader.read_line()
    assert reader.next_field() == "a,b"
    assert reader.next_field() == "c"


def test_reader_trim_quote_ignores_delimiter_inside_quotes():
    reader = CsvReader.from_text('"x,y",z\n')
    reader.enable_trim_quote(True, '"')
    assert reader.read_line()
    assert reader.next_field() == "x,y"
    assert reader.next_field() == "z"


def test_blank_line_terminates_by_default():
    reader = CsvReader.from_text("a\n\nb\n")
    assert reader.read_line()
    assert reader.next_field() == "a"
    assert reader.read_line() is False


def test_blank_lines_skipped_when_not_terminating():
    reader = CsvReader.from_text("a\n\nb\n")
    reader.terminate_on_blank_line = False
    assert list(reader) == ["a", "b"]


def test_last_line_without_newline_is_read():
    reader = CsvReader.from_text("a\nb")
    assert list(reader) == ["a", "b"]
    assert reader.read_line() is False


def test_rest_of_line_and_delimiter_count():
    reader = CsvReader.from_text("a,b,c\n")
    assert reader.read_line()
    assert reader.delimiter_count() == 2
    assert reader.next_field() == "a"
    assert reader.rest_of_line() == "b,c"
    reader.next_field()
    reader.next_field()
    # Running past the end clears the line.
    assert reader.next_field() == ""
    assert reader.line == ""
    assert reader.delimiter_count() == 0


def test_carriage_return_ends_field():
    reader = CsvReader.from_text("x\r\n")
    assert reader.read_line()
    assert reader.next_field() == "x"


def test_skip_line():
    reader = CsvReader.from_text("header,row\n7,8\n")
    reader.skip_line()
    assert reader.read_line()
    assert reader.read(int) == 7
    assert reader.read(int) == 8


def test_set_delimiter_requires_single_char():
    reader = CsvReader.from_text("")
    with pytest.raises(ValueError):
        reader.set_delimiter("ab", "##")
    writer = CsvWriter.in_memory()
    with pytest.raises(ValueError):
        writer.set_delimiter("", "##")


def test_read_int_from_text_raises():
    reader = CsvReader.from_text("abc\n")
    assert reader.read_line()
    with pytest.raises(ValueError):
        reader.read(int)


def test_writer_joins_fields_with_delimiter():
    writer = CsvWriter.in_memory()
    writer.write("a").write(1).write(2.5).end_line()
    assert writer.text() == "a,1,2.5\n"
    assert writer.after_newline is True


def test_writer_escapes_delimiter_in_values():
    writer = CsvWriter.in_memory()
    writer.write("a,b").end_line()
    assert writer.text() == "a##b\n"


def test_writer_surround_quote_only_on_strings():
    writer = CsvWriter.in_memory()
    writer.enable_surround_quote(True, '"')
    writer.write("a").write(3).end_line()
    assert writer.text() == '"a",3\n'


def test_writer_float_uses_six_significant_digits():
    writer = CsvWriter.in_memory()
    writer.write(1 / 3)
    assert writer.text() == "0.333333"


def test_round_trip_custom_delimiter():
    rows = [["alpha", "be\tta", "gamma"], ["1", "2", "3"]]
    writer = CsvWriter.in_memory()
    writer.set_delimiter("\t", "$$")
    for row in rows:
        for value in row:
            writer.write(value)
        writer.end_line()

    reader = CsvReader.from_text(writer.text())
    reader.set_delimiter("\t", "$$")
    result = []
    while reader.read_line():
        result.append([reader.next_field() for _ in range(reader.delimiter_count() + 1)])
    assert result == rows


def test_round_trip_bool_and_quotes():
    writer = CsvWriter.in_memory()
    writer.enable_surround_quote(True, "'")
    writer.write(True).write(False).write("x,y").end_line()
    reader = CsvReader.from_text(writer.text())
    reader.enable_trim_quote(True, "'")
    assert reader.read_line()
    assert reader.read(bool) is True
    assert reader.read(bool) is False
    assert reader.next_field() == "x,y"


def test_file_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    with CsvWriter.open(path) as writer:
        writer.write("name").write(42).end_line()
        writer.write("other").write(-5).end_line()
        writer.flush()
        with pytest.raises(ValueError):
            writer.text()

    with CsvReader.open(path) as reader:
        values = []
        while reader.read_line():
            values.append((reader.next_field(), reader.read(int)))
    assert values == [("name", 42), ("other", -5)]