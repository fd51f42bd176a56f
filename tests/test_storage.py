import pytest

from libsim.errors import MalformedRecordError, StorageError, ValidationError
from libsim.record import Record
from libsim.storage import append_record, format_line, parse_line, read_lines


def test_parse_line():
    record = parse_line("Ursula K. Le Guin, A Wizard of Earthsea, 1968\n")
    assert record == Record("Ursula K. Le Guin", "A Wizard of Earthsea", 1968, True)


def test_parse_line_without_newline():
    assert parse_line("Austen, Emma, 1815").year == 1815


@pytest.mark.parametrize("line", [
    "Austen, Emma\n",
    "Austen, Emma, 1815, extra\n",
    "Austen; Emma; 1815\n",
])
def test_parse_line_wrong_field_count(line):
    with pytest.raises(MalformedRecordError, match="expected 3 fields"):
        parse_line(line, 4)


def test_parse_line_bad_year_reports_line_number():
    with pytest.raises(MalformedRecordError) as exc:
        parse_line("Austen, Emma, eighteen-fifteen\n", 7)
    assert exc.value.line_number == 7
    assert "line 7" in str(exc.value)


def test_parse_line_empty_author():
    with pytest.raises(MalformedRecordError):
        parse_line(" , Emma, 1815")


def test_format_line():
    assert format_line(Record("Austen", "Emma", 1815)) == "Austen, Emma, 1815\n"


def test_format_line_rejects_comma():
    with pytest.raises(ValidationError):
        format_line(Record("Austen, Jane", "Emma", 1815))


def test_read_lines_missing_file(tmp_path):
    assert read_lines(str(tmp_path / "nope.txt")) is None


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "library.txt"
    path.write_text("", encoding="utf-8")
    assert read_lines(str(path)) == []


def test_append_record_creates_and_appends(tmp_path):
    path = str(tmp_path / "library.txt")
    append_record(path, Record("Austen", "Emma", 1815))
    append_record(path, Record("Borges", "Ficciones", 1944))
    assert read_lines(path) == ["Austen, Emma, 1815\n", "Borges, Ficciones, 1944\n"]


def test_append_record_io_failure(tmp_path):
    # A directory cannot be opened for appending
    with pytest.raises(StorageError):
        append_record(str(tmp_path), Record("Austen", "Emma", 1815))


def test_read_lines_drops_byte_order_mark(tmp_path):
    path = tmp_path / "library.txt"
    path.write_text("Tolkien, The Hobbit, 1937\n", encoding="utf-8-sig")
    assert read_lines(str(path)) == ["Tolkien, The Hobbit, 1937\n"]


def test_read_lines_rejects_non_utf8(tmp_path):
    path = tmp_path / "library.txt"
    path.write_bytes("B\xf6ll, Billard um halb zehn, 1959\n".encode("latin-1"))
    with pytest.raises(MalformedRecordError, match="not valid UTF-8"):
        read_lines(str(path))
