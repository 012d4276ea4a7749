"""Tests for line filtering and record classification."""

import pytest

from achparse.domain.errors import EmptyFile, InvalidLineLength
from achparse.domain.lines import Line, RecordType, filter_lines, is_padding, record_type
from conftest import BATCH_HEADER, FILE_HEADER, PADDING


class TestFilterLines:
    """Tests for padding line removal."""

    def test_keeps_record_lines_in_order(self):
        lines = filter_lines(f"{FILE_HEADER}\n{BATCH_HEADER}")
        assert [line.text for line in lines] == [FILE_HEADER, BATCH_HEADER]

    def test_drops_padding_lines_anywhere(self):
        content = "\n".join([PADDING, FILE_HEADER, PADDING, PADDING, BATCH_HEADER, PADDING])
        lines = filter_lines(content)
        assert [line.text for line in lines] == [FILE_HEADER, BATCH_HEADER]

    def test_keeps_physical_line_numbers(self):
        content = "\n".join([PADDING, FILE_HEADER, PADDING, BATCH_HEADER])
        assert filter_lines(content) == [Line(2, FILE_HEADER), Line(4, BATCH_HEADER)]

    def test_short_padding_lines_are_dropped(self):
        lines = filter_lines(f"{FILE_HEADER}\n999\n9")
        assert len(lines) == 1

    def test_blank_lines_are_dropped(self):
        lines = filter_lines(f"{FILE_HEADER}\n\n{BATCH_HEADER}\n")
        assert len(lines) == 2

    def test_windows_line_endings(self):
        lines = filter_lines(f"{FILE_HEADER}\r\n{BATCH_HEADER}\r\n")
        assert [line.text for line in lines] == [FILE_HEADER, BATCH_HEADER]

    @pytest.mark.parametrize("char", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028"])
    def test_only_newline_ends_a_line(self, char):
        record = BATCH_HEADER[:39] + char + BATCH_HEADER[40:]
        lines = filter_lines(f"{FILE_HEADER}\n{record}\n{PADDING}\n{FILE_HEADER}")
        assert lines == [Line(1, FILE_HEADER), Line(2, record), Line(4, FILE_HEADER)]
        assert len(lines[1].text) == 94

    def test_empty_content_raises(self):
        with pytest.raises(EmptyFile):
            filter_lines("")

    def test_only_padding_raises(self):
        with pytest.raises(EmptyFile):
            filter_lines(f"{PADDING}\n{PADDING}\n")


def test_is_padding():
    assert is_padding(PADDING)
    assert is_padding("9")
    assert not is_padding("9" * 93 + "8")
    assert not is_padding(FILE_HEADER)


class TestRecordType:
    """Tests for record type classification."""

    def test_reads_first_character(self):
        assert record_type("101") == "1"
        assert record_type("5200") == "5"
        assert record_type("6221") == "6"

    def test_unknown_codes_are_returned_as_read(self):
        assert record_type("X01") == "X"

    def test_empty_line_raises(self):
        with pytest.raises(InvalidLineLength) as excinfo:
            record_type("")
        assert excinfo.value.length == 0

    def test_record_type_values(self):
        assert [rt.value for rt in RecordType] == ["1", "5", "6", "7", "8", "9"]
        assert RecordType("7") is RecordType.ADDENDA
