"""
Tests for the tabular row parser.

A small three-column record stands in for the real sections so the reader
can be exercised on its own:
    KEY (int, required), LABEL (str, required), FLAG (bool, optional)
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from sharedparams.errors import HeaderMismatch, InvalidFieldValue
from sharedparams.tabular import (
    Column,
    RecordMap,
    TableReader,
    decode_bool,
    decode_int,
    encode_bool,
    encode_int,
    split_rows,
    write_table,
)


@dataclass
class Row:
    key: Optional[int]
    label: str
    flag: bool = True


ROW_MAP = RecordMap(
    section="TEST",
    factory=Row,
    columns=(
        Column("KEY", "key", decode_int, encode_int),
        Column("LABEL", "label", default=""),
        Column("FLAG", "flag", decode_bool, encode_bool, optional=True, default=True),
    ),
)


def read(body, **kwargs):
    return TableReader(ROW_MAP, **kwargs).read(body)


class TestBooleanCodec:
    """Test the 1/0 boolean field encoding."""

    def test_encode(self):
        assert encode_bool(True) == "1"
        assert encode_bool(False) == "0"

    def test_encode_unset(self):
        assert encode_bool(None) == "0"

    def test_encode_string(self):
        assert encode_bool("true") == "1"
        assert encode_bool("") == "0"

    def test_round_trip(self):
        assert decode_bool(encode_bool(True)) is True
        assert decode_bool(encode_bool(False)) is False

    @pytest.mark.parametrize("text", ["1", "true", "TRUE", "Yes", "y", "on", "T"])
    def test_truthy(self, text):
        assert decode_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "false", "No", "n", "OFF", "F", ""])
    def test_falsy(self, text):
        assert decode_bool(text) is False

    def test_invalid(self):
        with pytest.raises(ValueError):
            decode_bool("maybe")


class TestHeader:
    """Test header handling."""

    def test_columns_matched_by_name(self):
        """Column order in the file does not matter."""
        rows = read("LABEL\tKEY\nfoo\t1")
        assert rows == [Row(key=1, label="foo")]

    def test_header_case_insensitive(self):
        rows = read("key\tLabel\tflag\n1\tfoo\t0")
        assert rows == [Row(key=1, label="foo", flag=False)]

    def test_missing_required_column(self):
        with pytest.raises(HeaderMismatch) as exc_info:
            read("KEY\tFLAG\n1\t1")
        assert exc_info.value.section == "TEST"
        assert exc_info.value.missing == ["LABEL"]

    def test_empty_body(self):
        with pytest.raises(HeaderMismatch) as exc_info:
            read("\n\n")
        assert exc_info.value.missing == ["KEY", "LABEL"]

    def test_optional_column_absent(self):
        rows = read("KEY\tLABEL\n1\tfoo\n2\tbar")
        assert [r.flag for r in rows] == [True, True]

    def test_extra_columns_ignored(self):
        rows = read("KEY\tCOLOR\tLABEL\n1\tred\tfoo")
        assert rows == [Row(key=1, label="foo")]

    def test_header_only(self):
        assert read("KEY\tLABEL") == []


class TestRows:
    """Test data row decoding."""

    def test_blank_and_comment_lines_skipped(self):
        rows = read("KEY\tLABEL\n\n# note\n1\tfoo\n   \n2\tbar\n")
        assert [r.key for r in rows] == [1, 2]

    def test_fields_trimmed(self):
        rows = read("KEY\tLABEL\n 7 \t  foo  ")
        assert rows == [Row(key=7, label="foo")]

    def test_double_quotes_are_literal(self):
        rows = read('KEY\tLABEL\n1\tsay "hi"')
        assert rows[0].label == 'say "hi"'

    def test_bad_field_rejected(self):
        with pytest.raises(InvalidFieldValue) as exc_info:
            read("KEY\tLABEL\n1\tfoo\nabc\tbar")
        error = exc_info.value
        assert error.column == "KEY"
        assert error.value == "abc"
        assert error.line == 3
        assert "abc" in str(error)

    def test_bad_boolean_rejected(self):
        with pytest.raises(InvalidFieldValue):
            read("KEY\tLABEL\tFLAG\n1\tfoo\tmaybe")

    def test_quoted_bad_field_tolerated(self):
        """A field containing a double quote is tolerated and takes the default."""
        with pytest.warns(UserWarning, match="Tolerating"):
            rows = read('KEY\tLABEL\n"1"\tfoo')
        assert rows == [Row(key=None, label="foo")]

    def test_custom_policy(self):
        with pytest.warns(UserWarning):
            rows = read("KEY\tLABEL\tFLAG\n1\tfoo\tmaybe", bad_field=lambda column, raw: False)
        assert rows[0].flag is True

    def test_short_row_required_field(self):
        with pytest.raises(InvalidFieldValue) as exc_info:
            read("KEY\tLABEL\n1")
        assert exc_info.value.column == "LABEL"

    def test_short_row_optional_field(self):
        rows = read("KEY\tLABEL\tFLAG\n1\tfoo")
        assert rows == [Row(key=1, label="foo", flag=True)]

    def test_empty_boolean_is_false(self):
        rows = read("KEY\tLABEL\tFLAG\n1\tfoo\t")
        assert rows[0].flag is False

    @pytest.mark.parametrize("separator", ["\x85", "\x0c", "\x1c", "\x1e", "\u2028", "\u2029"])
    def test_unicode_separators_are_field_content(self, separator):
        rows = read(f"KEY\tLABEL\n1\tfoo{separator}bar\n2\tbaz")
        assert rows == [Row(1, f"foo{separator}bar"), Row(2, "baz")]

    def test_trailing_separator_not_trimmed(self):
        rows = read("KEY\tLABEL\n1\tetc\x85")
        assert rows[0].label == "etc\x85"

    def test_line_numbers_ignore_unicode_separators(self):
        with pytest.raises(InvalidFieldValue) as exc_info:
            read("KEY\tLABEL\n1\tfoo\u2028bar\nabc\tbaz")
        assert exc_info.value.line == 3

    def test_very_long_field(self):
        label = "x" * 200_000
        rows = read(f"KEY\tLABEL\n1\t{label}")
        assert rows[0].label == label


class TestWriteTable:
    """Test encoding records back to rows."""

    def test_header_and_rows(self):
        lines = write_table(ROW_MAP, [Row(1, "foo", True), Row(2, "bar", False)])
        assert lines == ["KEY\tLABEL\tFLAG", "1\tfoo\t1", "2\tbar\t0"]

    def test_no_records(self):
        assert write_table(ROW_MAP, []) == ["KEY\tLABEL\tFLAG"]

    def test_written_rows_read_back(self):
        records = [Row(1, 'a "quoted" label', False)]
        body = "\n".join(write_table(ROW_MAP, records))
        assert read(body) == records

    def test_delimiter_in_value_rejected(self):
        with pytest.raises(InvalidFieldValue):
            write_table(ROW_MAP, [Row(1, "tab\there")])


class TestSplitRows:
    """Test row splitting on line breaks."""

    def test_line_break_styles(self):
        assert split_rows("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_trailing_line_break(self):
        assert split_rows("a\nb\n") == ["a", "b"]

    def test_blank_rows_kept(self):
        assert split_rows("a\n\nb") == ["a", "", "b"]

    def test_empty_text(self):
        assert split_rows("") == []

    def test_other_separators_not_split(self):
        assert split_rows("a\x85b\u2028c\x0cd") == ["a\x85b\u2028c\x0cd"]
