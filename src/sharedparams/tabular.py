"""
Tabular Row Parser for shared parameter file sections.

Reads the body of one section into typed records and writes records back.

Body Format:
    GUID    NAME    DATATYPE    ...      <- header row, names case-insensitive
    <uuid>  Weight  NUMBER      ...      <- one data row per record

Syntax Notes:
    - Fields are matched to record fields by column name, not position
    - Double quotes are ordinary characters (no CSV quoting)
    - Blank lines and comment lines are skipped
    - Optional columns may be absent from the header; their fields take
      the column default
"""

import re
import uuid
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .config import DEFAULT_DIALECT, Dialect
from .errors import HeaderMismatch, InvalidFieldValue, UnknownTypeTag


_TRUE_STRINGS = {"1", "true", "yes", "y", "on", "t"}
_FALSE_STRINGS = {"0", "false", "no", "n", "off", "f", ""}

# Only CR, LF and CRLF end a row. NEL, form feed, U+2028 and friends are
# field content.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Padding trimmed from both ends of a field.
_PADDING = " \t"


def split_rows(text: str) -> List[str]:
    """
    Split text into rows on CR, LF or CRLF only.

    Unlike str.splitlines, other Unicode line separators stay inside the row.
    A trailing line break does not produce an extra empty row.
    """
    rows = _LINE_BREAK.split(text)
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def decode_bool(text: str) -> bool:
    """
    Decode a boolean field.

    Accepts 1/0, true/false, yes/no, y/n, on/off and t/f in any case.
    An empty field is False.

    Raises:
        ValueError: If the text is not a recognised spelling
    """
    value = (text or "").strip().lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def encode_bool(value: Any) -> str:
    """Encode a boolean as "1" or "0"; an unset value is "0"."""
    if value is None:
        return "0"
    if isinstance(value, str):
        value = decode_bool(value)
    return "1" if value else "0"


def decode_int(text: str) -> int:
    return int(text.strip())


def encode_int(value: Optional[int]) -> str:
    return "" if value is None else str(int(value))


def decode_str(text: str) -> str:
    return text


def encode_str(value: Optional[str]) -> str:
    return "" if value is None else str(value)


def decode_uuid(text: str) -> uuid.UUID:
    return uuid.UUID(text.strip())


def encode_uuid(value: uuid.UUID) -> str:
    return str(value)


@dataclass(frozen=True)
class Column:
    """
    Binding of one header column to one record field.

    Properties:
        name: Column name as written in the header (upper case)
        field: Keyword argument of the record factory
        decode: Converts the raw field text to the field value
        encode: Converts the field value back to text
        optional: Absence from the header is not an error
        default: Value used when an optional column is absent or a
            malformed field is tolerated
    """

    name: str
    field: str
    decode: Callable[[str], Any] = decode_str
    encode: Callable[[Any], str] = encode_str
    optional: bool = False
    default: Any = None


@dataclass(frozen=True)
class RecordMap:
    """Declarative column table for one record kind."""

    section: str
    factory: Callable[..., Any]
    columns: Tuple[Column, ...]

    @property
    def required_columns(self) -> List[str]:
        return [c.name for c in self.columns if not c.optional]

    @property
    def optional_columns(self) -> List[str]:
        return [c.name for c in self.columns if c.optional]


BadFieldPolicy = Callable[[Column, str], bool]


def reject_unquoted(column: Column, raw: str) -> bool:
    """
    Default bad-field policy.

    A field that failed its conversion is rejected unless it contains a
    double quote; quoted free text is tolerated.
    """
    return '"' not in raw


class TableReader:
    """Reads one section body into records of a RecordMap."""

    def __init__(
        self,
        record_map: RecordMap,
        bad_field: BadFieldPolicy = reject_unquoted,
        dialect: Dialect = DEFAULT_DIALECT,
    ):
        self.record_map = record_map
        self.bad_field = bad_field
        self.dialect = dialect

    def read(self, body: str) -> List[Any]:
        """
        Parse a section body.

        Args:
            body: Header row followed by data rows

        Returns:
            Records in row order

        Raises:
            HeaderMismatch: If a required column is missing from the header
            InvalidFieldValue: If a field is rejected by the bad-field policy
            UnknownTypeTag: If a DATATYPE field is not registered
        """
        rows = self._rows(body)
        if not rows:
            raise HeaderMismatch(self.record_map.section, self.record_map.required_columns)

        _, header = rows[0]
        positions = self._header_positions(header)

        missing = [name for name in self.record_map.required_columns if name not in positions]
        if missing:
            raise HeaderMismatch(self.record_map.section, missing)

        return [self._decode_row(fields, positions, line) for line, fields in rows[1:]]

    def _rows(self, body: str) -> List[Tuple[int, List[str]]]:
        return [
            (line_no, line.split(self.dialect.delimiter))
            for line_no, line in enumerate(split_rows(body), start=1)
            if line.strip(_PADDING) and not line.startswith(self.dialect.comment)
        ]

    @staticmethod
    def _header_positions(header: List[str]) -> Dict[str, int]:
        positions: Dict[str, int] = {}
        for index, name in enumerate(header):
            positions.setdefault(name.strip().upper(), index)
        return positions

    def _decode_row(self, fields: List[str], positions: Dict[str, int], line: int) -> Any:
        values = {}
        for column in self.record_map.columns:
            index = positions.get(column.name)
            if index is None:
                values[column.field] = column.default
                continue
            if index >= len(fields):
                if column.optional:
                    values[column.field] = column.default
                    continue
                raise InvalidFieldValue(column.name, "", line, reason="missing field")
            values[column.field] = self._convert(column, fields[index].strip(_PADDING), line)
        return self.record_map.factory(**values)

    def _convert(self, column: Column, raw: str, line: int) -> Any:
        try:
            return column.decode(raw)
        except UnknownTypeTag as exc:
            raise UnknownTypeTag(exc.tag, line) from None
        except ValueError as exc:
            if self.bad_field(column, raw):
                raise InvalidFieldValue(column.name, raw, line, reason=str(exc)) from exc
            warnings.warn(
                f"Tolerating malformed {column.name} value {raw!r} on line {line} "
                f"of section {self.record_map.section}",
                UserWarning,
            )
            return column.default


def write_table(
    record_map: RecordMap,
    records: Iterable[Any],
    dialect: Dialect = DEFAULT_DIALECT,
) -> List[str]:
    """
    Encode records as a header line followed by one line per record.

    All columns, optional ones included, are written.

    Raises:
        InvalidFieldValue: If an encoded field contains the delimiter or a
            line break and could not be read back
    """
    header = dialect.delimiter.join(c.name for c in record_map.columns)
    lines = [header]
    for record in records:
        fields = []
        for column in record_map.columns:
            text = column.encode(getattr(record, column.field))
            if dialect.delimiter in text or "\n" in text or "\r" in text:
                raise InvalidFieldValue(column.name, text, reason="cannot be written to a single field")
            fields.append(text)
        lines.append(dialect.delimiter.join(fields))
    return lines


__all__ = [
    "Column",
    "RecordMap",
    "TableReader",
    "write_table",
    "split_rows",
    "reject_unquoted",
    "decode_bool",
    "encode_bool",
    "decode_int",
    "encode_int",
    "decode_str",
    "encode_str",
    "decode_uuid",
    "encode_uuid",
]
