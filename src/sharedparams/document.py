"""
Shared parameter file reader and writer (raw text <-> SharedParameterFile).

Parsing:
    text -> split_sections -> TableReader per section -> resolve group names
    -> SharedParameterFile

Serializing reverses each step. For any parsed file `d`,
`parse_text(serialize(d)) == d`.
"""

import codecs
import logging
import os
import warnings
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_DIALECT, Dialect
from .errors import EmptyOrWhitespaceInput, MalformedDocument
from .model import SharedParameterFile
from .records import GROUP_MAP, META_MAP, PARAMETER_MAP, RECORD_MAPS
from .sections import Sections, join_sections, require_sections, split_sections
from .tabular import BadFieldPolicy, TableReader, reject_unquoted, write_table


log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def parse_text(
    text: Optional[str],
    bad_field: BadFieldPolicy = reject_unquoted,
    dialect: Dialect = DEFAULT_DIALECT,
) -> SharedParameterFile:
    """
    Parse shared parameter file content.

    Args:
        text: Full document text
        bad_field: Policy deciding whether an unconvertible field aborts
            the parse
        dialect: Delimiters and markers

    Returns:
        Parsed SharedParameterFile

    Raises:
        EmptyOrWhitespaceInput: If text is None or blank
        MalformedDocument: If required sections are missing
        HeaderMismatch: If a required column is missing
        InvalidFieldValue: If a field is malformed
        UnknownTypeTag: If a DATATYPE is not registered
    """
    if text is None or not text.strip():
        raise EmptyOrWhitespaceInput("Shared parameter text must be a non empty string")

    sections = split_sections(text, dialect)
    require_sections(sections)

    decoded = {}
    for name, body in sections.items():
        record_map = RECORD_MAPS.get(name)
        if record_map is None:
            warnings.warn(f"Skipping unknown section type: {name}", UserWarning)
            continue
        decoded[name] = TableReader(record_map, bad_field, dialect).read(body)

    metas = decoded[Sections.META]
    if not metas:
        raise MalformedDocument("Section META contains no data row")

    document = SharedParameterFile.create(
        meta=metas[0],
        groups=decoded[Sections.GROUPS],
        parameters=decoded[Sections.PARAMS],
    )
    log.debug(
        "Parsed shared parameter file: %d groups, %d parameters",
        len(document.groups),
        len(document.parameters),
    )
    return document


def serialize(document: SharedParameterFile, dialect: Dialect = DEFAULT_DIALECT) -> str:
    """
    Encode a SharedParameterFile as text.

    Sections are written in the order META, GROUP, PARAM with every column,
    optional ones included.
    """
    return join_sections(
        [
            (Sections.META, write_table(META_MAP, [document.meta], dialect)),
            (Sections.GROUPS, write_table(GROUP_MAP, document.groups, dialect)),
            (Sections.PARAMS, write_table(PARAMETER_MAP, document.parameters, dialect)),
        ],
        dialect,
    )


def read_text(filepath: PathLike) -> str:
    """
    Read a shared parameter file from disk.

    UTF-8 and UTF-16 byte order marks are honoured. Files that are not valid
    UTF-8 are read as ISO-8859-1 so legacy accented characters survive.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the path is not a .txt file
    """
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"Shared parameter file not found: {filepath}")
    if path.suffix.lower() != ".txt":
        raise ValueError(f"Shared parameter file must be a .txt file: {filepath}")

    with open(path, "rb") as f:
        raw = f.read()

    if raw.startswith(codecs.BOM_UTF8):
        return raw.decode("utf-8-sig")
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        warnings.warn(f"{filepath} is not valid UTF-8, reading as ISO-8859-1", UserWarning)
        return raw.decode("iso-8859-1")


def parse_file(filepath: PathLike, **kwargs) -> SharedParameterFile:
    """Read and parse a shared parameter file; see parse_text for kwargs."""
    return parse_text(read_text(filepath), **kwargs)


def save_file(
    document: SharedParameterFile,
    filepath: PathLike,
    dialect: Dialect = DEFAULT_DIALECT,
) -> Path:
    """Write a SharedParameterFile as UTF-8 text and return the path."""
    path = Path(filepath)
    text = serialize(document, dialect)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path


__all__ = [
    "parse_text",
    "parse_file",
    "serialize",
    "read_text",
    "save_file",
]
