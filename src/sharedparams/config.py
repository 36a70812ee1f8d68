"""Textual conventions of the shared parameter file format.

The section splitter, the table reader and the serializer all read their
delimiters and markers from a single `Dialect`, so a variant of the format
only needs a different instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Dialect:
    """Delimiters and markers of a shared parameter file."""

    delimiter: str = "\t"
    """Field separator inside a row."""

    comment: str = "#"
    """Lines starting with this string are ignored everywhere."""

    marker: str = "*"
    """Prefix of a section marker line (``*PARAM``)."""

    newline: str = "\n"
    """Row separator used when writing."""

    preamble: Tuple[str, ...] = (
        "# This is a Revit shared parameter file.",
        "# Do not edit manually.",
    )
    """Comment lines written at the top of a serialized file."""


DEFAULT_DIALECT = Dialect()
