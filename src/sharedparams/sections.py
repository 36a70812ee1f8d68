"""
Section Splitter for shared parameter files.

A shared parameter file is a sequence of sections. Each section starts with
a marker line carrying the section's header row:

    *GROUP	ID	NAME
    GROUP	1	Identity Data
    GROUP	2	Dimensions

Every data row repeats the section name as its first field. The splitter
strips that prefix so a section body is a plain table.
"""

import logging
import re
from typing import Dict, Iterable, List, Tuple

from .config import DEFAULT_DIALECT, Dialect
from .errors import MalformedDocument
from .tabular import split_rows


log = logging.getLogger(__name__)


class Sections:
    """Names of the sections every shared parameter file must contain."""

    META = "META"
    GROUPS = "GROUP"
    PARAMS = "PARAM"

    REQUIRED = (META, GROUPS, PARAMS)


def _marker_pattern(dialect: Dialect) -> "re.Pattern[str]":
    return re.compile(
        rf"^{re.escape(dialect.marker)}(?P<section>[A-Z]+){re.escape(dialect.delimiter)}(?P<rest>.*)$"
    )


def split_sections(text: str, dialect: Dialect = DEFAULT_DIALECT) -> Dict[str, str]:
    """
    Partition a document into named section bodies.

    Args:
        text: Full document text
        dialect: Delimiters and markers

    Returns:
        Mapping of section name to body text, in document order. The body's
        first line is the header row from the marker line.

    Raises:
        MalformedDocument: If a section name appears twice
    """
    pattern = _marker_pattern(dialect)
    sections: Dict[str, List[str]] = {}
    current = None
    prefix = ""

    for line in split_rows(text):
        if line.startswith(dialect.comment):
            continue

        match = pattern.match(line)
        if match:
            current = match.group("section")
            if current in sections:
                raise MalformedDocument(f"Section {current} appears more than once")
            sections[current] = [match.group("rest")]
            prefix = current + dialect.delimiter
            continue

        if current is None:
            if line.strip():
                log.debug("Ignoring text before first section: %r", line)
            continue

        if line.startswith(prefix):
            line = line[len(prefix):]
        sections[current].append(line)

    log.debug("Found sections: %s", ", ".join(sections) or "<none>")
    return {name: "\n".join(lines) for name, lines in sections.items()}


def require_sections(sections: Dict[str, str]) -> None:
    """
    Check that META, GROUP and PARAM are all present.

    Raises:
        MalformedDocument: If fewer than three sections were found or a
            required one is missing
    """
    missing = [name for name in Sections.REQUIRED if name not in sections]
    if len(sections) < len(Sections.REQUIRED) or missing:
        raise MalformedDocument(
            "Document does not contain enough data to be a shared parameter file; "
            f"missing sections: {', '.join(missing) or '-'}"
        )


def join_sections(
    sections: Iterable[Tuple[str, List[str]]],
    dialect: Dialect = DEFAULT_DIALECT,
) -> str:
    """
    Inverse of split_sections.

    Args:
        sections: (name, lines) pairs where lines[0] is the header row and
            the remaining lines are data rows
        dialect: Delimiters and markers

    Returns:
        Document text ending with a newline
    """
    out = list(dialect.preamble)
    for name, lines in sections:
        header, rows = lines[0], lines[1:]
        out.append(f"{dialect.marker}{name}{dialect.delimiter}{header}")
        out.extend(f"{name}{dialect.delimiter}{row}" for row in rows)
    return dialect.newline.join(out) + dialect.newline


__all__ = [
    "Sections",
    "split_sections",
    "require_sections",
    "join_sections",
]
