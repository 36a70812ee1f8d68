"""
Exceptions raised while reading shared parameter files.

Every failure is terminal for the parse call: a catalogue with silently
missing parameters is worse than an explicit error.
"""

from typing import Iterable, Optional


class SharedParameterError(ValueError):
    """Base class for all shared parameter file errors."""
    pass


class EmptyOrWhitespaceInput(SharedParameterError):
    """Raised when the document text is None, empty or only whitespace."""
    pass


class MalformedDocument(SharedParameterError):
    """Raised when required sections are missing or duplicated."""
    pass


class HeaderMismatch(SharedParameterError):
    """Raised when a required column is absent from a section header."""

    def __init__(self, section: str, missing: Iterable[str]):
        self.section = section
        self.missing = list(missing)
        super().__init__(
            f"Section {section} is missing required columns: {', '.join(self.missing)}"
        )


class InvalidFieldValue(SharedParameterError):
    """Raised when a field cannot be converted to its column's type."""

    def __init__(self, column: str, value: str, line: Optional[int] = None, reason: str = ""):
        self.column = column
        self.value = value
        self.line = line
        message = f"Invalid value for {column}: {value!r}"
        if line is not None:
            message += f" (line {line})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownTypeTag(InvalidFieldValue):
    """Raised when a DATATYPE string has no registry entry."""

    def __init__(self, tag: str, line: Optional[int] = None):
        self.tag = tag
        super().__init__("DATATYPE", tag, line, reason="unknown data type")


__all__ = [
    "SharedParameterError",
    "EmptyOrWhitespaceInput",
    "MalformedDocument",
    "HeaderMismatch",
    "InvalidFieldValue",
    "UnknownTypeTag",
]
