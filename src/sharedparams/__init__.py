"""
Shared Parameter File Package

Reads and writes the tab-delimited shared parameter file: a catalogue of
named, typed parameters with stable GUIDs, organised in display groups.

ARCHITECTURAL GUARANTEE:
------------------------
The model (`sharedparams.model`) contains ZERO knowledge of:
    - The text layout of the file
    - File system access
    - JSON/YAML export

Parsing and serializing happen in `sharedparams.document`.
"""

from sharedparams.document import parse_file, parse_text, save_file, serialize
from sharedparams.errors import (
    EmptyOrWhitespaceInput,
    HeaderMismatch,
    InvalidFieldValue,
    MalformedDocument,
    SharedParameterError,
    UnknownTypeTag,
)
from sharedparams.model import Group, Meta, Parameter, SharedParameterFile
from sharedparams.types import TypeTag, UnitFamily

__version__ = "0.1.0"

__all__ = [
    "parse_text",
    "parse_file",
    "serialize",
    "save_file",
    "Meta",
    "Group",
    "Parameter",
    "SharedParameterFile",
    "TypeTag",
    "UnitFamily",
    "SharedParameterError",
    "EmptyOrWhitespaceInput",
    "MalformedDocument",
    "HeaderMismatch",
    "InvalidFieldValue",
    "UnknownTypeTag",
]
