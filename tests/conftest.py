"""Shared sample documents for the test suite."""

import pytest


WEIGHT_GUID = "61ebcd4b-4c5c-4f3b-9a87-000000000001"
WIDTH_GUID = "61ebcd4b-4c5c-4f3b-9a87-000000000002"

PARAM_HEADER = ("*PARAM", "GUID", "NAME", "DATATYPE", "DATACATEGORY", "GROUP", "VISIBLE", "DESCRIPTION", "USERMODIFIABLE")


def row(*fields: str) -> str:
    return "\t".join(fields)


def document(*lines: str) -> str:
    return "\n".join(lines) + "\n"


SAMPLE_TEXT = document(
    "# This is a Revit shared parameter file.",
    "# Do not edit manually.",
    row("*META", "VERSION", "MINVERSION"),
    row("META", "2", "1"),
    row("*GROUP", "ID", "NAME"),
    row("GROUP", "1", "General"),
    row("GROUP", "2", "Dimensions"),
    row("GROUP", "3", "Unused"),
    row(*PARAM_HEADER),
    row("PARAM", WEIGHT_GUID, "Weight", "NUMBER", "", "1", "1", "", "1"),
    row("PARAM", WIDTH_GUID, "Width", "LENGTH", "", "2", "0", "Overall width", "0"),
)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT
