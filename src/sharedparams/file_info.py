"""
Project file information decoded from a basic-info property map.

Project files carry a small key/value stream describing who saved them and
with which build. Extracting that stream from the binary container is done
elsewhere; this module only turns the resulting mapping into a typed record.

Example properties:
    Username: jdoe
    Revit Build: Autodesk Revit 2019 (Build: 20180806_1515(x64))
    Locale when saved: ENU
    Unique Document GUID: 9b1e3e4c-0f3a-4e2b-9c1f-5a0d7f2b8c11
"""

import re
import uuid
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


class KnownProperties:
    """Keys of the basic-info property map."""

    USERNAME = "Username"
    CENTRAL_MODEL_PATH = "Central Model Path"
    REVIT_BUILD = "Revit Build"
    LAST_SAVE_PATH = "Last Save Path"
    OPEN_WORKSET_DEFAULT = "Open Workset Default"
    PROJECT_SPARK_FILE = "Project Spark File"
    CENTRAL_MODEL_IDENTITY = "Central Model Identity"
    LOCALE = "Locale when saved"
    LOCAL_SAVED_TO_CENTRAL = "All Local Changes Saved To Central"
    CENTRAL_MODEL_VERSION = "Central model's version number corresponding to the last reload latest"
    CENTRAL_MODEL_GUID = "Central model's episode GUID corresponding to the last reload latest"
    UNIQUE_DOCUMENT_GUID = "Unique Document GUID"
    UNIQUE_DOCUMENT_INCREMENT = "Unique Document Increments"


_BUILD_PATTERN = re.compile(
    r"(?P<vendor>\w*) (?P<software>[\w\s]*) (?P<version>\d{4}) "
    r"\(Build: (?P<build>\d*)_(?P<revision>\d*)(\((?P<arch>\w*)\))?\)",
    re.IGNORECASE,
)

# Windows three-letter language names of the neutral cultures
_WINDOWS_LANGUAGES = {
    "ENU": "en",
    "FRA": "fr",
    "DEU": "de",
    "ITA": "it",
    "ESN": "es",
    "PTB": "pt",
    "NLD": "nl",
    "SVE": "sv",
    "PLK": "pl",
    "CSY": "cs",
    "HUN": "hu",
    "RUS": "ru",
    "JPN": "ja",
    "KOR": "ko",
    "CHS": "zh",
    "TRK": "tr",
    "DAN": "da",
    "FIN": "fi",
    "NOR": "no",
}


@dataclass
class RevitFileInfo:
    """
    Typed view of a project file's basic information.

    Fields stay at their defaults when the property map lacks the key.
    """

    username: str = ""
    central_model_path: str = ""
    last_save_path: str = ""
    vendor: str = ""
    name: str = ""
    version: Optional[Tuple[int, int, int]] = None
    is_64bit: bool = False
    locale: Optional[str] = None
    guid: Optional[uuid.UUID] = None
    document_increment: Optional[int] = None
    central_model_version: Optional[int] = None
    central_model_guid: Optional[uuid.UUID] = None
    saved_to_central: Optional[bool] = None

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "RevitFileInfo":
        """
        Decode every known property of the map.

        Raises:
            TypeError: If properties is None
            ValueError: If a GUID property is not a valid UUID
        """
        info = cls()
        info.parse_username(properties)
        info.parse_paths(properties)
        info.parse_revit(properties)
        info.parse_locale(properties)
        info.parse_document_info(properties)
        info.parse_central_model(properties)
        return info

    def parse_username(self, properties: Mapping[str, str]) -> None:
        _require(properties)
        if KnownProperties.USERNAME in properties:
            self.username = properties[KnownProperties.USERNAME]

    def parse_paths(self, properties: Mapping[str, str]) -> None:
        _require(properties)
        self.central_model_path = properties.get(KnownProperties.CENTRAL_MODEL_PATH, self.central_model_path)
        self.last_save_path = properties.get(KnownProperties.LAST_SAVE_PATH, self.last_save_path)

    def parse_revit(self, properties: Mapping[str, str]) -> None:
        """Decode vendor, product, version and architecture from the build string."""
        _require(properties)
        build = properties.get(KnownProperties.REVIT_BUILD)
        if not build:
            return

        match = _BUILD_PATTERN.search(build)
        if not match:
            return

        self.vendor = match.group("vendor")
        self.name = match.group("software")
        self.is_64bit = "x64" in (match.group("arch") or "")
        self.version = (
            int(match.group("version")),
            int(match.group("build") or 0),
            int(match.group("revision") or 0),
        )

    def parse_locale(self, properties: Mapping[str, str]) -> None:
        """Map the Windows language code (e.g. ENU) to an ISO 639-1 code."""
        _require(properties)
        raw = properties.get(KnownProperties.LOCALE)
        if raw:
            self.locale = _WINDOWS_LANGUAGES.get(raw.strip().upper())

    def parse_document_info(self, properties: Mapping[str, str]) -> None:
        _require(properties)
        raw = properties.get(KnownProperties.UNIQUE_DOCUMENT_GUID)
        if raw:
            self.guid = uuid.UUID(raw.strip())
        increment = properties.get(KnownProperties.UNIQUE_DOCUMENT_INCREMENT, "").strip()
        if increment.isdigit():
            self.document_increment = int(increment)

    def parse_central_model(self, properties: Mapping[str, str]) -> None:
        _require(properties)
        version = properties.get(KnownProperties.CENTRAL_MODEL_VERSION, "").strip()
        if version.isdigit():
            self.central_model_version = int(version)
        raw_guid = properties.get(KnownProperties.CENTRAL_MODEL_GUID, "").strip()
        if raw_guid:
            self.central_model_guid = uuid.UUID(raw_guid)
        saved = properties.get(KnownProperties.LOCAL_SAVED_TO_CENTRAL, "").strip().lower()
        if saved in ("true", "false"):
            self.saved_to_central = saved == "true"


def _require(properties: Optional[Mapping[str, str]]) -> None:
    if properties is None:
        raise TypeError("properties must not be None")


__all__ = ["KnownProperties", "RevitFileInfo"]
