"""
Record Decoders: column tables for the META, GROUP and PARAM sections.

Each table binds header columns to model fields together with the
conversion rules for that field. The tables are plain data built at import
time; the TableReader interprets them.

Older files omit DESCRIPTION and USERMODIFIABLE from the PARAM header, so
both are optional.
"""

import uuid
from typing import Dict

from .model import Group, Meta, Parameter
from .sections import Sections
from .tabular import (
    Column,
    RecordMap,
    decode_bool,
    decode_int,
    decode_uuid,
    encode_bool,
    encode_int,
    encode_uuid,
)
from .types import decode_type, encode_type


META_MAP = RecordMap(
    section=Sections.META,
    factory=Meta,
    columns=(
        Column("VERSION", "version", decode_int, encode_int, default=0),
        Column("MINVERSION", "min_version", decode_int, encode_int, default=0),
    ),
)

GROUP_MAP = RecordMap(
    section=Sections.GROUPS,
    factory=Group,
    columns=(
        Column("ID", "id", decode_int, encode_int, default=-1),
        Column("NAME", "name", default=""),
    ),
)

PARAMETER_MAP = RecordMap(
    section=Sections.PARAMS,
    factory=Parameter,
    columns=(
        Column("GUID", "guid", decode_uuid, encode_uuid, default=uuid.UUID(int=0)),
        Column("NAME", "name", default=""),
        Column("DATATYPE", "data_type", decode_type, encode_type),
        Column("DATACATEGORY", "data_category", default=""),
        Column("GROUP", "group_id", decode_int, encode_int, default=-1),
        Column("VISIBLE", "visible", decode_bool, encode_bool, default=True),
        Column("DESCRIPTION", "description", optional=True, default=""),
        Column("USERMODIFIABLE", "user_modifiable", decode_bool, encode_bool, optional=True, default=True),
    ),
)

RECORD_MAPS: Dict[str, RecordMap] = {
    Sections.META: META_MAP,
    Sections.GROUPS: GROUP_MAP,
    Sections.PARAMS: PARAMETER_MAP,
}


__all__ = ["META_MAP", "GROUP_MAP", "PARAMETER_MAP", "RECORD_MAPS"]
