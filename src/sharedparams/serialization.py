"""
Serialization helpers for shared parameter objects (Meta, Group, Parameter).

Provides JSON/YAML export and import via an intermediate dict representation.
The dict form carries the derived unit family and group name for readers;
both are recomputed on import.
"""
from __future__ import annotations

import json
import uuid
from typing import Any, Dict

import yaml

from sharedparams.model import (
    Group,
    Meta,
    Parameter,
    SharedParameterFile,
)
from sharedparams.tabular import decode_bool
from sharedparams.types import decode_type, encode_type


def _flag(value: Any) -> bool:
    # Hand-written YAML/JSON may spell booleans as strings ("false", "0")
    if isinstance(value, str):
        return decode_bool(value)
    return bool(value)


def meta_to_dict(m: Meta) -> Dict[str, Any]:
    return {"version": m.version, "min_version": m.min_version}


def meta_from_dict(d: Dict[str, Any]) -> Meta:
    return Meta(version=int(d.get("version", 0)), min_version=int(d.get("min_version", 0)))


def group_to_dict(g: Group) -> Dict[str, Any]:
    return {"id": g.id, "name": g.name}


def group_from_dict(d: Dict[str, Any]) -> Group:
    return Group(id=int(d["id"]), name=d.get("name", ""))


def parameter_to_dict(p: Parameter) -> Dict[str, Any]:
    return {
        "guid": str(p.guid),
        "name": p.name,
        "data_type": encode_type(p.data_type),
        "unit_family": p.unit_family.value,
        "data_category": p.data_category,
        "group_id": p.group_id,
        "group_name": p.group_name,
        "visible": p.visible,
        "description": p.description,
        "user_modifiable": p.user_modifiable,
    }


def parameter_from_dict(d: Dict[str, Any]) -> Parameter:
    return Parameter(
        guid=uuid.UUID(d["guid"]),
        name=d.get("name", ""),
        data_type=decode_type(d["data_type"]),
        data_category=d.get("data_category", ""),
        group_id=int(d.get("group_id", -1)),
        visible=_flag(d.get("visible", True)),
        description=d.get("description", ""),
        user_modifiable=_flag(d.get("user_modifiable", True)),
    )


def document_to_dict(doc: SharedParameterFile) -> Dict[str, Any]:
    return {
        "meta": meta_to_dict(doc.meta),
        "groups": [group_to_dict(g) for g in doc.groups],
        "parameters": [parameter_to_dict(p) for p in doc.parameters],
    }


def document_from_dict(d: Dict[str, Any]) -> SharedParameterFile:
    return SharedParameterFile.create(
        meta=meta_from_dict(d.get("meta", {})),
        groups=[group_from_dict(g) for g in d.get("groups", [])],
        parameters=[parameter_from_dict(p) for p in d.get("parameters", [])],
    )


def document_to_json(doc: SharedParameterFile) -> str:
    return json.dumps(document_to_dict(doc), sort_keys=True)


def document_from_json(s: str) -> SharedParameterFile:
    d = json.loads(s)
    return document_from_dict(d)


def document_to_yaml(doc: SharedParameterFile) -> str:
    return yaml.safe_dump(document_to_dict(doc), sort_keys=False, allow_unicode=True)


def document_from_yaml(s: str) -> SharedParameterFile:
    d = yaml.safe_load(s)
    return document_from_dict(d)
