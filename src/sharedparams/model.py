"""
Core Shared Parameter Model Objects

Defines the records of a shared parameter file:
    - Meta (format version)
    - Group (display group)
    - Parameter (shared attribute definition)
    - SharedParameterFile (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about the text format
        - Are immutable once returned by the parser
        - Represent structure, not behavior
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple, Union

from .types import TypeTag, UnitFamily, unit_family_of


@dataclass(frozen=True)
class Meta:
    """
    Format version of a shared parameter file.

    Properties:
        version: Version the file was written with
        min_version: Oldest reader version able to load the file
    """

    version: int = 0
    min_version: int = 0


@dataclass(frozen=True)
class Group:
    """
    Display group parameters are organised in.

    Properties:
        id: Numeric identifier, unique within a file
        name: Display name
    """

    id: int = -1
    name: str = ""


@dataclass(frozen=True, eq=False)
class Parameter:
    """
    A shared parameter definition.

    Properties:
        guid:
            Stable identity of the parameter across files and projects

        name:
            Display name

        data_type:
            TypeTag of the values the parameter holds

        data_category:
            Category tag, mostly empty

        group_id:
            Id of the owning Group

        group_name:
            Name of the owning Group, filled in by the resolution pass.
            Empty when no Group with group_id exists.

        visible:
            Whether the parameter is shown in the user interface

        description:
            Tooltip text; absent in older files

        user_modifiable:
            Whether users may edit the value; absent in older files

    EQUALITY:
        Two parameters are equal when guid, name and description match and
        either group_id or group_name matches, so a parameter moved to a
        renumbered group of the same name still compares equal.
        The hash only covers guid.
    """

    guid: uuid.UUID = uuid.UUID(int=0)
    name: str = ""
    data_type: TypeTag = TypeTag.TEXT
    data_category: str = ""
    group_id: int = -1
    group_name: str = ""
    visible: bool = True
    description: str = ""
    user_modifiable: bool = True

    @property
    def unit_family(self) -> UnitFamily:
        return unit_family_of(self.data_type)

    @property
    def is_shared(self) -> bool:
        return True

    def __eq__(self, other):
        if not isinstance(other, Parameter):
            return NotImplemented
        return (
            self.guid == other.guid
            and self.name == other.name
            and self.description == other.description
            and (self.group_id == other.group_id or self.group_name == other.group_name)
        )

    def __hash__(self):
        return hash(self.guid)


def resolve_parameters(groups: Iterable[Group], parameters: Iterable[Parameter]) -> Tuple[Parameter, ...]:
    """
    Fill in group_name on every parameter from its group_id.

    The first group with a matching id wins; parameters without a matching
    group get an empty name. Input order is kept.
    """
    names = {}
    for group in groups:
        names.setdefault(group.id, group.name)
    return tuple(replace(p, group_name=names.get(p.group_id, "")) for p in parameters)


@dataclass(frozen=True)
class SharedParameterFile:
    """
    Root container for a parsed shared parameter file.

    INVARIANTS:
        - Exactly one Meta
        - groups and parameters keep file order
        - Every parameter's group_name reflects groups at construction time

    Build new files with `SharedParameterFile.create` (or `replace`) so the
    group names are resolved; instances are never edited in place.
    """

    meta: Meta = field(default_factory=Meta)
    groups: Tuple[Group, ...] = ()
    parameters: Tuple[Parameter, ...] = ()

    @classmethod
    def create(
        cls,
        meta: Meta,
        groups: Iterable[Group] = (),
        parameters: Iterable[Parameter] = (),
    ) -> "SharedParameterFile":
        groups = tuple(groups)
        return cls(meta=meta, groups=groups, parameters=resolve_parameters(groups, parameters))

    def replace(self, **changes) -> "SharedParameterFile":
        """
        Copy with some of meta, groups or parameters swapped out.

        Raises:
            TypeError: If a keyword is not one of meta, groups or parameters
        """
        unknown = sorted(set(changes) - {"meta", "groups", "parameters"})
        if unknown:
            raise TypeError(f"Unknown SharedParameterFile field(s): {', '.join(unknown)}")
        return SharedParameterFile.create(
            meta=changes.get("meta", self.meta),
            groups=changes.get("groups", self.groups),
            parameters=changes.get("parameters", self.parameters),
        )

    def get_group(self, group_id: int) -> Optional[Group]:
        """
        Retrieve a group by id.

        Returns:
            First Group with the id, or None
        """
        for group in self.groups:
            if group.id == group_id:
                return group
        return None

    def get_group_by_name(self, name: str) -> Optional[Group]:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def get_parameter(self, guid: Union[uuid.UUID, str]) -> Optional[Parameter]:
        """
        Retrieve a parameter by guid.

        Args:
            guid: UUID or its string form

        Returns:
            Parameter or None if not found
        """
        if isinstance(guid, str):
            guid = uuid.UUID(guid)
        for parameter in self.parameters:
            if parameter.guid == guid:
                return parameter
        return None

    def get_parameter_by_name(self, name: str) -> Optional[Parameter]:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

    def parameters_in_group(self, group_id: int) -> List[Parameter]:
        return [p for p in self.parameters if p.group_id == group_id]
