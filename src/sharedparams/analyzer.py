"""
Catalogue Analyzer: read-only inventory of a shared parameter file.

This module provides lightweight structural diagnostics:
    - Parameter counts per group and per data type
    - Dangling group references and empty groups
    - Duplicate guids, parameter names and group ids

IMPORTANT: It does NOT modify the file and does NOT judge whether a
parameter's data type makes sense for its purpose.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Set

from sharedparams.model import SharedParameterFile


@dataclass
class CatalogueReport:
    """Inventory and warnings for one shared parameter file."""

    version: int = 0
    min_version: int = 0
    total_groups: int = 0
    total_parameters: int = 0

    # Usage
    parameters_per_group: Dict[str, int] = field(default_factory=dict)
    parameters_per_type: Dict[str, int] = field(default_factory=dict)
    parameters_per_unit_family: Dict[str, int] = field(default_factory=dict)
    hidden_parameters: int = 0
    read_only_parameters: int = 0
    described_parameters: int = 0

    # Structure
    dangling_group_ids: Set[int] = field(default_factory=set)
    empty_groups: List[str] = field(default_factory=list)
    duplicate_guids: Set[str] = field(default_factory=set)
    duplicate_names: Set[str] = field(default_factory=set)
    duplicate_group_ids: Set[int] = field(default_factory=set)

    warnings: List[str] = field(default_factory=list)

    @property
    def meta_inconsistent(self) -> bool:
        return self.min_version > self.version

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_catalogue(doc: SharedParameterFile) -> CatalogueReport:
    """
    Inventory a SharedParameterFile.

    Returns a CatalogueReport with counts and warnings.
    """
    report = CatalogueReport(
        version=doc.meta.version,
        min_version=doc.meta.min_version,
        total_groups=len(doc.groups),
        total_parameters=len(doc.parameters),
    )

    group_ids = Counter(g.id for g in doc.groups)
    report.duplicate_group_ids = {gid for gid, n in group_ids.items() if n > 1}

    # =========================================================================
    # 1. USAGE
    # =========================================================================

    per_group: Dict[int, int] = defaultdict(int)
    for p in doc.parameters:
        per_group[p.group_id] += 1
        if p.group_id not in group_ids:
            report.dangling_group_ids.add(p.group_id)
        if not p.visible:
            report.hidden_parameters += 1
        if not p.user_modifiable:
            report.read_only_parameters += 1
        if p.description:
            report.described_parameters += 1

    for group in doc.groups:
        report.parameters_per_group[group.name] = per_group.get(group.id, 0)
        if not per_group.get(group.id):
            report.empty_groups.append(group.name)

    report.parameters_per_type = dict(Counter(p.data_type.value for p in doc.parameters))
    report.parameters_per_unit_family = dict(Counter(p.unit_family.value for p in doc.parameters))

    # =========================================================================
    # 2. DUPLICATES
    # =========================================================================

    guids = Counter(str(p.guid) for p in doc.parameters)
    report.duplicate_guids = {g for g, n in guids.items() if n > 1}

    names = Counter(p.name for p in doc.parameters)
    report.duplicate_names = {name for name, n in names.items() if n > 1}

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.dangling_group_ids:
        report.add_warning(
            f"Parameters reference missing groups: {', '.join(str(g) for g in sorted(report.dangling_group_ids))}"
        )

    if report.duplicate_group_ids:
        report.add_warning(
            f"Duplicate group ids: {', '.join(str(g) for g in sorted(report.duplicate_group_ids))}"
        )

    if report.duplicate_guids:
        report.add_warning(f"Duplicate parameter guids: {', '.join(sorted(report.duplicate_guids))}")

    if report.duplicate_names:
        report.add_warning(f"Duplicate parameter names: {', '.join(sorted(report.duplicate_names))}")

    if report.empty_groups:
        report.add_warning(f"Groups without parameters: {', '.join(report.empty_groups)}")

    if report.meta_inconsistent:
        report.add_warning(
            f"Minimum version {report.min_version} is newer than file version {report.version}"
        )

    return report
