"""
onedata.db.records

Plain input records for inserting graph objects through the ObjectStore.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NodeRecord:
    id: str
    technical_name: str
    type: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    id: str
    source_id: str
    target_id: str
    type: str


@dataclass(frozen=True, slots=True)
class RoutineRecord:
    id: str
    node_id: str
    abap_code: str
    routine_type: str | None = None
