"""
onedata.db.models

Persistence schema for the BW object graph.

Responsibilities:
- Define ORM models for the three tables the dashboard reads and writes:
  - Node (`nodes`): a warehouse object (cube, ADSO, data source, ...)
  - Edge (`edges`): directed lineage relationship between two nodes
  - AbapRoutine (`abap_routines`): legacy transformation code owned by a node
- Define the status enums stored in those tables.
"""

from __future__ import annotations

import enum

from sqlalchemy import Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from onedata.db.base import Base


class NodeType(enum.StrEnum):
    # Known SAP BW object types. The column itself is an open string so unknown
    # object types from future imports are stored as-is.
    cube = "CUBE"
    dso = "DSO"
    adso = "ADSO"
    datasource = "DATASOURCE"
    hcpr = "HCPR"


class EdgeType(enum.StrEnum):
    transformation = "TRANSFORMATION"
    union = "UNION"
    dtp = "DTP"


class DeploymentStatus(enum.StrEnum):
    pending = "PENDING"
    deployed = "DEPLOYED"


class RoutineType(enum.StrEnum):
    start = "START"
    end = "END"
    expert = "EXPERT"


class RoutineStatus(enum.StrEnum):
    # VERIFIED is reserved for a later review step; nothing sets it yet.
    pending = "PENDING"
    converted = "CONVERTED"
    verified = "VERIFIED"


def _stored_as_values(enum_cls: type[enum.StrEnum]) -> Enum:
    # Persist enum values ("PENDING") rather than member names ("pending").
    return Enum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=32,
    )


class Node(Base):
    __tablename__ = "nodes"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    technical_name: Mapped[str] = mapped_column(String(128), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    deployment_status: Mapped[DeploymentStatus] = mapped_column(
        _stored_as_values(DeploymentStatus),
        nullable=False,
        default=DeploymentStatus.pending,
        server_default=DeploymentStatus.pending.value,
    )


class Edge(Base):
    __tablename__ = "edges"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    # SQLite does not enforce these unless PRAGMA foreign_keys is on; the
    # ObjectStore checks endpoints explicitly before inserting.
    source_id: Mapped[str] = mapped_column(String(64), ForeignKey("nodes.id"), nullable=False)
    target_id: Mapped[str] = mapped_column(String(64), ForeignKey("nodes.id"), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)


class AbapRoutine(Base):
    __tablename__ = "abap_routines"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    node_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("nodes.id"), nullable=False, index=True
    )
    routine_type: Mapped[str | None] = mapped_column(String(16), nullable=True)
    abap_code: Mapped[str | None] = mapped_column(Text, nullable=True)
    converted_sql: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[RoutineStatus] = mapped_column(
        _stored_as_values(RoutineStatus),
        nullable=False,
        default=RoutineStatus.pending,
        server_default=RoutineStatus.pending.value,
    )


# --- Module Notes -----------------------------------------------------------
# Table and column names match the existing onedata.db layout, so files written by earlier
# dashboard versions open without migration.
