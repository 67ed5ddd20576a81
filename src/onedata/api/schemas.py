"""
onedata.api.schemas

Request/response models for the `/api` routes.

Field names follow the dashboard's JSON contract: rows are snake_case,
request bodies are camelCase (`nodeId`, `abapCode`).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from onedata.db.models import DeploymentStatus, RoutineStatus
from onedata.db.records import EdgeRecord, NodeRecord, RoutineRecord


class NodeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    technical_name: str
    type: str
    description: str | None
    deployment_status: DeploymentStatus


class EdgeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    source_id: str
    target_id: str
    type: str


class RoutineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    node_id: str
    routine_type: str | None
    abap_code: str | None
    converted_sql: str | None
    status: RoutineStatus


class GraphOut(BaseModel):
    nodes: list[NodeOut]
    edges: list[EdgeOut]


class NodeDetailOut(NodeOut):
    routine: RoutineOut | None


class ConvertRequest(BaseModel):
    # Both optional so a missing abapCode surfaces as the service's InvalidInput.
    nodeId: str | None = None
    abapCode: str | None = None


class ConvertResponse(BaseModel):
    sql: str


class DeployRequest(BaseModel):
    nodeId: str | None = None


class DeployResponse(BaseModel):
    success: bool = True
    message: str


class NodeIn(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    technical_name: str = Field(min_length=1, max_length=128)
    type: str = Field(min_length=1, max_length=32)
    description: str | None = None

    def to_record(self) -> NodeRecord:
        return NodeRecord(
            id=self.id,
            technical_name=self.technical_name,
            type=self.type.upper(),
            description=self.description,
        )


class EdgeIn(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    source_id: str
    target_id: str
    type: str = Field(min_length=1, max_length=32)

    def to_record(self) -> EdgeRecord:
        return EdgeRecord(
            id=self.id, source_id=self.source_id, target_id=self.target_id, type=self.type.upper()
        )


class RoutineIn(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    node_id: str
    routine_type: str | None = None
    abap_code: str

    def to_record(self) -> RoutineRecord:
        return RoutineRecord(
            id=self.id,
            node_id=self.node_id,
            abap_code=self.abap_code,
            routine_type=self.routine_type.upper() if self.routine_type else None,
        )


class GraphImportRequest(BaseModel):
    nodes: list[NodeIn] = Field(default_factory=list)
    edges: list[EdgeIn] = Field(default_factory=list)
    routines: list[RoutineIn] = Field(default_factory=list)


class GraphImportResponse(BaseModel):
    nodes: int
    edges: int
    routines: int
