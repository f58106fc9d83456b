"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    metrics_registered: int = 0


class NodeOut(BaseModel):
    id: str
    layer: int
    x: float = 0.0
    y: float = 0.0


class EdgeOut(BaseModel):
    source: str
    target: str
    kind: str


class GraphResponse(BaseModel):
    nodes: list[NodeOut] = Field(default_factory=list)
    edges: list[EdgeOut] = Field(default_factory=list)
    layer_count: int = 0


class AnalysisRowOut(BaseModel):
    id: str
    layer: int
    degree: int
    closeness: float
    betweenness: float
    eigenvector: float


class AnalysisResponse(BaseModel):
    rows: list[AnalysisRowOut] = Field(default_factory=list)
    node_count: int = 0
    edge_count: int = 0
    processing_time_ms: float = 0.0
    metrics_completed: int = 0
    metrics_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class TopologySettings(BaseModel):
    radial: bool
    ring: bool


class ConnectivityResponse(BaseModel):
    description: str
    topology_settings: TopologySettings
    node_count: int
    edges: list[tuple[int, int]] = Field(default_factory=list)
