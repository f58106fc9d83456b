"""API request models.

Requests carry the layout contract the UI sends. Caller-side normalization
happens here so the engine only ever sees a positive grid order and a
concrete multiplicity.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mandala.engine.motifs import EdgeTopology, Motif, classify_motif

# Per-request expansion limits
MAX_MOTIF_INSTANCES = 1024
MAX_LAYOUT_NODES = 2048


class TopologyIn(BaseModel):
    radial: bool = True
    ring: bool = True

    def to_topology(self) -> EdgeTopology:
        return EdgeTopology(radial=self.radial, ring=self.ring)


class MotifIn(BaseModel):
    # Rendering-only fields (color, rotation, flip, url...) are accepted and dropped
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique motif id")
    is_center: bool = Field(default=False, alias="isCenter")
    radius: float = Field(default=0.5, description="Ring radius on the unit disc")
    angle: float = Field(default=0.0, description="Angular offset in degrees")
    multiplicity: int = Field(default=1, description="Instances per symmetry sector; 0 marks the center")
    scale: float = Field(default=0.5)

    @field_validator("multiplicity", mode="before")
    @classmethod
    def _default_multiplicity(cls, v: object) -> object:
        return 1 if v is None else v

    @field_validator("multiplicity")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        return max(v, 0)

    def to_motif(self) -> Motif:
        return classify_motif(
            self.id,
            is_center=self.is_center,
            radius=self.radius,
            angle=self.angle,
            multiplicity=self.multiplicity,
            scale=self.scale,
        )


class LayoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    motifs: list[MotifIn] = Field(default_factory=list)
    grid_order: int = Field(default=8, alias="gridOrder", description="Rotational symmetry order")
    edge_topology: TopologyIn = Field(default_factory=TopologyIn, alias="edgeTopology")

    @field_validator("grid_order", mode="before")
    @classmethod
    def _default_grid_order(cls, v: object) -> object:
        return 8 if v is None else v

    @field_validator("grid_order")
    @classmethod
    def _clamp_grid_order(cls, v: int) -> int:
        return max(v, 1)

    @model_validator(mode="after")
    def _unique_ids(self) -> LayoutRequest:
        seen: set[str] = set()
        for m in self.motifs:
            if m.id in seen:
                raise ValueError(f"Duplicate motif id: {m.id}")
            seen.add(m.id)
        return self

    @model_validator(mode="after")
    def _bounded_size(self) -> LayoutRequest:
        total = 1
        for m in self.motifs:
            if m.is_center or m.multiplicity == 0:
                continue
            count = max(self.grid_order * m.multiplicity, 1)
            if count > MAX_MOTIF_INSTANCES:
                raise ValueError(
                    f"Motif {m.id} expands to {count} instances (limit {MAX_MOTIF_INSTANCES})"
                )
            total += count
        if total > MAX_LAYOUT_NODES:
            raise ValueError(f"Layout expands to {total} nodes (limit {MAX_LAYOUT_NODES})")
        return self

    def to_motifs(self) -> list[Motif]:
        return [m.to_motif() for m in self.motifs]

    def to_topology(self) -> EdgeTopology:
        return self.edge_topology.to_topology()
