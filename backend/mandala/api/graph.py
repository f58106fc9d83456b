"""POST /api/graph — rebuild the layout graph."""

from __future__ import annotations

from fastapi import APIRouter

from mandala.engine.builder import rebuild_graph
from mandala.models.requests import LayoutRequest
from mandala.models.responses import EdgeOut, GraphResponse, NodeOut

router = APIRouter()


@router.post("/graph", response_model=GraphResponse)
def build_graph(req: LayoutRequest) -> GraphResponse:
    graph = rebuild_graph(req.to_motifs(), req.grid_order, req.to_topology())

    return GraphResponse(
        nodes=[NodeOut(id=n.id, layer=n.layer, x=n.x, y=n.y) for n in graph.nodes],
        edges=[EdgeOut(source=e.source, target=e.target, kind=e.kind.value) for e in graph.edges],
        layer_count=graph.layer_count,
    )
