"""POST /api/connectivity — indexed edge list for external analysis tools."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mandala.engine.builder import rebuild_graph
from mandala.export.connectivity import CONNECTIVITY_FILENAME, connectivity_document
from mandala.models.requests import LayoutRequest
from mandala.models.responses import ConnectivityResponse

router = APIRouter()


@router.post("/connectivity", response_model=ConnectivityResponse)
def connectivity(req: LayoutRequest) -> JSONResponse:
    topology = req.to_topology()
    graph = rebuild_graph(req.to_motifs(), req.grid_order, topology)

    doc = ConnectivityResponse(**connectivity_document(graph, topology))
    return JSONResponse(
        content=doc.model_dump(),
        headers={"Content-Disposition": f'attachment; filename="{CONNECTIVITY_FILENAME}"'},
    )
