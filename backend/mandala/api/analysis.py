"""POST /api/analysis — per-node centrality table (JSON or CSV).

Handlers are sync so FastAPI runs the CPU-bound analysis in its threadpool.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from mandala.config import Settings
from mandala.dependencies import get_settings
from mandala.engine.analysis import analyze_layout
from mandala.export.table import CSV_FILENAME, rows_to_csv, rows_to_records
from mandala.models.requests import LayoutRequest
from mandala.models.responses import AnalysisResponse, AnalysisRowOut

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResponse)
def analysis(req: LayoutRequest, settings: Settings = Depends(get_settings)) -> AnalysisResponse:
    start = time.perf_counter()

    result = analyze_layout(req.to_motifs(), req.grid_order, req.to_topology())

    elapsed = (time.perf_counter() - start) * 1000

    return AnalysisResponse(
        rows=[AnalysisRowOut(**rec) for rec in rows_to_records(result.rows, settings.export_precision)],
        node_count=result.graph.num_nodes,
        edge_count=result.graph.edge_count,
        processing_time_ms=round(elapsed, 1),
        metrics_completed=len(result.completed),
        metrics_failed=len(result.errors),
        errors=result.errors,
    )


@router.post("/analysis/csv")
def analysis_csv(req: LayoutRequest, settings: Settings = Depends(get_settings)) -> Response:
    result = analyze_layout(req.to_motifs(), req.grid_order, req.to_topology())

    return Response(
        content=rows_to_csv(result.rows, settings.export_precision),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
