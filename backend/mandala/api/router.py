"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from mandala.api import analysis, connectivity, graph, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(graph.router)
api_router.include_router(analysis.router)
api_router.include_router(connectivity.router)
