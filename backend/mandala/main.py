"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mandala.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.mandala_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Mandala Graph",
        description="Radially-symmetric motif layouts as graphs, with centrality analysis",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all metric modules to trigger registration
    _register_metrics()

    from mandala.api.router import api_router

    app.include_router(api_router)

    return app


def _register_metrics() -> None:
    """Import all metric modules so @metric decorators fire."""
    from mandala.engine.registry import load_builtin_metrics

    load_builtin_metrics()


app = create_app()
