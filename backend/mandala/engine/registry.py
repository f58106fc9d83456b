"""Metric registry — every centrality metric is a standalone pure function registered via decorator.

Usage:
    @metric(id="degree", order=1, description="Direct connectivity")
    def degree_centrality(adjacency, node_ids):
        return {v: float(len(adjacency.get(v, []))) for v in node_ids}

Adding a new metric = creating one module under ``engine/metrics`` with the
decorator. The registry holds functions only, never graph state.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import Callable

from mandala.engine.graph import AdjacencyIndex

logger = logging.getLogger(__name__)

MetricFn = Callable[[AdjacencyIndex, list[str]], dict[str, float]]


@dataclass
class MetricSpec:
    id: str
    fn: MetricFn
    order: int = 0
    description: str = ""
    # keyword argument -> AnalysisConfig attribute supplying its value
    config_params: dict[str, str] = field(default_factory=dict)

    def kwargs_from(self, config: object) -> dict[str, object]:
        return {kw: getattr(config, attr) for kw, attr in self.config_params.items()}


class MetricRegistry:
    """Registry of centrality metrics, enumerated in ``order``."""

    def __init__(self) -> None:
        self._metrics: dict[str, MetricSpec] = {}

    def register(self, spec: MetricSpec) -> None:
        if spec.id in self._metrics:
            raise ValueError(f"Duplicate metric ID: {spec.id}")
        self._metrics[spec.id] = spec
        logger.debug("Registered metric %s", spec.id)

    def get(self, metric_id: str) -> MetricSpec:
        return self._metrics[metric_id]

    def all(self) -> list[MetricSpec]:
        return sorted(self._metrics.values(), key=lambda s: (s.order, s.id))

    def __contains__(self, metric_id: str) -> bool:
        return metric_id in self._metrics

    @property
    def count(self) -> int:
        return len(self._metrics)


# Module-level singleton
_registry = MetricRegistry()


def get_registry() -> MetricRegistry:
    return _registry


def metric(
    *,
    id: str,
    order: int = 0,
    description: str = "",
    config_params: dict[str, str] | None = None,
):
    """Decorator to register a metric function. The function is returned unchanged.

    ``config_params`` maps keyword arguments of ``fn`` to ``AnalysisConfig`` attributes
    the analyzer passes in, e.g. ``{"iterations": "eigenvector_iterations"}``.
    """

    def decorator(fn: MetricFn):
        _registry.register(
            MetricSpec(
                id=id,
                fn=fn,
                order=order,
                description=description,
                config_params=config_params or {},
            )
        )
        return fn

    return decorator


def load_builtin_metrics() -> None:
    """Import every module in ``mandala.engine.metrics`` so @metric decorators fire."""
    package = importlib.import_module("mandala.engine.metrics")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
