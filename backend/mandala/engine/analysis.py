"""Analyzer — runs every registered centrality metric over a rebuilt graph."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from mandala.engine.builder import rebuild_graph
from mandala.engine.config import AnalysisConfig
from mandala.engine.graph import Graph
from mandala.engine.motifs import EdgeTopology, Motif
from mandala.engine.registry import MetricRegistry, get_registry, load_builtin_metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisRow:
    """Per-node metric table row, full precision."""

    id: str
    layer: int
    degree: int
    closeness: float
    betweenness: float
    eigenvector: float


@dataclass
class AnalysisResult:
    graph: Graph
    # metric id -> node id -> score
    scores: dict[str, dict[str, float]] = field(default_factory=dict)
    rows: list[AnalysisRow] = field(default_factory=list)
    completed: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0


class Analyzer:
    """Runs the metric registry against a graph. Holds no graph state between runs."""

    def __init__(
        self,
        registry: MetricRegistry | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or AnalysisConfig()

    def run(self, graph: Graph) -> AnalysisResult:
        start = time.perf_counter()
        result = AnalysisResult(graph=graph)
        node_ids = graph.node_ids
        specs = self.registry.all()

        for spec in specs:
            t0 = time.perf_counter()
            try:
                result.scores[spec.id] = spec.fn(graph.adjacency, node_ids, **spec.kwargs_from(self.config))
                result.completed.append(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                result.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        result.rows = self._build_rows(graph, result.scores)
        result.elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Analysis complete: %d/%d metrics over %d nodes in %.0fms",
            len(result.completed),
            len(specs),
            graph.num_nodes,
            result.elapsed_ms,
        )
        return result

    @staticmethod
    def _build_rows(graph: Graph, scores: dict[str, dict[str, float]]) -> list[AnalysisRow]:
        def col(metric_id: str, node_id: str) -> float:
            return scores.get(metric_id, {}).get(node_id, 0.0)

        return [
            AnalysisRow(
                id=n.id,
                layer=n.layer,
                degree=int(col("degree", n.id)),
                closeness=col("closeness", n.id),
                betweenness=col("betweenness", n.id),
                eigenvector=col("eigenvector", n.id),
            )
            for n in graph.nodes
        ]


def create_analyzer(config: AnalysisConfig | None = None) -> Analyzer:
    """Factory returning an analyzer over the builtin metrics."""
    load_builtin_metrics()
    return Analyzer(config=config)


def analyze_layout(
    motifs: list[Motif],
    grid_order: int,
    topology: EdgeTopology | None = None,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Rebuild the graph from a layout and run every metric over it."""
    graph = rebuild_graph(motifs, grid_order, topology, config=config)
    return create_analyzer(config).run(graph)
