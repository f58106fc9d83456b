"""Eigenvector centrality — fixed-count power iteration.

Starts from all-ones, sums neighbor scores, L2-normalizes, and repeats a
fixed number of times. There is no convergence test; a zero vector stops
iteration early and leaves the previous scores in place.
"""

from __future__ import annotations

import math

from mandala.engine.config import AnalysisConfig
from mandala.engine.graph import AdjacencyIndex
from mandala.engine.registry import metric


@metric(
    id="eigenvector",
    order=4,
    description="Influence via recursively-weighted neighbor importance",
    config_params={"iterations": "eigenvector_iterations"},
)
def eigenvector_centrality(
    adjacency: AdjacencyIndex,
    node_ids: list[str],
    iterations: int | None = None,
) -> dict[str, float]:
    if iterations is None:
        iterations = AnalysisConfig().eigenvector_iterations

    scores: dict[str, float] = dict.fromkeys(node_ids, 1.0)

    for _ in range(iterations):
        new_scores = {v: sum(scores.get(u, 0.0) for u in adjacency.get(v, [])) for v in node_ids}
        norm = math.sqrt(sum(x * x for x in new_scores.values()))
        if norm == 0:
            break
        scores = {v: x / norm for v, x in new_scores.items()}

    return scores
