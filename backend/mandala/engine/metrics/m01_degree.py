"""Degree centrality — number of adjacency entries per node.

Parallel edges count once per edge, so the degree sum equals twice the edge count.
"""

from __future__ import annotations

from mandala.engine.graph import AdjacencyIndex
from mandala.engine.registry import metric


@metric(id="degree", order=1, description="Direct connectivity (neighbor-list length)")
def degree_centrality(adjacency: AdjacencyIndex, node_ids: list[str]) -> dict[str, float]:
    return {v: float(len(adjacency.get(v, []))) for v in node_ids}
