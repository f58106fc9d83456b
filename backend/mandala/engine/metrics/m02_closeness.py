"""Closeness centrality — reach-normalized inverse distance.

score[s] = reached / sum(distances) over the nodes BFS reaches from s.
Disconnected graphs degrade gracefully: only reachable nodes contribute,
and an isolated node scores 0.
"""

from __future__ import annotations

from collections import deque

from mandala.engine.graph import AdjacencyIndex
from mandala.engine.registry import metric


def bfs_distances(adjacency: AdjacencyIndex, source: str) -> dict[str, int]:
    """Unweighted shortest-path hop counts from ``source`` to every reachable node."""
    dist = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency.get(u, []):
            if v not in dist:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


@metric(id="closeness", order=2, description="Proximity to all reachable nodes")
def closeness_centrality(adjacency: AdjacencyIndex, node_ids: list[str]) -> dict[str, float]:
    scores: dict[str, float] = {}
    for s in node_ids:
        dist = bfs_distances(adjacency, s)
        reached = len(dist) - 1
        total = sum(dist.values())
        scores[s] = reached / total if total > 0 else 0.0
    return scores
