"""Betweenness centrality — Brandes' accumulation on an unweighted, undirected graph.

For every source s: BFS records shortest-path counts (sigma) and
predecessor lists, then nodes are popped in reverse BFS order to
accumulate dependencies. Each unordered pair {s, t} is credited exactly
once, from whichever endpoint comes first in ``node_ids``, so no final
halving step is applied. A 5-node star gives its hub 6 (one per leaf pair).
"""

from __future__ import annotations

from collections import deque

from mandala.engine.graph import AdjacencyIndex
from mandala.engine.registry import metric


def _single_source_dependencies(
    adjacency: AdjacencyIndex,
    node_ids: list[str],
    position: dict[str, int],
    s: str,
) -> dict[str, float]:
    stack: list[str] = []
    preds: dict[str, list[str]] = {v: [] for v in node_ids}
    sigma: dict[str, float] = dict.fromkeys(node_ids, 0.0)
    dist: dict[str, int] = dict.fromkeys(node_ids, -1)
    sigma[s] = 1.0
    dist[s] = 0

    queue = deque([s])
    while queue:
        v = queue.popleft()
        stack.append(v)
        for w in adjacency.get(v, []):
            if dist.get(w, -1) < 0:
                dist[w] = dist[v] + 1
                queue.append(w)
            if dist[w] == dist[v] + 1:
                sigma[w] = sigma.get(w, 0.0) + sigma[v]
                preds.setdefault(w, []).append(v)

    source_pos = position[s]
    delta: dict[str, float] = dict.fromkeys(stack, 0.0)
    while stack:
        w = stack.pop()
        # w counts as a path endpoint only for the pair's first-listed source
        endpoint = 1.0 if position.get(w, -1) > source_pos else 0.0
        for v in preds.get(w, []):
            delta[v] += (sigma[v] / sigma[w]) * (endpoint + delta[w])
    return delta


@metric(id="betweenness", order=3, description="Shortest paths passing through a node")
def betweenness_centrality(adjacency: AdjacencyIndex, node_ids: list[str]) -> dict[str, float]:
    position = {v: i for i, v in enumerate(node_ids)}
    scores: dict[str, float] = dict.fromkeys(node_ids, 0.0)
    for s in node_ids:
        delta = _single_source_dependencies(adjacency, node_ids, position, s)
        for w, d in delta.items():
            if w != s and w in scores:
                scores[w] += d
    return scores
