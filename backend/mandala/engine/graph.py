"""Graph data model — nodes, undirected edges and the adjacency index.

Edges form a multiset: the same pair may be linked more than once and each
link contributes its own adjacency entries.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

CENTER_NODE_ID = "center"

AdjacencyIndex = dict[str, list[str]]


class EdgeKind(str, enum.Enum):
    RADIAL = "radial"
    RING = "ring"


@dataclass(frozen=True)
class Node:
    id: str
    layer: int
    x: float = 0.0
    y: float = 0.0
    # Source motif; None for a center node no motif claimed
    motif_id: str | None = None
    instance: int = 0


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    kind: EdgeKind


def build_adjacency(node_ids: list[str], edges: list[Edge]) -> AdjacencyIndex:
    """Neighbor lists keyed by node id; every node gets a list, even if empty."""
    adjacency: AdjacencyIndex = {nid: [] for nid in node_ids}
    for e in edges:
        adjacency.setdefault(e.source, []).append(e.target)
        adjacency.setdefault(e.target, []).append(e.source)
    return adjacency


@dataclass(frozen=True)
class Graph:
    """Immutable result of one rebuild. Never mutated after construction."""

    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...]
    adjacency: AdjacencyIndex = field(default_factory=dict, compare=False)
    # 0-based construction-order index per node id
    node_index: dict[str, int] = field(default_factory=dict, compare=False)

    @classmethod
    def from_parts(cls, nodes: list[Node], edges: list[Edge]) -> Graph:
        node_ids = [n.id for n in nodes]
        return cls(
            nodes=tuple(nodes),
            edges=tuple(edges),
            adjacency=build_adjacency(node_ids, edges),
            node_index={nid: i for i, nid in enumerate(node_ids)},
        )

    @property
    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def layer_count(self) -> int:
        """Ring layers, excluding the center."""
        return max((n.layer for n in self.nodes), default=0)

    @property
    def degree_sum(self) -> int:
        return sum(len(nbrs) for nbrs in self.adjacency.values())

    def get_node(self, node_id: str) -> Node | None:
        i = self.node_index.get(node_id)
        return self.nodes[i] if i is not None else None

    def neighbors(self, node_id: str) -> tuple[str, ...]:
        return tuple(self.adjacency.get(node_id, ()))
