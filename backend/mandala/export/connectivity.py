"""Graph and connectivity documents for downstream tools.

Nodes are indexed 0-based in construction order: the center first, then
layer by layer, motif by motif, instance by instance. Spoke attachment uses
the geometric nearest-neighbor rule; consumers that assumed the older
proportional-index rule (``floor(i * prev / total) % prev``) will see
different radial pairs on layers whose sizes do not divide evenly.
"""

from __future__ import annotations

from typing import Any

from mandala.engine.graph import Graph
from mandala.engine.motifs import EdgeTopology

CONNECTIVITY_FILENAME = "mandala_connectivity.json"
CONNECTIVITY_DESCRIPTION = "Adjacency List. Nodes 0-indexed. Center node is Node 0."


def graph_document(graph: Graph) -> dict[str, Any]:
    return {
        "nodes": [{"id": n.id, "layer": n.layer} for n in graph.nodes],
        "edges": [{"source": e.source, "target": e.target, "kind": e.kind.value} for e in graph.edges],
    }


def connectivity_document(graph: Graph, topology: EdgeTopology) -> dict[str, Any]:
    index = graph.node_index
    return {
        "description": CONNECTIVITY_DESCRIPTION,
        "topology_settings": {"radial": topology.radial, "ring": topology.ring},
        "node_count": graph.num_nodes,
        "edges": [[index[e.source], index[e.target]] for e in graph.edges],
    }
