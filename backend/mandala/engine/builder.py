"""GraphBuilder — expands layered motifs into a radially-symmetric graph.

Each ring motif contributes ``max(grid_order * multiplicity, 1)`` nodes spaced
evenly around its layer's radius. Radial edges attach every new node to the
geometrically nearest node of the previous (inward) layer; ring edges close
each motif's instances into a cycle.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from mandala.engine.config import AnalysisConfig
from mandala.engine.graph import CENTER_NODE_ID, Edge, EdgeKind, Graph, Node
from mandala.engine.layers import Layer, group_layers
from mandala.engine.motifs import EdgeTopology, Motif, RingMotif, split_motifs

logger = logging.getLogger(__name__)


def instance_position(radius: float, angle_deg: float, i: int, count: int) -> tuple[float, float]:
    """Position of instance ``i`` of ``count`` on the unit disc. Angle 0 points up."""
    theta = math.radians(angle_deg + i * 360.0 / count - 90.0)
    return (radius * math.cos(theta), radius * math.sin(theta))


def nearest_node(nodes: list[Node], x: float, y: float) -> Node:
    """Closest node by Euclidean distance; ties go to the first encountered."""
    coords = np.array([(n.x, n.y) for n in nodes], dtype=np.float64)
    dist_sq = (coords[:, 0] - x) ** 2 + (coords[:, 1] - y) ** 2
    # argmin returns the first index among equal minima
    return nodes[int(np.argmin(dist_sq))]


def _expand_motif(motif: RingMotif, layer: Layer, grid_order: int) -> list[Node]:
    count = motif.count(grid_order)
    nodes = []
    for i in range(count):
        x, y = instance_position(layer.radius, motif.angle, i, count)
        nodes.append(
            Node(
                id=f"{motif.id}-{i}",
                layer=layer.index,
                x=x,
                y=y,
                motif_id=motif.id,
                instance=i,
            )
        )
    return nodes


def rebuild_graph(
    motifs: list[Motif],
    grid_order: int,
    topology: EdgeTopology | None = None,
    config: AnalysisConfig | None = None,
) -> Graph:
    """Build the full graph from scratch.

    ``grid_order`` must already be normalized to a positive integer.
    """
    topology = topology or EdgeTopology()
    config = config or AnalysisConfig()

    center_motif, rings = split_motifs(motifs)
    layers = group_layers(rings, tolerance=config.layer_tolerance)

    center = Node(id=CENTER_NODE_ID, layer=0, motif_id=center_motif.id if center_motif else None)
    nodes: list[Node] = [center]
    edges: list[Edge] = []
    previous_layer_nodes: list[Node] = [center]

    for layer in layers:
        current_layer_nodes: list[Node] = []

        for motif in layer.motifs:
            motif_nodes = _expand_motif(motif, layer, grid_order)

            for node in motif_nodes:
                nodes.append(node)
                if topology.radial:
                    target = nearest_node(previous_layer_nodes, node.x, node.y)
                    edges.append(Edge(source=node.id, target=target.id, kind=EdgeKind.RADIAL))

            if topology.ring and len(motif_nodes) > 1:
                count = len(motif_nodes)
                for i in range(count):
                    successor = motif_nodes[(i + 1) % count]
                    edges.append(Edge(source=motif_nodes[i].id, target=successor.id, kind=EdgeKind.RING))

            current_layer_nodes.extend(motif_nodes)

        # The next layer links against the whole layer, not only its last motif
        previous_layer_nodes = current_layer_nodes

    graph = Graph.from_parts(nodes, edges)
    logger.debug(
        "Rebuilt graph: %d nodes, %d edges across %d layers (grid_order=%d, radial=%s, ring=%s)",
        graph.num_nodes,
        graph.edge_count,
        len(layers),
        grid_order,
        topology.radial,
        topology.ring,
    )
    return graph
