"""LayerGrouper — partitions ring motifs into concentric layers by radius.

Grouping is pairwise against the layer's anchor radius (its first member),
so it is order-dependent: 0.495 and 0.505 split or merge depending on which
radius opens the layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mandala.engine.config import AnalysisConfig
from mandala.engine.motifs import RingMotif


@dataclass
class Layer:
    # 1-based; index 0 is the synthetic center
    index: int
    radius: float
    motifs: list[RingMotif] = field(default_factory=list)


def group_layers(rings: list[RingMotif], tolerance: float | None = None) -> list[Layer]:
    """Fold ring motifs, sorted by ascending radius, into layers."""
    if tolerance is None:
        tolerance = AnalysisConfig().layer_tolerance

    layers: list[Layer] = []

    # sorted() is stable: equal radii keep encounter order
    for motif in sorted(rings, key=lambda m: m.radius):
        if layers and abs(motif.radius - layers[-1].radius) < tolerance:
            layers[-1].motifs.append(motif)
        else:
            layers.append(Layer(index=len(layers) + 1, radius=motif.radius, motifs=[motif]))

    return layers
