"""Motif variants and global layout parameters.

A motif is either a ring motif (repeated around a concentric ring) or a
center motif (collapsed into the single synthetic center node). Only the
fields the graph model needs are kept; color, rotation and flip belong to
rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingMotif:
    id: str
    radius: float
    angle: float = 0.0
    multiplicity: int = 1
    scale: float = 0.5

    def count(self, grid_order: int) -> int:
        """Number of instances placed around the ring. Never zero."""
        return max(grid_order * self.multiplicity, 1)


@dataclass(frozen=True)
class CenterMotif:
    id: str
    scale: float = 0.5


Motif = Union[RingMotif, CenterMotif]


@dataclass(frozen=True)
class EdgeTopology:
    radial: bool = True
    ring: bool = True


@dataclass(frozen=True)
class GlobalParams:
    grid_order: int = 8
    topology: EdgeTopology = EdgeTopology()


def classify_motif(
    id: str,
    *,
    is_center: bool = False,
    radius: float = 0.5,
    angle: float = 0.0,
    multiplicity: int = 1,
    scale: float = 0.5,
) -> Motif:
    """Build the right variant from a flat motif record.

    ``multiplicity == 0`` marks a center motif just like ``is_center``.
    """
    if is_center or multiplicity == 0:
        return CenterMotif(id=id, scale=scale)
    return RingMotif(id=id, radius=radius, angle=angle, multiplicity=multiplicity, scale=scale)


def split_motifs(motifs: list[Motif]) -> tuple[CenterMotif | None, list[RingMotif]]:
    """Separate the center motif (first one wins) from ring motifs, keeping input order."""
    center: CenterMotif | None = None
    rings: list[RingMotif] = []
    dropped: list[str] = []

    for m in motifs:
        if isinstance(m, CenterMotif):
            if center is None:
                center = m
            else:
                dropped.append(m.id)
        else:
            rings.append(m)

    if dropped:
        logger.debug("Extra center motifs ignored: %s", ", ".join(dropped))

    return center, rings
