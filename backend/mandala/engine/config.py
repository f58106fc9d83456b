"""Analysis configuration — constants governing graph construction and metrics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Controls layer grouping and iterative metrics."""

    # Ring motifs whose radii differ by less than this share a layer
    layer_tolerance: float = 0.01

    # Fixed power-iteration count for eigenvector centrality (no convergence test)
    eigenvector_iterations: int = 20
