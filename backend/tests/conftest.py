"""Shared test fixtures."""

from __future__ import annotations

import pytest

from mandala.engine.motifs import CenterMotif, RingMotif


# Layouts in the API's input contract

STAR_LAYOUT = {
    "gridOrder": 4,
    "edgeTopology": {"radial": True, "ring": False},
    "motifs": [
        {"id": "petal", "isCenter": False, "radius": 0.5, "angle": 0, "multiplicity": 1, "scale": 0.5},
    ],
}

LOTUS_LAYOUT = {
    "gridOrder": 8,
    "edgeTopology": {"radial": True, "ring": True},
    "motifs": [
        {"id": "seed", "isCenter": True, "radius": 0, "angle": 0, "multiplicity": 0, "scale": 1.0},
        {"id": "inner", "radius": 0.3, "angle": 0, "multiplicity": 1, "scale": 0.4},
        {"id": "dots", "radius": 0.305, "angle": 22.5, "multiplicity": 1, "scale": 0.2},
        {"id": "outer", "radius": 0.7, "angle": 10, "multiplicity": 2, "scale": 0.3,
         "color": "#ff0000", "rotation": 45, "flip": True},
    ],
}


@pytest.fixture
def star_layout() -> dict:
    return STAR_LAYOUT


@pytest.fixture
def lotus_layout() -> dict:
    return LOTUS_LAYOUT


@pytest.fixture
def lotus_motifs() -> list:
    """Same arrangement as LOTUS_LAYOUT, as engine motifs."""
    return [
        CenterMotif(id="seed", scale=1.0),
        RingMotif(id="inner", radius=0.3, angle=0, multiplicity=1),
        RingMotif(id="dots", radius=0.305, angle=22.5, multiplicity=1),
        RingMotif(id="outer", radius=0.7, angle=10, multiplicity=2),
    ]


@pytest.fixture
def star_adjacency() -> dict[str, list[str]]:
    return {
        "hub": ["a", "b", "c", "d"],
        "a": ["hub"],
        "b": ["hub"],
        "c": ["hub"],
        "d": ["hub"],
    }
