"""Tests for motif variants."""

from mandala.engine.motifs import CenterMotif, EdgeTopology, GlobalParams, RingMotif, classify_motif, split_motifs


def test_classify_ring():
    m = classify_motif("a", radius=0.4, angle=15, multiplicity=2)
    assert isinstance(m, RingMotif)
    assert m.radius == 0.4
    assert m.multiplicity == 2


def test_classify_center_flag():
    m = classify_motif("a", is_center=True, radius=0.4, multiplicity=3)
    assert isinstance(m, CenterMotif)


def test_classify_zero_multiplicity_is_center():
    m = classify_motif("a", radius=0.4, multiplicity=0)
    assert isinstance(m, CenterMotif)


def test_count_never_zero():
    assert RingMotif(id="a", radius=0.5, multiplicity=1).count(8) == 8
    assert RingMotif(id="a", radius=0.5, multiplicity=3).count(4) == 12
    assert RingMotif(id="a", radius=0.5, multiplicity=1).count(1) == 1
    assert RingMotif(id="a", radius=0.5, multiplicity=1).count(0) == 1


def test_split_first_center_wins():
    motifs = [
        RingMotif(id="r1", radius=0.5),
        CenterMotif(id="c1"),
        CenterMotif(id="c2"),
        RingMotif(id="r2", radius=0.2),
    ]
    center, rings = split_motifs(motifs)
    assert center is not None and center.id == "c1"
    assert [r.id for r in rings] == ["r1", "r2"]


def test_split_no_center():
    center, rings = split_motifs([RingMotif(id="r1", radius=0.5)])
    assert center is None
    assert len(rings) == 1


def test_global_params_defaults():
    params = GlobalParams()
    assert params.grid_order == 8
    assert params.topology == EdgeTopology(radial=True, ring=True)
