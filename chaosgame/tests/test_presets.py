"""
Тести пресетів фракталів.
"""

import random

import pytest
from chaosgame.geom import Pt
from chaosgame.polygon import Triangle, Quadrilateral
from chaosgame.predicates import validate
from chaosgame.presets import PRESETS, ITERATIONS, get_preset, run
from chaosgame.rules import AvoidRepeat, ShareCoordinate, UniformVertex


def test_registry_order_and_constants():
    assert list(PRESETS) == ["sierpinski-triangle", "square-one", "square-two", "vicsek"]
    assert ITERATIONS == 1_000_000
    assert PRESETS["sierpinski-triangle"].jump_distance == 0.5
    assert PRESETS["square-one"].jump_distance == 0.5
    assert PRESETS["square-two"].jump_distance == 0.5
    assert PRESETS["vicsek"].jump_distance == pytest.approx(2 / 3)


def test_preset_shapes_and_rules():
    rng = random.Random(0)
    polygon, rule = PRESETS["sierpinski-triangle"].build(rng)
    assert polygon == Triangle.equilateral(100.0)
    assert type(rule) is UniformVertex
    assert rule.candidates == tuple(polygon.vertices())

    polygon, rule = PRESETS["square-one"].build(rng)
    assert polygon == Quadrilateral.square(100.0)
    assert isinstance(rule, AvoidRepeat)

    polygon, rule = PRESETS["square-two"].build(rng)
    assert isinstance(rule, ShareCoordinate)


def test_vicsek_adds_center_and_samples_independently():
    _, rule = PRESETS["vicsek"].build(random.Random(3))
    assert type(rule) is UniformVertex
    assert len(rule.candidates) == 5
    assert rule.candidates[-1] == Pt(50.0, 50.0)
    refs = [rule() for _ in range(2000)]
    # повтори дозволені
    assert any(r1 == r2 for r1, r2 in zip(refs, refs[1:]))
    assert set(refs) == set(rule.candidates)


@pytest.mark.parametrize("name", list(PRESETS))
def test_point_count(name):
    assert len(list(run(name, 1000))) == 1000


@pytest.mark.parametrize("name", list(PRESETS))
def test_points_stay_inside_shape(name):
    pts = list(run(name, 3000))
    polygon, _ = PRESETS[name].build(random.Random())
    report = validate(pts, polygon)
    assert report["points"] == 3000
    assert report["outside"] == []
    xmin, ymin, xmax, ymax = report["bbox"]
    assert xmin >= -1e-9 and xmax <= 100.0 + 1e-9
    assert ymin >= -1e-9 and ymax <= 100.0 + 1e-9


def test_sierpinski_five_points_in_bounds():
    pts = list(run("sierpinski-triangle", 5))
    assert len(pts) == 5
    for p in pts:
        assert 0.0 <= p.x <= 100.0
        assert 0.0 <= p.y <= 100.001


@pytest.mark.parametrize("name", list(PRESETS))
def test_seeded_runs_repeat(name):
    assert list(run(name, 200, random.Random(99))) == list(run(name, 200, random.Random(99)))


def test_unknown_preset():
    with pytest.raises(ValueError, match="foo is not yet implemented"):
        get_preset("foo")
    with pytest.raises(ValueError, match="foo is not yet implemented"):
        run("foo", 5)
