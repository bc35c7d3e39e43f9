"""
test_curve_cardinal.py
----------------------
Unit tests for chartshape.curve.cardinal
"""

import numpy as np
import pytest

from chartshape.curve import basis, cardinal
from chartshape.path import ClosePath, CubicTo, LineTo, MoveTo


TRIANGLE = [(0, 0), (1, 1), (2, 0)]
SQUARE = np.array([(0, 0), (1, 0), (1, 1), (0, 1)], dtype=float)


def test_cardinal_three_points():
    segments = cardinal.cardinal(TRIANGLE).segments()
    assert [type(s) for s in segments] == [MoveTo, CubicTo, CubicTo]
    np.testing.assert_allclose(segments[1], [(0, 0), (2/3, 1), (1, 1)])
    np.testing.assert_allclose(segments[2], [(4/3, 1), (2, 0), (2, 0)])


@pytest.mark.parametrize("curve", [cardinal.cardinal, cardinal.catmull_rom])
def test_interpolates_every_point(curve, zigzag):
    p = curve(zigzag)
    np.testing.assert_allclose(p.vertices(), zigzag)


def test_full_tension_is_straight():
    points = np.array([(0, 0), (1, 3), (2, -1), (4, 0)], dtype=float)
    for segment in cardinal.cardinal(points, tension=1).segments()[1:]:
        assert isinstance(segment, CubicTo)
    segments = cardinal.cardinal(points, tension=1).segments()
    starts = [s.point for s in segments[:-1]]
    for start, segment in zip(starts, segments[1:]):
        np.testing.assert_allclose(segment.control1, start)
        np.testing.assert_allclose(segment.control2, segment.point)


def test_tension_is_clamped(assert_paths_close, zigzag):
    assert_paths_close(cardinal.cardinal(zigzag, tension=3), cardinal.cardinal(zigzag, tension=1))
    assert_paths_close(cardinal.cardinal(zigzag, tension=-2), cardinal.cardinal(zigzag, tension=0))


def test_cardinal_open():
    points = [(0, 0), (1, 1), (2, 0), (3, 1)]
    segments = cardinal.cardinal_open(points).segments()
    assert [type(s) for s in segments] == [MoveTo, CubicTo]
    assert segments[0].point == (1, 1)
    assert segments[1].point == (2, 0)
    assert cardinal.cardinal_open(points[:3]).segments() == [MoveTo((1, 1))]
    assert len(cardinal.cardinal_open(points[:2])) == 0


@pytest.mark.parametrize("curve", [
    basis.basis_closed, cardinal.cardinal_closed, cardinal.catmull_rom_closed,
])
def test_closed_variants_form_loops(curve, zigzag):
    p = curve(zigzag)
    segments = p.segments()
    assert len(p) == 1
    assert p.is_closed()
    np.testing.assert_allclose(segments[-2].point, segments[0].point)


@pytest.mark.parametrize("curve", [
    basis.basis, cardinal.cardinal, cardinal.catmull_rom,
    basis.basis_open, cardinal.cardinal_open, cardinal.catmull_rom_open,
])
def test_open_and_default_variants_do_not_close(curve, zigzag):
    p = curve(zigzag)
    assert not p.is_closed()
    assert not np.allclose(p.vertices()[-1], p.vertices()[0])


def test_cardinal_closed_short_inputs():
    assert cardinal.cardinal_closed([(1, 1)]).segments() == [MoveTo((1, 1)), ClosePath()]
    assert cardinal.cardinal_closed([(0, 0), (1, 1)]).segments() == [MoveTo((1, 1)), LineTo((0, 0)), ClosePath()]


@pytest.mark.parametrize("alpha", [0.5, 1])
@pytest.mark.parametrize("curve, reference", [
    (cardinal.catmull_rom, cardinal.cardinal),
    (cardinal.catmull_rom_open, cardinal.cardinal_open),
    (cardinal.catmull_rom_closed, cardinal.cardinal_closed),
])
def test_catmull_rom_equals_cardinal_on_even_chords(curve, reference, alpha, assert_paths_close):
    assert_paths_close(curve(SQUARE, alpha=alpha), reference(SQUARE, tension=0))


def test_catmull_rom_alpha_zero_is_uniform(assert_paths_close):
    points = [(0, 0), (1, 8), (1.5, 0), (10, 1)]
    assert_paths_close(cardinal.catmull_rom(points, alpha=0), cardinal.cardinal(points, tension=0))
    assert_paths_close(cardinal.catmull_rom(points, alpha=-4), cardinal.cardinal(points, tension=0))


def test_catmull_rom_depends_on_alpha_for_uneven_chords(flatten):
    points = [(0, 0), (1, 8), (1.5, 0), (10, 1)]
    centripetal = flatten(cardinal.catmull_rom(points, alpha=0.5))
    chordal = flatten(cardinal.catmull_rom(points, alpha=1))
    assert not np.allclose(centripetal, chordal)


def test_catmull_rom_coincident_points_are_finite(flatten):
    points = [(0, 0), (0, 0), (1, 1), (1, 1), (2, 0)]
    for curve in (cardinal.catmull_rom, cardinal.catmull_rom_open, cardinal.catmull_rom_closed):
        assert np.isfinite(flatten(curve(points))).all()
