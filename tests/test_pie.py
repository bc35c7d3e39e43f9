"""
test_pie.py
-----------
Unit tests for chartshape.pie
"""

import logging
import math

import pytest

from chartshape import pie
from chartshape.path import TAU
from chartshape.pie import DEFAULT_PIE_CONFIG, PieConfig


def _spans(arcs):
    return [a.end_angle - a.start_angle for a in arcs]


def test_proportional_spans():
    arcs = pie.pie(DEFAULT_PIE_CONFIG, [1, 1, 2])
    assert _spans(arcs) == pytest.approx([math.pi / 2, math.pi / 2, math.pi])
    assert arcs[0].start_angle == 0
    assert arcs[-1].end_angle == TAU
    for previous, current in zip(arcs, arcs[1:]):
        assert current.start_angle == previous.end_angle


def test_empty_data():
    assert pie.pie(DEFAULT_PIE_CONFIG, []) == []


def test_radii_are_copied():
    config = PieConfig(inner_radius=20, outer_radius=230, corner_radius=4, pad_radius=100)
    for a in pie.pie(config, [3, 4]):
        assert (a.inner_radius, a.outer_radius, a.corner_radius, a.pad_radius) == (20, 230, 4, 100)


def test_sorted_angles_keep_input_order():
    config = PieConfig(sort=lambda a, b: b - a)
    arcs = pie.pie(config, [1, 3, 2])
    assert arcs[1].start_angle == 0
    assert arcs[2].start_angle == pytest.approx(arcs[1].end_angle)
    assert arcs[0].start_angle == pytest.approx(arcs[2].end_angle)
    assert arcs[0].end_angle == TAU
    assert _spans(arcs) == pytest.approx([TAU / 6, TAU / 2, TAU / 3])


def test_sort_is_stable():
    data = [('a', 2), ('b', 1), ('c', 1), ('d', 2)]
    config = PieConfig(value=lambda d: d[1], sort=lambda x, y: x[1] - y[1])
    arcs = pie.pie(config, data)
    order = sorted(range(len(data)), key=lambda i: arcs[i].start_angle)
    assert [data[i][0] for i in order] == ['b', 'c', 'a', 'd']


def test_padding():
    config = DEFAULT_PIE_CONFIG._replace(pad_angle=0.1)
    arcs = pie.pie(config, [1, 1, 1, 1])
    assert all(a.pad_angle == 0.1 for a in arcs)
    assert _spans(arcs) == pytest.approx([TAU / 4] * 4)
    assert arcs[-1].end_angle == TAU


def test_padding_limited_to_available_span():
    arcs = pie.pie(PieConfig(pad_angle=10), [1, 2])
    assert all(a.pad_angle == pytest.approx(math.pi) for a in arcs)
    assert _spans(arcs) == pytest.approx([math.pi, math.pi])


def test_span_is_clamped_to_a_turn():
    arcs = pie.pie(PieConfig(start_angle=1, end_angle=100), [1, 1])
    assert arcs[-1].end_angle == pytest.approx(1 + TAU)


def test_counterclockwise_pie():
    arcs = pie.pie(PieConfig(start_angle=0, end_angle=-math.pi), [1, 1])
    assert _spans(arcs) == pytest.approx([-math.pi / 2, -math.pi / 2])
    assert arcs[1].end_angle == -math.pi


def test_non_positive_values_get_no_span():
    arcs = pie.pie(DEFAULT_PIE_CONFIG, [-1, 0, 2])
    assert _spans(arcs) == pytest.approx([0, 0, TAU])


def test_no_positive_values_share_the_span_evenly():
    arcs = pie.pie(PieConfig(pad_angle=0.1), [0, 0])
    assert _spans(arcs) == pytest.approx([math.pi, math.pi])
    assert arcs[-1].end_angle == TAU
    arcs = pie.pie(DEFAULT_PIE_CONFIG, [-1, 0, -3])
    assert _spans(arcs) == pytest.approx([TAU / 3] * 3)
    assert arcs[0].start_angle == 0
    assert arcs[-1].end_angle == TAU


def test_span_clamping_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger='chartshape')
    pie.pie(PieConfig(end_angle=10), [1])
    assert any(r.name == 'chartshape.pie' and 'clamped' in r.getMessage() for r in caplog.records)
