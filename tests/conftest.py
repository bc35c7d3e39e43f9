"""
conftest.py
-----------
Shared pytest fixtures for path geometry tests.
"""

import numpy as np
import pytest

from chartshape import path


def _flatten(p):
    """All numbers carried by a Path's segments, in order, as one float array."""
    values = []
    for segment in p.segments():
        if isinstance(segment, path.ArcTo):
            values.extend([*segment.center, segment.radius, segment.start_angle, segment.end_angle])
        else:
            for field in segment:
                values.extend(field)
    return np.array(values, dtype=float)


@pytest.fixture
def flatten():
    """Return a function flattening a Path into an array of coordinates."""
    return _flatten


@pytest.fixture
def assert_paths_close():
    """Return a function asserting two Paths have the same segment structure
    and numerically close coordinates."""
    def check(actual, expected, atol=1e-9):
        assert [type(s) for s in actual.segments()] == [type(s) for s in expected.segments()]
        assert [len(sp) for sp in actual] == [len(sp) for sp in expected]
        np.testing.assert_allclose(_flatten(actual), _flatten(expected), atol=atol)
    return check


@pytest.fixture
def zigzag():
    """Points of equal chord length (5) alternating up and down."""
    return np.array([(0, 0), (3, 4), (6, 0), (9, 4), (12, 0)], dtype=float)
