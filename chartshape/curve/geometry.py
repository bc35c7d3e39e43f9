import logging

import numpy

from .. import path

logger = logging.getLogger(__name__)

def as_points(points):
    """Return the input as a float array of shape (n, 2).

    An empty input gives an array of shape (0, 2)."""
    points = numpy.array(points, dtype=float)
    if points.size == 0:
        return points.reshape(0, 2)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError('Expected an array of 2D points with shape (n, 2), got shape {}.'.format(points.shape))
    return points

def clamp_unit(name, value):
    """Clamp a curve tuning parameter into [0, 1]."""
    clamped = min(1.0, max(0.0, float(value)))
    if clamped != value:
        logger.debug('%s=%r clamped to %r', name, value, clamped)
    return clamped

def filter_dup_points(points):
    """Return a polyline with no exactly-repeated consecutive points."""
    points = as_points(points)
    if len(points) < 2:
        return points
    keep = numpy.concatenate([[True], (points[1:] != points[:-1]).any(axis=1)])
    return points[keep]

def cubics(controls1, controls2, ends):
    """Return CubicTo segments for arrays of first controls, second controls
    and end points, each of shape (n, 2)."""
    return [path.CubicTo(path.point(*c1), path.point(*c2), path.point(*e))
        for c1, c2, e in zip(controls1, controls2, ends)]

def move(p):
    return path.MoveTo(path.point(*p))

def line_to(p):
    return path.LineTo(path.point(*p))
