import numpy

from .. import path
from . import geometry

def _basis_cubics(a, b, c):
    """Return the Bezier form of uniform cubic B-spline spans.

    Each row of a, b, c is a consecutive triple of control points; the span
    runs from the on-curve point of the previous triple to (a + 4b + c)/6."""
    controls1 = (2*a + b) / 3
    controls2 = (a + 2*b) / 3
    ends = (a + 4*b + c) / 6
    return geometry.cubics(controls1, controls2, ends)

def basis(points):
    """Cubic uniform B-spline through the first and last points.

    The end points are triplicated, so the curve starts at the first point
    tangent to the first chord and ends at the last point tangent to the last
    chord. The interior points are control points, not interpolated.

    Parameters:
        points: array of n points x,y; shape=(n,2)

    Returns: Path with one sub-path (none if there are no points).
    """
    points = geometry.as_points(points)
    n = len(points)
    if n == 0:
        return path.Path()
    segments = [geometry.move(points[0])]
    if n == 2:
        segments.append(geometry.line_to(points[1]))
    elif n > 2:
        padded = numpy.concatenate([points, points[-1:]])
        segments.append(geometry.line_to((5*points[0] + points[1]) / 6))
        segments.extend(_basis_cubics(padded[:-2], padded[1:-1], padded[2:]))
        segments.append(geometry.line_to(points[-1]))
    return path.Path([segments])

def basis_open(points):
    """Cubic uniform B-spline with no repeated end points: the curve does not
    reach the first and last points. Fewer than three points draw nothing."""
    points = geometry.as_points(points)
    if len(points) < 3:
        return path.Path()
    segments = [geometry.move((points[0] + 4*points[1] + points[2]) / 6)]
    segments.extend(_basis_cubics(points[1:-2], points[2:-1], points[3:]))
    return path.Path([segments])

def basis_closed(points):
    """Closed cubic uniform B-spline: the control points wrap around, giving a
    C2-continuous loop that ends exactly where it started."""
    points = geometry.as_points(points)
    n = len(points)
    if n == 0:
        return path.Path()
    if n == 1:
        segments = [geometry.move(points[0])]
    elif n == 2:
        segments = [geometry.move((points[0] + 2*points[1]) / 3),
                    geometry.line_to((points[1] + 2*points[0]) / 3)]
    else:
        segments = [geometry.move((points[0] + 4*points[1] + points[2]) / 6)]
        triples = (numpy.arange(1, n+1)[:, numpy.newaxis] + numpy.arange(3)) % n
        a, b, c = numpy.moveaxis(points[triples], 1, 0)
        segments.extend(_basis_cubics(a, b, c))
    segments.append(path.ClosePath())
    return path.Path([segments])

def bundle(points, beta=0.85):
    """Straightened open B-spline.

    Every point is pulled toward the straight line from the first to the last
    point before the basis_open blending is applied:
        p' = beta * p + (1 - beta) * (p0 + t * (pn - p0)), t = i / (n-1)

    Parameters:
        points: array of n points x,y; shape=(n,2)
        beta: straightening in [0, 1]. 1 gives the unmodified basis_open
            curve; 0 a straight line. Out-of-range values are clamped.

    Bundles are intended for hierarchical edge bundling rather than for
    bounding an area.
    """
    beta = geometry.clamp_unit('beta', beta)
    points = geometry.as_points(points)
    n = len(points)
    if n < 2:
        return path.Path()
    t = numpy.linspace(0, 1, n)[:, numpy.newaxis]
    chord = points[0] + t * (points[-1] - points[0])
    return basis_open(beta * points + (1 - beta) * chord)
