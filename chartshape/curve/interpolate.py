import numpy
from scipy import linalg

from .. import path
from . import geometry

def linear(points):
    """Polyline through the points.

    Parameters:
        points: array of n points x,y; shape=(n,2)

    Returns: Path with one sub-path (none if there are no points)."""
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    segments = [geometry.move(points[0])]
    segments.extend(geometry.line_to(p) for p in points[1:])
    return path.Path([segments])

def linear_closed(points):
    """Closed polygon through the points."""
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    return path.Path([linear(points)[0] + (path.ClosePath(),)])

def _natural_controls(v):
    """Return the first and second Bezier control points of the n spans of the
    natural cubic spline through the n+1 rows of v.

    The continuity conditions on the first and second derivatives, with zero
    second derivative at both ends, give a tridiagonal system for the first
    control points, solved as a banded system in O(n)."""
    n = len(v) - 1
    banded = numpy.empty((3, n))
    banded[0] = 1 # super-diagonal (banded[0, 0] is unused)
    banded[1] = 4
    banded[1, 0] = 2
    banded[1, -1] = 7
    banded[2] = 1 # sub-diagonal (banded[2, -1] is unused)
    banded[2, -2] = 2
    rhs = 4*v[:-1] + 2*v[1:]
    rhs[0] = v[0] + 2*v[1]
    rhs[-1] = 8*v[n-1] + v[n]
    controls1 = linalg.solve_banded((1, 1), banded, rhs)
    controls2 = numpy.empty_like(controls1)
    controls2[:-1] = 2*v[1:-1] - controls1[1:]
    controls2[-1] = (v[n] + controls1[n-1]) / 2
    return controls1, controls2

def natural(points):
    """Natural cubic spline: C2-continuous through every point, with zero
    second derivative at both ends.

    Parameters:
        points: array of n points x,y; shape=(n,2)

    Returns: Path with one sub-path (none if there are no points)."""
    points = geometry.as_points(points)
    n = len(points)
    if n == 0:
        return path.Path()
    segments = [geometry.move(points[0])]
    if n == 2:
        segments.append(geometry.line_to(points[1]))
    elif n > 2:
        controls1, controls2 = _natural_controls(points)
        segments.extend(geometry.cubics(controls1, controls2, points[1:]))
    return path.Path([segments])

def _sign(values):
    return numpy.where(values < 0, -1, 1)

def _monotone_tangents(x, y):
    """Steffen's tangents for points monotonic in x.

    At interior points the tangent is limited so that each cubic span has no
    extremum except at the input points; the end tangents are the one-sided
    estimates from the adjacent interior tangent."""
    h = numpy.diff(x)
    with numpy.errstate(divide='ignore', invalid='ignore'):
        secants = numpy.diff(y) / h
        h0, h1 = h[:-1], h[1:]
        s0, s1 = secants[:-1], secants[1:]
        p = (s0*h1 + s1*h0) / (h0 + h1)
        interior = (_sign(s0) + _sign(s1)) * numpy.minimum(numpy.minimum(numpy.abs(s0), numpy.abs(s1)), 0.5*numpy.abs(p))
    interior = numpy.nan_to_num(interior, nan=0.0)
    first = (3*secants[0] - interior[0]) / 2 if h[0] else interior[0]
    last = (3*secants[-1] - interior[-1]) / 2 if h[-1] else interior[-1]
    return numpy.concatenate([[first], interior, [last]])

def _monotone(points):
    """Segments of the monotone curve, in the coordinates of points."""
    points = geometry.filter_dup_points(points)
    n = len(points)
    segments = [geometry.move(points[0])]
    if n == 2:
        segments.append(geometry.line_to(points[1]))
    elif n > 2:
        x, y = points.T
        tangents = _monotone_tangents(x, y)
        dx = (numpy.diff(x) / 3)[:, numpy.newaxis]
        controls1 = points[:-1] + dx * numpy.stack([numpy.ones(n-1), tangents[:-1]], axis=1)
        controls2 = points[1:] - dx * numpy.stack([numpy.ones(n-1), tangents[1:]], axis=1)
        segments.extend(geometry.cubics(controls1, controls2, points[1:]))
    return segments

def _swap_xy(segment):
    if isinstance(segment, path.CubicTo):
        return path.CubicTo(*(path.Point(p.y, p.x) for p in segment))
    return type(segment)(path.Point(segment.point.y, segment.point.x))

def monotone_x(points):
    """Cubic spline that preserves monotonicity in y, assuming the points are
    monotonic in x (Steffen, 1990). The curve never overshoots: its extrema
    fall only on input points. Consecutive coincident points are ignored."""
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    return path.Path([_monotone(points)])

def monotone_y(points):
    """As monotone_x with the roles of x and y exchanged: assumes the points
    are monotonic in y."""
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    return path.Path([[_swap_xy(segment) for segment in _monotone(points[:, ::-1])]])

def step(points, factor=0.5):
    """Piecewise constant function through the points.

    Parameters:
        points: array of n points x,y; shape=(n,2)
        factor: where in each interval the y-value changes, in [0, 1]:
            0 changes immediately (step-before), 1 at the next point
            (step-after), 0.5 half-way (step-middle). Clamped if out of range.

    Returns: Path with one sub-path (none if there are no points)."""
    factor = geometry.clamp_unit('factor', factor)
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    segments = [geometry.move(points[0])]
    for (x0, y0), (x, y) in zip(points[:-1], points[1:]):
        if factor <= 0:
            segments.append(geometry.line_to((x0, y)))
            segments.append(geometry.line_to((x, y)))
        else:
            x1 = x0 * (1 - factor) + x * factor
            segments.append(geometry.line_to((x1, y0)))
            segments.append(geometry.line_to((x1, y)))
    if 0 < factor < 1 and len(points) > 1:
        segments.append(geometry.line_to(points[-1]))
    return path.Path([segments])

def step_before(points):
    """Step function changing y at the start of each interval."""
    return step(points, factor=0)

def step_after(points):
    """Step function changing y at the end of each interval."""
    return step(points, factor=1)

def _bump(points, horizontal):
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    starts, ends = points[:-1], points[1:]
    controls1 = starts.copy()
    controls2 = ends.copy()
    axis = 0 if horizontal else 1
    middle = (starts[:, axis] + ends[:, axis]) / 2
    controls1[:, axis] = middle
    controls2[:, axis] = middle
    segments = [geometry.move(points[0])]
    segments.extend(geometry.cubics(controls1, controls2, ends))
    return path.Path([segments])

def bump_x(points):
    """One cubic Bezier per pair of points, with horizontal tangents at both
    ends (control points at the horizontal midpoint)."""
    return _bump(points, horizontal=True)

def bump_y(points):
    """One cubic Bezier per pair of points, with vertical tangents at both
    ends (control points at the vertical midpoint)."""
    return _bump(points, horizontal=False)
