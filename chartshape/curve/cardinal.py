import numpy

from .. import path
from . import geometry

def _windows(points, indices):
    """Split points[indices] (shape (m, 4)) into the four window arrays
    a, b, c, d, each of shape (m, 2). Each window draws the span from b to c."""
    return numpy.moveaxis(points[indices], 1, 0)

def _consecutive(n):
    return numpy.arange(n - 3)[:, numpy.newaxis] + numpy.arange(4)

def _cyclic(n):
    # spans p1->p2, ..., p(n-1)->p0, p0->p1
    return (numpy.arange(n)[:, numpy.newaxis] + numpy.arange(4)) % n

def _hermite_cubics(a, b, c, d, tension):
    k = (1 - tension) / 6
    return geometry.cubics(b + k*(c - a), c + k*(b - d), c)

def _short_paths(points, closed):
    """Sub-path for inputs too short for a spline, or None."""
    n = len(points)
    if closed:
        if n == 1:
            return [geometry.move(points[0]), path.ClosePath()]
        if n == 2:
            return [geometry.move(points[1]), geometry.line_to(points[0]), path.ClosePath()]
    else:
        if n == 1:
            return [geometry.move(points[0])]
        if n == 2:
            return [geometry.move(points[0]), geometry.line_to(points[1])]
    return None

def cardinal(points, tension=0):
    """Cardinal spline passing through every point.

    Each span is a cubic Hermite segment whose tangent at an interior point is
    (1 - tension) * (p[i+1] - p[i-1]) / 2. At the first and last points the
    tangents are one-sided.

    Parameters:
        points: array of n points x,y; shape=(n,2)
        tension: value in [0, 1]. 0 gives a uniform Catmull-Rom spline, 1
            gives straight lines (all tangents zero). Clamped if out of range.

    Returns: Path with one sub-path (none if there are no points).
    """
    tension = geometry.clamp_unit('tension', tension)
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    segments = _short_paths(points, closed=False)
    if segments is None:
        # reflect the neighbours so the end tangents only see one side
        padded = numpy.concatenate([points[1:2], points, points[-2:-1]])
        segments = [geometry.move(points[0])]
        segments.extend(_hermite_cubics(*_windows(padded, _consecutive(len(padded))), tension))
    return path.Path([segments])

def cardinal_open(points, tension=0):
    """Cardinal spline without the end spans: the curve starts at the second
    point and ends at the penultimate one. Fewer than three points draw nothing."""
    tension = geometry.clamp_unit('tension', tension)
    points = geometry.as_points(points)
    if len(points) < 3:
        return path.Path()
    segments = [geometry.move(points[1])]
    segments.extend(_hermite_cubics(*_windows(points, _consecutive(len(points))), tension))
    return path.Path([segments])

def cardinal_closed(points, tension=0):
    """Closed cardinal spline: tangents wrap around cyclically and the loop
    starts and ends at the second point."""
    tension = geometry.clamp_unit('tension', tension)
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    segments = _short_paths(points, closed=True)
    if segments is None:
        segments = [geometry.move(points[1])]
        segments.extend(_hermite_cubics(*_windows(points, _cyclic(len(points))), tension))
        segments.append(path.ClosePath())
    return path.Path([segments])

def _catmull_rom_cubics(a, b, c, d, alpha):
    """Bezier controls for Catmull-Rom spans with chord lengths raised to alpha
    (Yuksel, Schaefer & Keyser, 2011). A zero-length chord next to a span
    leaves that span's control point on its end point."""
    l01_2a = ((a - b)**2).sum(axis=1)**alpha
    l12_2a = ((b - c)**2).sum(axis=1)**alpha
    l23_2a = ((c - d)**2).sum(axis=1)**alpha
    l01_a, l12_a, l23_a = numpy.sqrt(l01_2a), numpy.sqrt(l12_2a), numpy.sqrt(l23_2a)
    use1 = (l01_a > path.EPSILON)[:, numpy.newaxis]
    use2 = (l23_a > path.EPSILON)[:, numpy.newaxis]
    with numpy.errstate(divide='ignore', invalid='ignore'):
        aa = (2*l01_2a + 3*l01_a*l12_a + l12_2a)[:, numpy.newaxis]
        nn = (3*l01_a*(l01_a + l12_a))[:, numpy.newaxis]
        controls1 = (b*aa - a*l12_2a[:, numpy.newaxis] + c*l01_2a[:, numpy.newaxis]) / nn
        bb = (2*l23_2a + 3*l23_a*l12_a + l12_2a)[:, numpy.newaxis]
        mm = (3*l23_a*(l23_a + l12_a))[:, numpy.newaxis]
        controls2 = (c*bb + b*l23_2a[:, numpy.newaxis] - d*l12_2a[:, numpy.newaxis]) / mm
    controls1 = numpy.where(use1, controls1, b)
    controls2 = numpy.where(use2, controls2, c)
    return geometry.cubics(controls1, controls2, c)

def catmull_rom(points, alpha=0.5):
    """Catmull-Rom spline passing through every point.

    Parameters:
        points: array of n points x,y; shape=(n,2)
        alpha: chord-length exponent in [0, 1]. 0 is the uniform spline
            (identical to cardinal with tension 0), 0.5 the centripetal spline
            (which avoids cusps and self-intersections on unevenly-spaced
            points), 1 the chordal spline. Clamped if out of range.

    Returns: Path with one sub-path (none if there are no points).
    """
    alpha = geometry.clamp_unit('alpha', alpha)
    if alpha == 0:
        return cardinal(points, tension=0)
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    segments = _short_paths(points, closed=False)
    if segments is None:
        # repeated end points have zero chord length: one-sided end tangents
        padded = numpy.concatenate([points[:1], points, points[-1:]])
        segments = [geometry.move(points[0])]
        segments.extend(_catmull_rom_cubics(*_windows(padded, _consecutive(len(padded))), alpha))
    return path.Path([segments])

def catmull_rom_open(points, alpha=0.5):
    """Catmull-Rom spline from the second to the penultimate point."""
    alpha = geometry.clamp_unit('alpha', alpha)
    if alpha == 0:
        return cardinal_open(points, tension=0)
    points = geometry.as_points(points)
    if len(points) < 3:
        return path.Path()
    segments = [geometry.move(points[1])]
    segments.extend(_catmull_rom_cubics(*_windows(points, _consecutive(len(points))), alpha))
    return path.Path([segments])

def catmull_rom_closed(points, alpha=0.5):
    """Closed Catmull-Rom spline, starting and ending at the second point."""
    alpha = geometry.clamp_unit('alpha', alpha)
    if alpha == 0:
        return cardinal_closed(points, tension=0)
    points = geometry.as_points(points)
    if len(points) == 0:
        return path.Path()
    segments = _short_paths(points, closed=True)
    if segments is None:
        segments = [geometry.move(points[1])]
        segments.extend(_catmull_rom_cubics(*_windows(points, _cyclic(len(points))), alpha))
        segments.append(path.ClosePath())
    return path.Path([segments])
