import collections
import logging
import math

from . import path
from .path import EPSILON, TAU

logger = logging.getLogger(__name__)

HALF_PI = math.pi / 2

ArcSpec = collections.namedtuple('ArcSpec',
    'inner_radius outer_radius corner_radius start_angle end_angle pad_angle pad_radius',
    defaults=(0, 100, 0, 0, TAU, 0, 0))
ArcSpec.__doc__ = """Annular sector description.

Angles are in radians, with 0 at -y (12 o'clock) and positive angles going
clockwise. A pad_radius of 0 means sqrt(inner_radius**2 + outer_radius**2).
Negative radii are treated as 0 and inverted inner/outer radii are swapped."""

CornerTangents = collections.namedtuple('CornerTangents', 'cx cy x01 y01 x11 y11')


class _Pen:
    """Accumulate the segments of a single sub-path, tracking the pen
    position so that arcs are joined to the previous segment by a straight
    line when they do not start where the pen is."""
    def __init__(self):
        self.segments = []
        self.current = None

    def move_to(self, x, y):
        self.current = path.point(x, y)
        self.segments.append(path.MoveTo(self.current))

    def line_to(self, x, y):
        self.current = path.point(x, y)
        self.segments.append(path.LineTo(self.current))

    def arc(self, cx, cy, r, start_angle, end_angle, counterclockwise):
        start = path.arc_point((cx, cy), r, start_angle)
        if self.current is None:
            self.move_to(*start)
        elif abs(self.current.x - start.x) > EPSILON or abs(self.current.y - start.y) > EPSILON:
            self.line_to(*start)
        if r <= EPSILON:
            return
        segment = path.ArcTo(path.point(cx, cy), float(r), float(start_angle), float(end_angle), bool(counterclockwise))
        self.segments.append(segment)
        self.current = path.end_point(segment, None)

    def close(self):
        self.segments.append(path.ClosePath())
        return path.Path([self.segments])


def _asin(x):
    return HALF_PI if x >= 1 else -HALF_PI if x <= -1 else math.asin(x)

def _acos(x):
    return 0 if x > 1 else math.pi if x < -1 else math.acos(x)

def _pad_angle(pad_radius, radius, half_pad):
    """Angle subtended at a ring of the given radius by half the linear pad
    distance."""
    if radius <= 0:
        return HALF_PI
    return _asin(pad_radius / radius * math.sin(half_pad))

def _intersect(x0, y0, x1, y1, x2, y2, x3, y3):
    """Intersection of the lines through (x0, y0)-(x1, y1) and
    (x2, y2)-(x3, y3), or None if they are parallel."""
    x10, y10 = x1 - x0, y1 - y0
    x32, y32 = x3 - x2, y3 - y2
    t = y32 * x10 - x32 * y10
    if t * t < EPSILON:
        return None
    t = (x32 * (y0 - y2) - y32 * (x0 - x2)) / t
    return x0 + t * x10, y0 + t * y10

def _corner_tangents(x0, y0, x1, y1, r1, rc, cw):
    """Find the center of the circle of radius |rc| tangent both to the line
    (x0, y0)-(x1, y1) and, internally, to the ring of radius r1; return it with
    the offsets from that center to the two tangent points."""
    x01, y01 = x0 - x1, y0 - y1
    lo = (rc if cw else -rc) / math.sqrt(x01 * x01 + y01 * y01)
    ox, oy = lo * y01, -lo * x01
    x11, y11 = x0 + ox, y0 + oy
    x10, y10 = x1 + ox, y1 + oy
    x00, y00 = (x11 + x10) / 2, (y11 + y10) / 2
    dx, dy = x10 - x11, y10 - y11
    d2 = dx * dx + dy * dy
    r = r1 - rc
    big_d = x11 * y10 - x10 * y11
    d = (-1 if dy < 0 else 1) * math.sqrt(max(0, r * r * d2 - big_d * big_d))
    cx0 = (big_d * dy - dx * d) / d2
    cy0 = (-big_d * dx - dy * d) / d2
    cx1 = (big_d * dy + dx * d) / d2
    cy1 = (-big_d * dx + dy * d) / d2
    # of the two line/circle intersections, keep the one nearer the segment
    if (cx0 - x00)**2 + (cy0 - y00)**2 > (cx1 - x00)**2 + (cy1 - y00)**2:
        cx0, cy0 = cx1, cy1
    return CornerTangents(cx0, cy0, -ox, -oy, cx0 * (r1 / r - 1), cy0 * (r1 / r - 1))

def _limit_corner(rc, numerator, denominator):
    if denominator == 0:
        return rc if numerator >= 0 else 0
    return min(rc, numerator / denominator)

def _restrict_corner_radius(rc, r0, r1, x01, y01, x00, y00, x11, y11, x10, y10):
    """Reduce the corner radius of a sector narrower than a half-turn so that
    the two fillets on each ring do not overlap.

    The two radial edges meet at oc; a fillet of radius rc tangent to both
    edges sits at distance rc * kc from oc, where kc = 1/sin(theta/2) for the
    angle theta between the edges. Returns the inner and outer corner radii,
    or zeros if the edges are parallel."""
    oc = _intersect(x01, y01, x00, y00, x11, y11, x10, y10)
    if oc is None:
        return 0, 0
    ax, ay = x01 - oc[0], y01 - oc[1]
    bx, by = x11 - oc[0], y11 - oc[1]
    norm = math.sqrt(ax * ax + ay * ay) * math.sqrt(bx * bx + by * by)
    if norm == 0:
        return 0, 0
    half_sin = math.sin(_acos((ax * bx + ay * by) / norm) / 2)
    if half_sin == 0:
        return 0, 0
    kc = 1 / half_sin
    lc = math.sqrt(oc[0] * oc[0] + oc[1] * oc[1])
    return _limit_corner(rc, r0 - lc, kc - 1), _limit_corner(rc, r1 - lc, kc + 1)

def _normalized_radii(spec):
    r0 = max(0.0, float(spec.inner_radius))
    r1 = max(0.0, float(spec.outer_radius))
    if r0 != spec.inner_radius or r1 != spec.outer_radius:
        logger.debug('negative radii clamped to 0: inner=%r outer=%r', spec.inner_radius, spec.outer_radius)
    if r1 < r0:
        logger.debug('inner radius %r exceeds outer radius %r: swapped', r0, r1)
        r0, r1 = r1, r0
    return r0, r1

def arc(spec):
    """Return the outline of an annular (or circular) sector as a Path.

    Parameters:
        spec: ArcSpec describing the sector.

    Returns: Path with a single closed sub-path for a sector; for a full
        turn (|end_angle - start_angle| >= tau) the outer circle, plus the inner
        circle as a second closed sub-path if the sector is annular.

    Padding removes pad_radius * pad_angle of arc length, half from each side
    of the sector. If a ring is too short to be padded it collapses to its
    mid-angle point, so a thin annular sector degrades to a wedge instead of
    self-intersecting. Rounded corners are limited to half the ring thickness,
    and, for sectors narrower than a half-turn, to the radius at which the two
    corners on a ring meet.
    """
    r0, r1 = _normalized_radii(spec)
    a0 = spec.start_angle - HALF_PI
    a1 = spec.end_angle - HALF_PI
    da = abs(a1 - a0)
    cw = a1 > a0
    pen = _Pen()

    # a point
    if not r1 > EPSILON:
        pen.move_to(0, 0)
        return pen.close()

    # a circle or annulus
    if da > TAU - EPSILON:
        turn = TAU if cw else -TAU
        pen.arc(0, 0, r1, a0, a0 + turn, not cw)
        circle = pen.close()
        if r0 > EPSILON:
            pen = _Pen()
            pen.arc(0, 0, r0, a0 + turn, a0, cw)
            circle = circle + pen.close()
        return circle

    a01, a11, a00, a10 = a0, a1, a0, a1
    da0 = da1 = da
    ap = max(0.0, float(spec.pad_angle)) / 2
    rp = 0.0
    if ap > EPSILON:
        rp = float(spec.pad_radius) if spec.pad_radius else math.sqrt(r0 * r0 + r1 * r1)
    rc = min(abs(r1 - r0) / 2, max(0.0, float(spec.corner_radius)))
    if rc < spec.corner_radius:
        logger.debug('corner radius %r reduced to %r (ring thickness %r)', spec.corner_radius, rc, r1 - r0)
    rc0 = rc1 = rc

    # padding: since r1 >= r0, the outer ring always keeps at least as much span
    if rp > EPSILON:
        direction = 1 if cw else -1
        p0 = _pad_angle(rp, r0, ap)
        p1 = _pad_angle(rp, r1, ap)
        da0 -= p0 * 2
        if da0 > EPSILON:
            a00 += p0 * direction
            a10 -= p0 * direction
        else:
            da0 = 0
            a00 = a10 = (a0 + a1) / 2
        da1 -= p1 * 2
        if da1 > EPSILON:
            a01 += p1 * direction
            a11 -= p1 * direction
        else:
            da1 = 0
            a01 = a11 = (a0 + a1) / 2

    x01, y01 = r1 * math.cos(a01), r1 * math.sin(a01)
    x10, y10 = r0 * math.cos(a10), r0 * math.sin(a10)
    x11, y11 = r1 * math.cos(a11), r1 * math.sin(a11)
    x00, y00 = r0 * math.cos(a00), r0 * math.sin(a00)

    if rc > EPSILON and da < math.pi:
        rc0, rc1 = _restrict_corner_radius(rc, r0, r1, x01, y01, x00, y00, x11, y11, x10, y10)
        if (rc0, rc1) != (rc, rc):
            logger.debug('corner radius %r limited to inner=%r outer=%r by the sector angle', rc, rc0, rc1)

    # outer ring
    if not da1 > EPSILON:
        pen.move_to(x01, y01)
    elif rc1 > EPSILON:
        t0 = _corner_tangents(x00, y00, x01, y01, r1, rc1, cw)
        t1 = _corner_tangents(x11, y11, x10, y10, r1, rc1, cw)
        pen.move_to(t0.cx + t0.x01, t0.cy + t0.y01)
        if rc1 < rc:
            # the two corners have merged
            pen.arc(t0.cx, t0.cy, rc1, math.atan2(t0.y01, t0.x01), math.atan2(t1.y01, t1.x01), not cw)
        else:
            pen.arc(t0.cx, t0.cy, rc1, math.atan2(t0.y01, t0.x01), math.atan2(t0.y11, t0.x11), not cw)
            pen.arc(0, 0, r1, math.atan2(t0.cy + t0.y11, t0.cx + t0.x11), math.atan2(t1.cy + t1.y11, t1.cx + t1.x11), not cw)
            pen.arc(t1.cx, t1.cy, rc1, math.atan2(t1.y11, t1.x11), math.atan2(t1.y01, t1.x01), not cw)
    else:
        pen.move_to(x01, y01)
        pen.arc(0, 0, r1, a01, a11, not cw)

    # inner ring: a wedge (or an annular sector collapsed by padding) ends at a point
    if not r0 > EPSILON or not da0 > EPSILON:
        pen.line_to(x10, y10)
    elif rc0 > EPSILON:
        t0 = _corner_tangents(x10, y10, x11, y11, r0, -rc0, cw)
        t1 = _corner_tangents(x01, y01, x00, y00, r0, -rc0, cw)
        pen.line_to(t0.cx + t0.x01, t0.cy + t0.y01)
        if rc0 < rc:
            pen.arc(t0.cx, t0.cy, rc0, math.atan2(t0.y01, t0.x01), math.atan2(t1.y01, t1.x01), not cw)
        else:
            pen.arc(t0.cx, t0.cy, rc0, math.atan2(t0.y01, t0.x01), math.atan2(t0.y11, t0.x11), not cw)
            pen.arc(0, 0, r0, math.atan2(t0.cy + t0.y11, t0.cx + t0.x11), math.atan2(t1.cy + t1.y11, t1.cx + t1.x11), cw)
            pen.arc(t1.cx, t1.cy, rc0, math.atan2(t1.y11, t1.x11), math.atan2(t1.y01, t1.x01), not cw)
    else:
        pen.arc(0, 0, r0, a10, a00, cw)

    return pen.close()

def centroid(spec):
    """Return the midpoint of the sector: the point at the mean of the start
    and end angles and the mean of the inner and outer radii. Corner radius
    and padding have no effect."""
    r0, r1 = _normalized_radii(spec)
    return path.polar_to_cartesian((spec.start_angle + spec.end_angle) / 2, (r0 + r1) / 2)
