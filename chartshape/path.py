import collections
import math

import numpy

TAU = 2 * math.pi
EPSILON = 1e-12

Point = collections.namedtuple('Point', 'x y')

MoveTo = collections.namedtuple('MoveTo', 'point')
LineTo = collections.namedtuple('LineTo', 'point')
CubicTo = collections.namedtuple('CubicTo', 'control1 control2 point')
ArcTo = collections.namedtuple('ArcTo', 'center radius start_angle end_angle counterclockwise')
ClosePath = collections.namedtuple('ClosePath', '')

def point(x, y):
    """Return a Point of python floats (numpy scalars are converted)."""
    return Point(float(x), float(y))

def polar_to_cartesian(angle, radius):
    """Convert an angle (radians, 0 = -y axis, positive = clockwise) and radius
    into x, y coordinates.

    Works on scalars or arrays; for arrays the result has shape (n, 2)."""
    angle = numpy.asarray(angle, dtype=float)
    radius = numpy.asarray(radius, dtype=float)
    xy = numpy.stack([radius * numpy.sin(angle), -radius * numpy.cos(angle)], axis=-1)
    if xy.ndim == 1:
        return point(*xy)
    return xy

def normalize_angle(angle):
    """Wrap an angle into the range [0, tau)."""
    angle = math.fmod(angle, TAU)
    if angle < 0:
        angle += TAU
    return angle

def arc_point(center, radius, angle):
    """Return the point at the given drawing-convention angle (0 = +x axis,
    positive toward +y) on a circle."""
    return point(center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))

def end_point(segment, start):
    """Return the point where a segment leaves the pen.

    Parameters:
        segment: MoveTo, LineTo, CubicTo, ArcTo or ClosePath record.
        start: the first point of the enclosing sub-path, which is where a
            ClosePath returns to.
    """
    if isinstance(segment, ClosePath):
        return start
    if isinstance(segment, ArcTo):
        return arc_point(segment.center, segment.radius, segment.end_angle)
    return segment.point


class Path:
    def __init__(self, subpaths=()):
        """Immutable sequence of sub-paths.

        Each sub-path is a non-empty sequence of segments whose first segment
        is a MoveTo. Empty sub-paths are dropped.

        p = Path([[MoveTo(Point(0, 0)), LineTo(Point(1, 1))]])
        len(p) == 1 # one sub-path
        """
        subpaths = tuple(tuple(subpath) for subpath in subpaths)
        for subpath in subpaths:
            if subpath and not isinstance(subpath[0], MoveTo):
                raise ValueError('Every sub-path must start with a MoveTo, not {}.'.format(type(subpath[0]).__name__))
        self._subpaths = tuple(subpath for subpath in subpaths if subpath)

    @property
    def subpaths(self):
        return self._subpaths

    def __iter__(self):
        return iter(self._subpaths)

    def __len__(self):
        return len(self._subpaths)

    def __getitem__(self, i):
        return self._subpaths[i]

    def __add__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self._subpaths + other._subpaths)

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._subpaths == other._subpaths

    def __hash__(self):
        return hash(self._subpaths)

    def __repr__(self):
        return 'Path({!r})'.format(list(map(list, self._subpaths)))

    def segments(self):
        """Return all segments of all sub-paths as one flat list."""
        return [segment for subpath in self._subpaths for segment in subpath]

    def vertices(self, i=None):
        """Return the points at which each segment ends.

        Parameters:
            i: index of the sub-path to report, or None for all of them
                concatenated.

        Returns: array of shape (n, 2). A ClosePath contributes the sub-path's
            starting point, so a closed loop's first and last vertices coincide.
        """
        subpaths = self._subpaths if i is None else [self._subpaths[i]]
        vertices = []
        for subpath in subpaths:
            start = subpath[0].point
            vertices.extend(end_point(segment, start) for segment in subpath)
        return numpy.array(vertices, dtype=float).reshape(-1, 2)

    def is_closed(self, i=0):
        """True if sub-path i ends with a ClosePath."""
        return isinstance(self._subpaths[i][-1], ClosePath)

    def is_visible(self):
        """True if any sub-path draws something: a line, curve or arc rather
        than a lone MoveTo (optionally followed by a ClosePath)."""
        return any(isinstance(segment, (LineTo, CubicTo, ArcTo)) for segment in self.segments())
