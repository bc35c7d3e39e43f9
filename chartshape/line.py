import numpy

from . import path

def _is_present(entry):
    if entry is None:
        return False
    return bool(numpy.isfinite(numpy.asarray(entry, dtype=float)).all())

def split_runs(entries):
    """Iterate over the maximal runs of present entries.

    An entry is a gap if it is None or contains a non-finite coordinate
    (e.g. a row of NaNs in a numpy array).

    Returns: iterator over float arrays, one per run, of shape (k,) + the
        shape of each entry."""
    run = []
    for entry in entries:
        if _is_present(entry):
            run.append(entry)
        elif run:
            yield numpy.array(run, dtype=float)
            run = []
    if run:
        yield numpy.array(run, dtype=float)

def _radial(run):
    """Map (angle, radius) rows to x, y."""
    return path.polar_to_cartesian(run[..., 0], run[..., 1])

def line(curve, points):
    """Draw the points with the given curve, starting a new sub-path after
    every gap.

    Parameters:
        curve: function mapping an array of points of shape (n, 2) to a Path,
            e.g. curve.interpolate.linear or
            functools.partial(curve.cardinal.cardinal, tension=0.5).
        points: sequence of (x, y) points or None for a gap.

    Returns: Path with one sub-path per run (a run of a single point is a lone
        MoveTo, which draws nothing).
    """
    result = path.Path()
    for run in split_runs(points):
        result = result + curve(run)
    return result

def line_radial(curve, points):
    """As line(), but each point is (angle, radius): angle in radians from 12
    o'clock, clockwise."""
    result = path.Path()
    for run in split_runs(points):
        result = result + curve(_radial(run))
    return result

def _outline(curve, baseline, topline):
    """One closed sub-path: the topline forward, then the baseline backward."""
    if len(topline) == 1:
        return path.Path([[path.MoveTo(path.point(*topline[0]))]])
    segments = [segment for segment in curve(topline).segments()
        if not isinstance(segment, path.ClosePath)]
    for segment in curve(baseline[::-1]).segments():
        if isinstance(segment, path.ClosePath):
            continue
        if isinstance(segment, path.MoveTo) and segments:
            segment = path.LineTo(segment.point)
        segments.append(segment)
    if not segments:
        return path.Path()
    segments.append(path.ClosePath())
    return path.Path([segments])

def area(curve, pairs):
    """Fill the region between a baseline and a topline.

    Parameters:
        curve: function mapping an array of points of shape (n, 2) to a Path.
        pairs: sequence of ((x0, y0), (x1, y1)) pairs, where (x0, y0) is on the
            baseline and (x1, y1) on the topline, or None for a gap.

    Returns: Path with one closed sub-path per run of present pairs: the
        curve through the topline points in order, continued by the curve
        through the baseline points in reverse order. A run of a single pair is
        a lone MoveTo, which draws nothing.
    """
    result = path.Path()
    for run in split_runs(pairs):
        result = result + _outline(curve, run[:, 0], run[:, 1])
    return result

def area_radial(curve, pairs):
    """As area(), but each pair is ((angle0, radius0), (angle1, radius1)), both
    in polar form and mapped to x, y independently."""
    result = path.Path()
    for run in split_runs(pairs):
        result = result + _outline(curve, _radial(run[:, 0]), _radial(run[:, 1]))
    return result
