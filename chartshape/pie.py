import collections
import functools
import logging

from . import arc
from .path import TAU

logger = logging.getLogger(__name__)

def _identity(datum):
    return datum

PieConfig = collections.namedtuple('PieConfig',
    'start_angle end_angle pad_angle sort value inner_radius outer_radius corner_radius pad_radius',
    defaults=(0, TAU, 0, None, _identity, 0, 100, 0, 0))
PieConfig.__doc__ = """Pie layout configuration.

Fields:
    start_angle, end_angle: angular extent of the whole pie, in radians
        (0 = 12 o'clock, clockwise positive). Spans beyond a full turn are
        clamped to one turn.
    pad_angle: angular gap between adjacent slices.
    sort: None to lay slices out in input order, or a three-way comparator
        sort(a, b) -> negative/0/positive over the data. Ties keep input order.
    value: function mapping a datum to its numeric weight.
    inner_radius, outer_radius, corner_radius, pad_radius: copied into every
        produced ArcSpec.

Use keyword overrides on the defaults, e.g. PieConfig(outer_radius=230), or
DEFAULT_PIE_CONFIG._replace(pad_angle=0.02)."""

DEFAULT_PIE_CONFIG = PieConfig()

def pie(config, data):
    """Lay out data as the slices of a pie.

    Parameters:
        config: PieConfig
        data: sequence of data items, each mapped to a weight by config.value.

    Returns: list of ArcSpec, one per datum and in the same order as data.
        The angular span (less padding) is shared in proportion to the
        weights. With a comparator, slices are placed around the pie in sorted
        order: the first-ranked slice starts at start_angle and the last-ranked
        one ends at end_angle. Non-positive weights receive no span beyond
        their padding, unless no weight is positive: then the span is shared
        evenly.
    """
    data = list(data)
    n = len(data)
    if n == 0:
        return []
    a0 = float(config.start_angle)
    da = min(TAU, max(-TAU, config.end_angle - a0))
    if da != config.end_angle - a0:
        logger.debug('pie span %r clamped to %r', config.end_angle - a0, da)
    pad = min(abs(da) / n, max(0.0, float(config.pad_angle)))
    signed_pad = -pad if da < 0 else pad
    values = [float(config.value(datum)) for datum in data]
    total = sum(v for v in values if v > 0)

    index = list(range(n))
    if config.sort is not None:
        # list.sort is stable, so equal-ranked data keep their input order
        index.sort(key=functools.cmp_to_key(lambda i, j: config.sort(data[i], data[j])))

    if not total:
        logger.debug('no positive pie values: span shared evenly')
        values = [1.0] * n
        total = n
    k = (da - n * signed_pad) / total
    end = a0 + da
    arcs = [None] * n
    for rank, i in enumerate(index):
        v = values[i]
        a1 = a0 + (v * k if v > 0 else 0) + signed_pad
        if rank == n - 1:
            # the last slice ends exactly at end_angle
            a1 = end
        arcs[i] = arc.ArcSpec(
            inner_radius=config.inner_radius,
            outer_radius=config.outer_radius,
            corner_radius=config.corner_radius,
            start_angle=a0,
            end_angle=a1,
            pad_angle=pad,
            pad_radius=config.pad_radius)
        a0 = a1
    return arcs
