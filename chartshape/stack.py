import collections
import logging

import numpy

logger = logging.getLogger(__name__)

class ShapeMismatch(ValueError):
    """Stacked series do not all have the same number of categories."""

def _as_bands(bands):
    """Return a float copy of bands with shape (series, categories, 2)."""
    try:
        bands = numpy.array(bands, dtype=float)
    except ValueError as e:
        raise ShapeMismatch('Bands must all have the same number of categories.') from e
    if bands.size == 0:
        return bands.reshape(len(bands), 0, 2)
    if bands.ndim != 3 or bands.shape[2] != 2:
        raise ShapeMismatch('Expected bands of shape (series, categories, 2), got shape {}.'.format(bands.shape))
    return bands

def _restack(bands):
    """Stack every series on the one before it, keeping the first series'
    band as given: low[i] = high[i-1], high[i] = high of the input + low[i]."""
    highs = numpy.cumsum(bands[..., 1], axis=0)
    stacked = numpy.empty_like(bands)
    stacked[..., 1] = highs
    stacked[0, :, 0] = bands[0, :, 0]
    stacked[1:, :, 0] = highs[:-1]
    return stacked

# Offsets: each takes an array-like of shape (series, categories, 2) of
# (low, high) bands in stacking order, freshly initialized to (0, value), and
# returns a new array of stacked bands. The input is not modified.

def offset_none(bands):
    """Zero baseline: each series sits on top of the previous one.

    The value of each band is its high; the first series' band is kept as
    is, so e.g. [[(0, 42)], [(0, 70)]] becomes [[(0, 42)], [(42, 112)]]."""
    bands = _as_bands(bands)
    if len(bands) == 0:
        return bands
    return _restack(bands)

def offset_diverging(bands):
    """Positive values stack upward from zero and negative values downward
    from zero, independently of their order within each sign. The value of
    each band is high - low; zero values give (0, 0)."""
    bands = _as_bands(bands)
    dy = bands[..., 1] - bands[..., 0]
    positive = numpy.cumsum(numpy.where(dy > 0, dy, 0), axis=0)
    negative = numpy.cumsum(numpy.where(dy < 0, dy, 0), axis=0)
    stacked = numpy.zeros_like(bands)
    up = dy > 0
    down = dy < 0
    stacked[..., 0] = numpy.where(up, positive - dy, numpy.where(down, negative, 0))
    stacked[..., 1] = numpy.where(up, positive, numpy.where(down, negative - dy, 0))
    return stacked

def offset_expand(bands):
    """Zero baseline, with each category normalized so the topline is 1.

    The value of each band is high - low. A category whose values sum to zero
    is stacked unnormalized."""
    bands = _as_bands(bands)
    dy = bands[..., 1] - bands[..., 0]
    total = dy.sum(axis=0)
    with numpy.errstate(divide='ignore', invalid='ignore'):
        dy = numpy.where(total != 0, dy / total, dy)
    stacked = numpy.empty_like(bands)
    stacked[..., 1] = numpy.cumsum(dy, axis=0)
    stacked[..., 0] = stacked[..., 1] - dy
    return stacked

def offset_silhouette(bands):
    """Center each category's stack around zero. The value of each band is
    its high."""
    bands = _as_bands(bands)
    if len(bands) == 0:
        return bands
    total = bands[..., 1].sum(axis=0)
    bands[0, :, 0] = -total / 2
    bands[0, :, 1] += bands[0, :, 0]
    return _restack(bands)

def offset_wiggle(bands):
    """Shift the baseline to minimize the weighted change in slope of the
    layers (Byron & Wattenberg, "Stacked Graphs: Geometry & Aesthetics").

    From one category to the next the baseline moves by the negated
    thickness-weighted mean of each layer's midline slope, so the result is a
    smoothly meandering baseline starting at zero. The value of each band is
    its high."""
    bands = _as_bands(bands)
    if len(bands) == 0 or bands.shape[1] == 0:
        return bands
    values = bands[..., 1]
    d = numpy.diff(values, axis=1)
    # slope of each layer's midline: half its own change plus the whole change of those below
    slopes = d / 2 + numpy.cumsum(d, axis=0) - d
    weights = values[:, 1:]
    total = weights.sum(axis=0)
    with numpy.errstate(divide='ignore', invalid='ignore'):
        steps = numpy.where(total != 0, -(slopes * weights).sum(axis=0) / total, 0)
    baseline = numpy.concatenate([[0], numpy.cumsum(steps)])
    bands[0, :, 0] = baseline
    bands[0, :, 1] += baseline
    return _restack(bands)

# Orders: each takes a sequence of (label, values) series and returns them as a
# list in stacking order (first = bottom).

def _sums(series):
    return [numpy.nansum(numpy.asarray(values, dtype=float)) for label, values in series]

def _peak(values):
    values = numpy.asarray(values, dtype=float)
    if values.size == 0 or numpy.isnan(values).all():
        return -1
    return int(numpy.nanargmax(values))

def _inside_out(items, weights, order):
    """Deal items, taken in the given order, alternately onto the top and the
    bottom of the stack, whichever currently holds less weight."""
    top = bottom = 0
    tops, bottoms = [], []
    for i in order:
        if top < bottom:
            top += weights[i]
            tops.append(items[i])
        else:
            bottom += weights[i]
            bottoms.append(items[i])
    return bottoms[::-1] + tops

def order_none(series):
    """Keep the input order."""
    return list(series)

def order_reverse(series):
    """Reverse the input order."""
    return list(series)[::-1]

def order_ascending(series):
    """Smallest sum at the bottom."""
    series = list(series)
    sums = _sums(series)
    return [series[i] for i in sorted(range(len(series)), key=sums.__getitem__)]

def order_descending(series):
    """Largest sum at the bottom."""
    return order_ascending(series)[::-1]

def order_appearance(series):
    """Series whose peak comes earliest at the bottom."""
    series = list(series)
    peaks = [_peak(values) for label, values in series]
    return [series[i] for i in sorted(range(len(series)), key=peaks.__getitem__)]

def order_inside_out(series):
    """Series with early peaks in the middle and late peaks at the edges,
    balancing the total weight above and below; suited to streamgraphs."""
    series = list(series)
    sums = _sums(series)
    appearance = sorted(range(len(series)), key=[_peak(values) for label, values in series].__getitem__)
    return _inside_out(series, sums, appearance)

def sort_by_inside_out(weight, items):
    """Arrange items with the heaviest in the middle and decreasing weights
    alternately placed outward on both sides.

    Parameters:
        weight: function mapping an item to a number.
        items: sequence of items.

    Returns: list of the items in inside-out order. The heaviest item is in
        the middle; the following ranks go alternately to its right and its
        left, each further out than the last. Items of equal weight keep their
        relative input order as they are dealt.

    Example:
        sort_by_inside_out(lambda x: x, [1, 5, 3, 2, 4]) == [1, 3, 5, 4, 2]
    """
    items = list(items)
    weights = [weight(item) for item in items]
    order = sorted(range(len(items)), key=lambda i: -weights[i])
    right = [items[i] for i in order[1::2]]
    left = [items[i] for i in order[2::2]]
    return left[::-1] + [items[i] for i in order[:1]] + right

StackConfig = collections.namedtuple('StackConfig', 'series offset order',
    defaults=(offset_none, order_none))
StackConfig.__doc__ = """Stack layout configuration.

Fields:
    series: sequence of (label, values) pairs; every values sequence must
        have the same length (the number of categories).
    offset: baseline policy, one of the offset_* functions.
    order: stacking order policy, one of the order_* functions (or any
        function returning a permutation of the series)."""

StackResult = collections.namedtuple('StackResult', 'bands labels extent')
StackResult.__doc__ = """Stack layout result.

Fields:
    bands: array of shape (series, categories, 2) of (low, high) values, in
        stacking order.
    labels: list of series labels parallel to bands.
    extent: (minimum low, maximum high) over all bands; (0, 0) if empty."""

def stack(config):
    """Stack parallel series into (low, high) bands per category.

    Parameters:
        config: StackConfig

    Returns: StackResult

    Raises ShapeMismatch if the series do not all have the same number of
    categories.
    """
    series = [(label, list(values)) for label, values in config.series]
    counts = sorted({len(values) for label, values in series})
    if len(counts) > 1:
        raise ShapeMismatch('All series must have the same number of categories; got lengths {}.'.format(counts))
    categories = counts[0] if counts else 0
    ordered = list(config.order(series))
    if len(ordered) != len(series):
        raise ShapeMismatch('Stack order returned {} series for {} inputs.'.format(len(ordered), len(series)))
    labels = [label for label, values in ordered]
    bands = numpy.zeros((len(ordered), categories, 2))
    if bands.size:
        bands[..., 1] = [values for label, values in ordered]
    bands = config.offset(bands)
    if bands.size:
        extent = (float(bands[..., 0].min()), float(bands[..., 1].max()))
    else:
        extent = (0.0, 0.0)
    logger.debug('stacked %d series over %d categories, extent %s', len(labels), categories, extent)
    return StackResult(bands, labels, extent)
