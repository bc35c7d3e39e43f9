'''
# chartshape

Python modules for turning chart data into abstract 2D path geometry: arcs and
pies, interpolated lines and areas, and stacked layouts. Nothing here renders;
paths are sequences of move / line / cubic Bezier / arc / close segments for a
drawing backend to consume.

Path
----
 - path: Point and segment records, the immutable Path container, and polar-coordinate helpers.

Curve
-----
Functions that interpolate an ordered sequence of points into a Path.
 - curve.basis: cubic B-splines and the bundle spline.
 - curve.cardinal: cardinal and Catmull-Rom splines.
 - curve.interpolate: linear, natural cubic, monotone, step and bump curves.
 - curve.geometry: helpers shared by the curve families.

Shapes
------
 - arc: rounded, padded annular sectors and their centroids.
 - pie: lay out a dataset as pie slices (ArcSpecs).
 - line: lines and areas over gapped point sequences, in cartesian or polar coordinates.
 - stack: stack parallel series into bands with pluggable order and baseline policies.

All functions are pure. Normalizations of out-of-range parameters are logged at
DEBUG level on the module loggers under "chartshape".
'''

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
