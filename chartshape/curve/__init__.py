'''
Curve
-----
Functions that turn an ordered sequence of 2D points (an array of shape (n, 2))
into a chartshape.path.Path. Each takes its tuning parameter as a keyword, so
that functools.partial(curve.cardinal.cardinal, tension=0.5) can be handed to
chartshape.line.line() or chartshape.line.area().
 - curve.geometry: point coercion, parameter clamping and polyline helpers.
 - curve.basis: cubic B-splines (basis, basis_open, basis_closed) and the straightened bundle spline.
 - curve.cardinal: cardinal and Catmull-Rom Hermite splines, each in default, open and closed form.
 - curve.interpolate: linear, natural cubic, monotone (Steffen), step and bump curves.
'''
