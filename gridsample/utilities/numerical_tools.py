#!/usr/bin/env python
"""Auxiliary numerical tools
"""

from math import isfinite
from numbers import Number, Integral

import numpy as np

NAN = np.nan


def is_positive_size(x):
    """True if x is a finite number strictly greater than zero.

    Used to validate widths and heights. Any real number or 0-d numeric
    array is accepted. NaN, inf and booleans are rejected.
    """

    if isinstance(x, (bool, np.bool_)):
        return False

    if isinstance(x, np.ndarray):
        if x.ndim != 0 or x.dtype.kind not in 'iuf':
            return False
    elif not isinstance(x, Number):
        return False

    try:
        x = float(x)
    except (TypeError, ValueError):
        # Complex numbers
        return False

    return isfinite(x) and x > 0


def is_index(x):
    """True if x is an integer usable as an index. Booleans are not.
    """

    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (Integral, np.integer))


def ensure_numeric(A, typecode=None):
    """Ensure that sequence is a numeric array.

    Inputs:
        A: Sequence. If A is already a numeric array it will be returned
                     unaltered
                     If not, an attempt is made to convert it to a numeric
                     array
        A: Scalar.   Return 0-dimensional array containing that value. Note
                     that a 0-dim array DOES NOT HAVE A LENGTH UNDER numpy.

        A:None.      Return None

        typecode:    numeric type. If specified, use this in the conversion.
                     If not, let numpy package decide.
                     typecode will always be one of float, int, etc.
    """

    if A is None:
        return None

    if typecode is None:
        if isinstance(A, np.ndarray):
            return np.ascontiguousarray(A)
        else:
            return np.ascontiguousarray(np.asarray(A))
    else:
        return np.ascontiguousarray(np.asarray(A, dtype=typecode))


def ensure_points(points):
    """Return points as an n x 2 float array.

    A single pair [x, y] is promoted to a 1 x 2 array.
    """

    points = ensure_numeric(points, float)
    if points.size == 0:
        return points.reshape((0, 2))
    if points.ndim == 1:
        points = points.reshape((1, -1))

    msg = 'Two columns must be specified in point coordinates. ' \
          'I got shape=%s' % (str(points.shape))
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(msg)

    return points
