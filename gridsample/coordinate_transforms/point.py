"""point.py - Cartesian and polar points in the plane.

   Points are immutable value objects. Conversion between the two
   representations is done by the module level functions
   polar_to_cartesian and cartesian_to_polar.
"""

from math import cos, sin, atan2, hypot, nan
from collections import namedtuple

import numpy as num

from gridsample.utilities.numerical_tools import ensure_numeric


class Point_cartesian(namedtuple('Point_cartesian', ['x', 'y'])):
    """Point in 2D Cartesian space.

    Initialise as
      Point_cartesian(x, y)

    Being a tuple it can be passed anywhere an [x, y] pair is expected.
    """

    __slots__ = ()

    def __new__(cls, x, y):
        return super().__new__(cls, float(x), float(y))

    def squared_distance_to(self, x, y):
        """Squared Euclidean distance to the point (x, y)"""
        return (self.x - x)**2 + (self.y - y)**2

    def __repr__(self):
        return 'Point_cartesian(x=%s, y=%s)' % (self.x, self.y)


class Point_polar(namedtuple('Point_polar', ['r', 'theta'])):
    """Point in 2D polar space.

    Initialise as
      Point_polar(r, theta), where theta is in radians measured
      anticlockwise from the positive x axis.
    """

    __slots__ = ()

    def __new__(cls, r, theta):
        return super().__new__(cls, float(r), float(theta))

    def __repr__(self):
        return 'Point_polar(r=%s, theta=%s)' % (self.r, self.theta)


def polar_to_cartesian(polar_point):
    """Convert polar coordinate (r, theta) to cartesian coordinate (x, y).

    Non-finite input is not rejected, it just propagates to the result.
    """

    r, theta = polar_point
    try:
        c, s = cos(theta), sin(theta)
    except ValueError:
        # math.cos and math.sin refuse infinite angles
        c = s = nan

    return Point_cartesian(r*c, r*s)


def cartesian_to_polar(cartesian_point):
    """Convert cartesian coordinate (x, y) to polar coordinate (r, theta).

    theta is in (-pi, pi]. The origin maps to (0, 0).
    """

    x, y = cartesian_point
    return Point_polar(hypot(x, y), atan2(y, x))


def polar_to_cartesian_array(r, theta):
    """Vectorised polar_to_cartesian.

    r and theta are scalars or sequences that broadcast against each other.
    Return an n x 2 array of [x, y] pairs.
    """

    r = ensure_numeric(r, float)
    theta = ensure_numeric(theta, float)
    r, theta = num.broadcast_arrays(r, theta)

    points = num.zeros((r.size, 2), float)
    points[:, 0] = (r*num.cos(theta)).ravel()
    points[:, 1] = (r*num.sin(theta)).ravel()
    return points
