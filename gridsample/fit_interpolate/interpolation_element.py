"""Bilinear interpolation element.

   An element is one rectangular cell of the interpolated grid. Its four
   corners sit on samples of the source array and the value anywhere in
   the cell is a blend of the corner values weighted by the Q4 shape
   functions

       w1 = 0.25 * (1 - a) * (1 - b)     bottom-left
       w2 = 0.25 * (1 + a) * (1 - b)     bottom-right
       w3 = 0.25 * (1 + a) * (1 + b)     top-right
       w4 = 0.25 * (1 - a) * (1 + b)     top-left

   where (a, b) are the local coordinates of the point, normalised to
   [-1, 1] over the cell and centred on the cell centre:

        (-1, 1) 3 ---------- 2 (1, 1)
                |            |
                |     0---a  |
                |     |      |
       (-1, -1) 0 ---------- 1 (1, -1)
                      b up

   Corner values must be supplied in exactly this order. Nothing checks it.
"""

import numpy as num

from gridsample.coordinate_transforms.point import Point_cartesian
from gridsample.geometry.aabb import AABB
from gridsample.gridsample_exceptions import InvalidDimension, IndexOutOfRange
from gridsample.utilities.numerical_tools import ensure_numeric, \
     is_positive_size, ensure_points


class InterpolationElement(object):

    def __init__(self, center, width, height, corner_values, corner_ids=None):
        """Create element.

        Inputs:
          center: (x, y) of the cell centre. Any pair, including a
              Point_cartesian.
          width, height: Cell size. Must be finite and > 0.
          corner_values: Four sample values ordered bottom-left,
              bottom-right, top-right, top-left.
          corner_ids: Optional four flat indices of the samples the corner
              values came from. Not used in evaluation.

        Corner values are copied, so later changes to the source array do
        not reach the element.
        """

        if not is_positive_size(width):
            msg = 'Element width must be a positive number. I got %s' % width
            raise InvalidDimension(msg)
        if not is_positive_size(height):
            msg = 'Element height must be a positive number. I got %s' % height
            raise InvalidDimension(msg)

        corner_values = tuple(float(v) for v in corner_values)
        if len(corner_values) != 4:
            msg = 'An element needs exactly 4 corner values. I got %d' \
                  % len(corner_values)
            raise IndexOutOfRange(msg)

        if corner_ids is None:
            corner_ids = (None, None, None, None)
        else:
            corner_ids = tuple(int(i) for i in corner_ids)
            if len(corner_ids) != 4:
                msg = 'An element needs exactly 4 corner ids. I got %d' \
                      % len(corner_ids)
                raise IndexOutOfRange(msg)

        cx, cy = center
        self._center = Point_cartesian(cx, cy)
        self._width = float(width)
        self._height = float(height)
        self._corner_values = corner_values
        self._corner_ids = corner_ids
        self._extents = AABB.from_center(self._center.x, self._center.y,
                                         self._width, self._height)

    @property
    def center(self):
        return self._center

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def corner_values(self):
        return self._corner_values

    @property
    def corner_ids(self):
        return self._corner_ids

    @property
    def extents(self):
        return self._extents

    def x(self):
        return self._center.x

    def y(self):
        return self._center.y

    def get_corner_coordinates(self):
        """Return the four corner positions in corner order as a 4 x 2 array
        """

        xmin, xmax, ymin, ymax = self._extents.get_extent()
        return num.array([[xmin, ymin],
                          [xmax, ymin],
                          [xmax, ymax],
                          [xmin, ymax]], float)

    def local_coordinates(self, x, y):
        """Map (x, y) to the element's local coordinates (a, b).

        Both are in [-1, 1] for points inside the element and continue
        linearly outside it.
        """

        a = (x - self._center.x)/(self._width/2)
        b = (y - self._center.y)/(self._height/2)
        return a, b

    def shape_functions(self, x, y):
        """Return the bilinear weights (w1, w2, w3, w4) at (x, y).
        """

        a, b = self.local_coordinates(x, y)

        w1 = 0.25*(1 - a)*(1 - b)
        w2 = 0.25*(1 + a)*(1 - b)
        w3 = 0.25*(1 + a)*(1 + b)
        w4 = 0.25*(1 - a)*(1 + b)
        return w1, w2, w3, w4

    def value_at(self, x, y):
        """Interpolate the corner values at (x, y).

        There is no range check. Points outside the element get the
        bilinear extrapolation of the corner values.
        """

        w1, w2, w3, w4 = self.shape_functions(x, y)
        v0, v1, v2, v3 = self._corner_values

        return w1*v0 + w2*v1 + w3*v2 + w4*v3

    def values_at(self, points):
        """Vectorised value_at for an n x 2 array of points.
        """

        points = ensure_points(points)
        w1, w2, w3, w4 = self.shape_functions(points[:, 0], points[:, 1])
        v0, v1, v2, v3 = self._corner_values

        return ensure_numeric(w1*v0 + w2*v1 + w3*v2 + w4*v3, float)

    def contains(self, x, y):
        """True if (x, y) lies in the closed rectangle of the element.
        """

        return self._extents.contains(x, y)

    def squared_distance_to_center(self, x, y):
        return self._center.squared_distance_to(x, y)

    def __repr__(self):
        return 'InterpolationElement(center=(%s, %s), size=%sx%s, ' \
               'corner_values=%s, corner_ids=%s)' \
               % (self._center.x, self._center.y, self._width, self._height,
                  list(self._corner_values), list(self._corner_ids))
