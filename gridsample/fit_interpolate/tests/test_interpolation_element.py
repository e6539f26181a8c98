#!/usr/bin/env python

import unittest

import numpy as num

from gridsample.fit_interpolate.interpolation_element import \
     InterpolationElement
from gridsample.gridsample_exceptions import InvalidDimension, IndexOutOfRange


class Test_Interpolation_Element(unittest.TestCase):

    def setUp(self):
        self.values = [101.0, 102.0, 103.0, 105.0]
        self.element = InterpolationElement((1.0, 1.0), 4.0, 4.0,
                                            self.values,
                                            [101, 102, 103, 104])

    def tearDown(self):
        pass

    def test_corner_exactness(self):
        """Each corner returns its own value
        """

        for width, height in [(4.0, 4.0), (1.0, 1.0), (0.3, 2.5), (10.0, 0.01)]:
            element = InterpolationElement((2.0, -1.0), width, height,
                                           self.values)
            corners = element.get_corner_coordinates()

            for (x, y), value in zip(corners, self.values):
                assert abs(element.value_at(x, y) - value) < 1.0e-9

    def test_corner_order(self):
        corners = self.element.get_corner_coordinates()
        assert num.allclose(corners, [[-1.0, -1.0],
                                      [3.0, -1.0],
                                      [3.0, 3.0],
                                      [-1.0, 3.0]])

    def test_center_value(self):
        value = self.element.value_at(1.0, 1.0)
        assert num.allclose(value, num.mean(self.values))

    def test_linearity(self):
        """Along a line the interpolant is affine in the line parameter
        """

        # Axis parallel lines through the element
        for y in [-1.0, 0.3, 2.0]:
            v0 = self.element.value_at(-0.5, y)
            v1 = self.element.value_at(0.5, y)
            v2 = self.element.value_at(1.5, y)
            assert num.allclose(v1 - v0, v2 - v1)

        for x in [-0.8, 1.0, 2.9]:
            v0 = self.element.value_at(x, -0.5)
            v1 = self.element.value_at(x, 0.25)
            v2 = self.element.value_at(x, 1.0)
            assert num.allclose(v1 - v0, v2 - v1)

    def test_affine_for_planar_data(self):
        """Corner values on a plane are reproduced exactly everywhere
        """

        def f(x, y):
            return 3.0*x - 2.0*y + 0.5

        element = InterpolationElement((2.0, 3.0), 2.0, 4.0,
                                       [f(1.0, 1.0), f(3.0, 1.0),
                                        f(3.0, 5.0), f(1.0, 5.0)])

        for x, y in [(2.0, 3.0), (1.2, 4.7), (2.9, 1.1), (1.5, 2.0)]:
            assert num.allclose(element.value_at(x, y), f(x, y))

        # Collinear points along a diagonal
        p0 = num.array([1.2, 1.4])
        d = num.array([0.3, 0.7])
        v = [element.value_at(*(p0 + t*d)) for t in (0.0, 1.0, 2.0)]
        assert num.allclose(v[1] - v[0], v[2] - v[1])

    def test_local_coordinates(self):
        a, b = self.element.local_coordinates(3.0, -1.0)
        assert a == 1.0 and b == -1.0

        a, b = self.element.local_coordinates(1.0, 1.0)
        assert a == 0.0 and b == 0.0

        w = self.element.shape_functions(0.2, 2.2)
        assert num.allclose(sum(w), 1.0)

    def test_extrapolation(self):
        """No range check, values continue linearly outside the element
        """

        element = InterpolationElement((0.0, 0.0), 2.0, 2.0,
                                       [0.0, 1.0, 1.0, 0.0])

        # Value rises with x only
        assert num.allclose(element.value_at(1.0, 0.0), 1.0)
        assert num.allclose(element.value_at(3.0, 0.0), 2.0)
        assert num.allclose(element.value_at(-3.0, 5.0), -1.0)

    def test_values_at(self):
        points = [[1.0, 1.0], [-1.0, -1.0], [3.0, 3.0]]
        z = self.element.values_at(points)

        assert z.shape == (3,)
        assert num.allclose(z, [num.mean(self.values), 101.0, 103.0])

        for (x, y), value in zip(points, z):
            assert num.allclose(self.element.value_at(x, y), value)

    def test_contains(self):
        assert self.element.contains(1.0, 1.0)
        assert self.element.contains(-1.0, 3.0)
        assert not self.element.contains(3.1, 1.0)

    def test_invalid_dimension(self):
        for width, height in [(0.0, 1.0), (1.0, 0.0), (-1.0, 1.0),
                              (1.0, -2.0), (float('nan'), 1.0),
                              (1.0, float('inf'))]:
            self.assertRaises(InvalidDimension, InterpolationElement,
                              (0.0, 0.0), width, height, self.values)

        # Also a ValueError for callers that don't know our exceptions
        self.assertRaises(ValueError, InterpolationElement,
                          (0.0, 0.0), 0.0, 1.0, self.values)

    def test_wrong_number_of_corners(self):
        self.assertRaises(IndexOutOfRange, InterpolationElement,
                          (0.0, 0.0), 1.0, 1.0, [1.0, 2.0, 3.0])
        self.assertRaises(IndexOutOfRange, InterpolationElement,
                          (0.0, 0.0), 1.0, 1.0, self.values, [1, 2])

    def test_corner_values_are_copied(self):
        values = num.array(self.values)
        element = InterpolationElement((0.0, 0.0), 1.0, 1.0, values)

        values[:] = 0.0
        assert element.corner_values == tuple(self.values)

    def test_attributes(self):
        assert self.element.center == (1.0, 1.0)
        assert self.element.x() == 1.0 and self.element.y() == 1.0
        assert self.element.width == 4.0
        assert self.element.height == 4.0
        assert self.element.corner_ids == (101, 102, 103, 104)
        assert self.element.extents.get_extent() == (-1.0, 3.0, -1.0, 3.0)
        assert self.element.squared_distance_to_center(4.0, 5.0) == 25.0

        element = InterpolationElement((0.0, 0.0), 1.0, 1.0, self.values)
        assert element.corner_ids == (None, None, None, None)

        assert 'InterpolationElement' in repr(self.element)


#-------------------------------------------------------------
if __name__ == "__main__":
    unittest.main()
