#!/usr/bin/env python


import unittest

import numpy as num

from gridsample.fit_interpolate.interpolation_element import \
     InterpolationElement
from gridsample.fit_interpolate.search_functions import ElementSearch, \
     NearestCentreSearch, ContainmentSearch, QuadtreeSearch, KDTreeSearch, \
     get_search_class, search_methods


def rectangular_elements(m, n, width=1.0, height=1.0):
    """Elements of an (m+1) x (n+1) sample grid, numbered row by row
    """

    elements = []
    for row in range(n):
        for col in range(m):
            elements.append(InterpolationElement(((col + 1)*width,
                                                  (row + 1)*height),
                                                 width, height,
                                                 [0.0, 0.0, 0.0, 0.0]))
    return elements


class Test_search_functions(unittest.TestCase):
    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_nearest_centre(self):
        elements = rectangular_elements(3, 2)
        searcher = NearestCentreSearch(elements, 1.0, 1.0)

        assert searcher.search(1.1, 1.1) == 0
        assert searcher.search(2.9, 1.2) == 2
        assert searcher.search(2.2, 2.4) == 4

        # Ties go to the first element
        assert searcher.search(1.5, 1.5) == 0
        assert searcher.search(2.5, 1.0) == 1

        # Nothing within the seed bound
        assert searcher.search(10.0, 10.0) is None
        assert searcher.search(float('nan'), 1.0) is None

    def test_seed_bound_is_squared(self):
        """The seed cell_width + cell_height bounds the squared distance
        """

        elements = rectangular_elements(2, 2, 10.0, 10.0)

        nearest = NearestCentreSearch(elements, 10.0, 10.0)
        contains = ContainmentSearch(elements, 10.0, 10.0)

        # Squared distance 8 < 20
        assert nearest.search(12.0, 12.0) == 0

        # Squared distance 32 > 20, although inside element 0
        assert nearest.search(14.0, 14.0) is None
        assert contains.search(14.0, 14.0) == 0

    def test_containment(self):
        elements = rectangular_elements(3, 2)
        searcher = ContainmentSearch(elements, 1.0, 1.0)

        assert searcher.search(1.1, 1.1) == 0
        assert searcher.search(0.5, 0.5) == 0
        assert searcher.search(3.5, 2.5) == 5

        # Shared edge goes to the lower index
        assert searcher.search(1.5, 1.2) == 0
        assert searcher.search(2.0, 1.5) == 1

        assert searcher.search(0.4, 1.0) is None
        assert searcher.search(2.0, 2.6) is None

    def test_quadtree(self):
        elements = rectangular_elements(5, 4)
        searcher = QuadtreeSearch(elements, 1.0, 1.0)
        reference = ContainmentSearch(elements, 1.0, 1.0)

        assert searcher.root.count() == len(elements)

        num.random.seed(7)
        for x, y in num.random.uniform(0.0, 6.0, (300, 2)):
            assert searcher.search(x, y) == reference.search(x, y)

        assert searcher.search(1.5, 1.5) == 0
        assert searcher.search(-1.0, 1.0) is None

    def test_kdtree(self):
        elements = rectangular_elements(5, 4)
        searcher = KDTreeSearch(elements, 1.0, 1.0)
        reference = NearestCentreSearch(elements, 1.0, 1.0)

        num.random.seed(11)
        for x, y in num.random.uniform(-2.0, 8.0, (300, 2)):
            assert searcher.search(x, y) == reference.search(x, y)

        # Ties
        assert searcher.search(1.5, 1.5) == 0
        assert searcher.search(3.0, 1.5) == 2

        assert searcher.search(100.0, 1.0) is None

    def test_single_element_kdtree(self):
        elements = rectangular_elements(1, 1)
        searcher = KDTreeSearch(elements, 1.0, 1.0)

        assert searcher.search(1.2, 0.8) == 0
        assert searcher.search(5.0, 5.0) is None

    def test_no_elements(self):
        for search_class in search_methods.values():
            searcher = search_class([], 1.0, 1.0)
            assert len(searcher) == 0
            assert searcher.search(0.5, 0.5) is None

    def test_non_finite_points(self):
        """All methods agree that NaN and inf are in no element
        """

        elements = rectangular_elements(2, 2)
        nan = float('nan')
        inf = float('inf')

        for search_class in search_methods.values():
            searcher = search_class(elements, 1.0, 1.0)
            for x, y in [(nan, 1.0), (1.0, nan), (nan, nan),
                         (inf, 1.0), (1.0, -inf)]:
                assert searcher.search(x, y) is None

            ids = searcher.search_block([[nan, 1.0], [1.0, 1.0]])
            assert ids.tolist() == [-1, 0]

    def test_search_block(self):
        elements = rectangular_elements(3, 2)
        searcher = NearestCentreSearch(elements, 1.0, 1.0)

        ids = searcher.search_block([[1.1, 1.1], [10.0, 10.0], [3.0, 2.0]])
        assert ids.tolist() == [0, -1, 5]

        ids = searcher.search_block([2.0, 1.0])
        assert ids.tolist() == [1]

    def test_get_search_class(self):
        assert get_search_class('nearest') is NearestCentreSearch
        assert get_search_class('contains') is ContainmentSearch
        assert get_search_class('quadtree') is QuadtreeSearch
        assert get_search_class('kdtree') is KDTreeSearch
        assert get_search_class(QuadtreeSearch) is QuadtreeSearch

        self.assertRaises(ValueError, get_search_class, 'bisect')
        self.assertRaises(ValueError, get_search_class, None)
        self.assertRaises(ValueError, get_search_class, int)

    def test_base_class(self):
        searcher = ElementSearch(rectangular_elements(2, 2), 1.0, 1.0)
        self.assertRaises(NotImplementedError, searcher.search, 1.0, 1.0)
        assert repr(searcher) == 'ElementSearch(4 elements)'


#-------------------------------------------------------------
if __name__ == "__main__":
    unittest.main()
