"""
General functions used to locate the element a point belongs to.

Every search class is built once from the element list of a grid and then
answers search(x, y) with the index of an element, or None when it finds
none. What the grid does with None is its own business (see the off_mesh
policy of InterpolatedGrid).

   NearestCentreSearch  Element whose centre is closest. Only centres closer
                        than the seed bound (squared distance below
                        cell_width + cell_height) qualify. This is the
                        default.
   ContainmentSearch    First element whose rectangle holds the point.
   QuadtreeSearch       As ContainmentSearch, via a quadtree of element
                        extents.
   KDTreeSearch         As NearestCentreSearch, via a k-d tree of centres.

All of them resolve ties to the lowest element index.
"""

from math import sqrt

import numpy as num

from gridsample.geometry.aabb import AABB
from gridsample.geometry.quad import Cell
from gridsample.utilities.numerical_tools import ensure_points
import gridsample.utilities.log as log


class ElementSearch(object):
    """Base class for element search strategies.

    Subclasses implement search(x, y).
    """

    def __init__(self, elements, cell_width, cell_height, verbose=False):
        self.elements = list(elements)
        self.cell_width = cell_width
        self.cell_height = cell_height

        # Squared distance a centre must beat to count as near
        self.seed_distance = cell_width + cell_height

        n = len(self.elements)
        self.centres = num.zeros((n, 2), float)
        self.extents = num.zeros((n, 4), float)
        for k, element in enumerate(self.elements):
            self.centres[k, :] = element.center
            self.extents[k, :] = element.extents.get_extent()

        if verbose:
            log.critical('%s: Indexed %d elements'
                         % (self.__class__.__name__, n))

    def __len__(self):
        return len(self.elements)

    def search(self, x, y):
        raise NotImplementedError

    def search_block(self, points):
        """Search for each row of an n x 2 array of points.

        Return an integer array of element indices, -1 where none was found.
        """

        points = ensure_points(points)
        ids = num.zeros(points.shape[0], int)
        for i, (x, y) in enumerate(points):
            k = self.search(x, y)
            ids[i] = -1 if k is None else k
        return ids

    def __repr__(self):
        return '%s(%d elements)' % (self.__class__.__name__, len(self))


class NearestCentreSearch(ElementSearch):
    """Linear scan for the nearest element centre.

    The running minimum starts at cell_width + cell_height and only a
    strictly smaller squared distance replaces it, so the first element in
    construction order wins ties.
    """

    def search(self, x, y):
        if len(self.elements) == 0:
            return None

        distances = (self.centres[:, 0] - x)**2 + (self.centres[:, 1] - y)**2

        # argmin returns the first occurrence of the minimum
        k = int(num.argmin(distances))
        if distances[k] < self.seed_distance:
            return k
        return None


class ContainmentSearch(ElementSearch):
    """First element, in construction order, whose closed rectangle contains
    the point. Points on a shared edge go to the lower index.
    """

    def search(self, x, y):
        if len(self.elements) == 0:
            return None

        inside = (self.extents[:, 0] <= x) & (x <= self.extents[:, 1]) & \
                 (self.extents[:, 2] <= y) & (y <= self.extents[:, 3])

        if not num.any(inside):
            return None
        return int(num.argmax(inside))


class QuadtreeSearch(ElementSearch):
    """Containment search with the element extents stored in a quadtree.
    """

    def __init__(self, elements, cell_width, cell_height, verbose=False):
        ElementSearch.__init__(self, elements, cell_width, cell_height,
                               verbose=verbose)

        self.root = None
        if len(self.elements) == 0:
            return

        extents = AABB(float(num.min(self.extents[:, 0])),
                       float(num.max(self.extents[:, 1])),
                       float(num.min(self.extents[:, 2])),
                       float(num.max(self.extents[:, 3])))
        extents.grow(0.001)  # To avoid round off error

        self.root = Cell(extents)
        for k, element in enumerate(self.elements):
            self.root.insert(element.extents, k)

        if verbose:
            log.critical('QuadtreeSearch: Built quad tree with %d leaves'
                         % self.root.count())

    def search(self, x, y):
        if self.root is None:
            return None

        candidates = self.root.search(x, y)
        if len(candidates) == 0:
            return None
        return min(candidates)


class KDTreeSearch(ElementSearch):
    """Nearest-centre search using scipy's cKDTree.

    Returns the same element as NearestCentreSearch: the nearest centres
    from the tree are rechecked against the seed bound with the same
    squared distance, and ties go to the lowest index. Points with a NaN or
    infinite coordinate are near nothing.
    """

    # Centres of a rectangular lattice are at most 4 deep in a tie
    max_ties = 4

    def __init__(self, elements, cell_width, cell_height, verbose=False):
        import scipy.spatial

        ElementSearch.__init__(self, elements, cell_width, cell_height,
                               verbose=verbose)

        self.tree = None
        if len(self.elements) > 0:
            self.tree = scipy.spatial.cKDTree(self.centres)

    def search(self, x, y):
        if self.tree is None:
            return None

        # cKDTree.query rejects non-finite points
        if not (num.isfinite(x) and num.isfinite(y)):
            return None

        k = min(self.max_ties, len(self.elements))
        # Pad the bound slightly, the exact test is done below
        bound = sqrt(self.seed_distance)*(1.0 + 1.0e-9)
        _, indices = self.tree.query([x, y], k=k, distance_upper_bound=bound)
        indices = num.atleast_1d(indices)

        # Missing neighbours are reported as len(elements)
        indices = indices[indices < len(self.elements)]
        if len(indices) == 0:
            return None

        distances = (self.centres[indices, 0] - x)**2 + \
                    (self.centres[indices, 1] - y)**2
        minimum = num.min(distances)
        if not minimum < self.seed_distance:
            return None

        return int(num.min(indices[distances == minimum]))


search_methods = {'nearest': NearestCentreSearch,
                  'contains': ContainmentSearch,
                  'quadtree': QuadtreeSearch,
                  'kdtree': KDTreeSearch}


def get_search_class(method):
    """Return the search class for method.

    method is one of the names in search_methods or an ElementSearch
    subclass.
    """

    if isinstance(method, type) and issubclass(method, ElementSearch):
        return method

    try:
        return search_methods[method]
    except (KeyError, TypeError):
        msg = 'Unknown element search method %s. Choose one of %s' \
              % (repr(method), ', '.join(sorted(search_methods)))
        raise ValueError(msg)
