"""Bilinear interpolation over a rectangular sample grid.

   These functions and classes calculate a value at a particular point
   from a rectangular array of samples, e.g. the pixels of an image.

   The samples are taken to sit on the centres of pixels of size
   cell_width x cell_height, sample (row, col) at

       ((col + 0.5)*cell_width, (row + 0.5)*cell_height)

   Each 2 x 2 block of neighbouring samples spans one InterpolationElement,
   so an n_samples_x x n_samples_y array gives
   (n_samples_x - 1)*(n_samples_y - 1) elements, numbered row by row:

       C8 ---- C9 ---- C10 --- C11
        |  E3   |  E4   |  E5   |
       C4 ---- C5 ---- C6 ---- C7
        |  E0   |  E1   |  E2   |
       C0 ---- C1 ---- C2 ---- C3

   Element E1 has corners C1, C2, C6, C5 (bottom-left, bottom-right,
   top-right, top-left) and its centre at (2*cell_width, cell_height).

   A query first locates an element and then evaluates its bilinear
   interpolant. Boundary elements, i.e. the half cells between the outer
   pixel centres and the image border, are not supported.

DESIGN ISSUES
* Points that are not near any element. By default (off_mesh='first_element')
  they are reported as being on element 0, which a caller cannot tell apart
  from a genuine hit on element 0. Use off_mesh='not_found' to get None and
  NODATA_value instead.
"""

import numpy as num

from gridsample.config import default_cell_width, default_cell_height, \
     default_off_mesh_policy, default_search_method, off_mesh_policies, \
     NODATA_value as default_NODATA_value
from gridsample.coordinate_transforms.point import Point_polar, \
     polar_to_cartesian, polar_to_cartesian_array
from gridsample.fit_interpolate.interpolation_element import \
     InterpolationElement
from gridsample.fit_interpolate.search_functions import get_search_class
from gridsample.gridsample_exceptions import InvalidDimension, IndexOutOfRange
from gridsample.utilities.numerical_tools import ensure_numeric, \
     ensure_points, is_positive_size, is_index
import gridsample.utilities.log as log


def interpolate(samples,
                n_samples_x,
                n_samples_y,
                interpolation_points,
                cell_width=default_cell_width,
                cell_height=default_cell_height,
                off_mesh=default_off_mesh_policy,
                search=default_search_method,
                NODATA_value=default_NODATA_value,
                verbose=False):
    """Interpolate samples to interpolation points.

    Inputs (mandatory):

    samples: Flat row-major array of n_samples_x*n_samples_y values, or
             an n_samples_y x n_samples_x array.

    n_samples_x, n_samples_y: Number of samples along x and y.

    interpolation_points: List of coordinate pairs [x, y] or an nx2
                          numeric array.

    Inputs (optional): see InterpolatedGrid.

    Output:

    Interpolated values at interpolation_points as a numeric array.

    Note: This function is a simple shortcut for the case where the grid
    is used only once.
    """

    grid = InterpolatedGrid(samples, n_samples_x, n_samples_y,
                            cell_width=cell_width,
                            cell_height=cell_height,
                            off_mesh=off_mesh,
                            search=search,
                            verbose=verbose)

    return grid.interpolate_block(interpolation_points,
                                  NODATA_value=NODATA_value,
                                  verbose=verbose)


class InterpolatedGrid(object):

    def __init__(self,
                 samples,
                 n_samples_x,
                 n_samples_y,
                 cell_width=default_cell_width,
                 cell_height=default_cell_height,
                 off_mesh=default_off_mesh_policy,
                 search=default_search_method,
                 verbose=False):
        """Build the interpolation elements of a rectangular sample array.

        Inputs:
          samples: Flat row-major array of sample values (or an
              n_samples_y x n_samples_x array). Only the first
              n_samples_x*n_samples_y values are used. Values are copied.

          n_samples_x, n_samples_y: Number of samples along x and y. If
              either is less than 2 the grid has no elements.

          cell_width, cell_height: Spacing of the samples.

          off_mesh: What to report for points not near any element.
              'first_element' returns element 0, 'not_found' returns None
              (and NODATA_value for values).

          search: Element search method, one of 'nearest', 'contains',
              'quadtree', 'kdtree' or an ElementSearch subclass.
              'nearest' picks the element with the closest centre.

        Raises IndexOutOfRange if samples holds fewer than
        n_samples_x*n_samples_y values and InvalidDimension if the cell
        size is not positive.
        """

        if off_mesh not in off_mesh_policies:
            msg = 'Unknown off mesh policy %s. Choose one of %s' \
                  % (repr(off_mesh), ', '.join(off_mesh_policies))
            raise ValueError(msg)
        search_class = get_search_class(search)

        n_samples_x = int(n_samples_x)
        n_samples_y = int(n_samples_y)
        if n_samples_x < 0 or n_samples_y < 0:
            msg = 'Sample counts must not be negative. I got %d x %d' \
                  % (n_samples_x, n_samples_y)
            raise IndexOutOfRange(msg)

        samples = ensure_numeric(samples, float).ravel()
        n_samples = n_samples_x*n_samples_y
        if len(samples) < n_samples:
            msg = 'Expected at least %d samples for a %d x %d grid. I got %d' \
                  % (n_samples, n_samples_x, n_samples_y, len(samples))
            raise IndexOutOfRange(msg)

        self.n_samples_x = n_samples_x
        self.n_samples_y = n_samples_y
        self.n_elements_x = max(n_samples_x - 1, 0)
        self.n_elements_y = max(n_samples_y - 1, 0)
        self.off_mesh = off_mesh

        n_elements = self.n_elements_x*self.n_elements_y
        if n_elements > 0:
            if not is_positive_size(cell_width):
                msg = 'Cell width must be a positive number. I got %s' \
                      % cell_width
                raise InvalidDimension(msg)
            if not is_positive_size(cell_height):
                msg = 'Cell height must be a positive number. I got %s' \
                      % cell_height
                raise InvalidDimension(msg)

        self.cell_width = float(cell_width)
        self.cell_height = float(cell_height)

        if verbose:
            log.critical('InterpolatedGrid: Building %d elements from %d x %d '
                         'samples' % (n_elements, n_samples_x, n_samples_y))

        self.elements = self._build_elements(samples)

        if verbose:
            log.critical('InterpolatedGrid: Building %s element search'
                         % search_class.__name__)
        self.search = search_class(self.elements,
                                   self.cell_width,
                                   self.cell_height,
                                   verbose=verbose)

    @classmethod
    def build(cls, samples, n_samples_x, n_samples_y,
              cell_width=default_cell_width,
              cell_height=default_cell_height, **kwargs):
        """Build a grid from a sample array. See __init__ for arguments."""

        return cls(samples, n_samples_x, n_samples_y,
                   cell_width=cell_width, cell_height=cell_height, **kwargs)

    @classmethod
    def from_pixel_grid(cls, pixel_grid, **kwargs):
        """Build a grid over the pixel centres of a PixelGrid."""

        return cls(pixel_grid.get_values(),
                   pixel_grid.n_pixels_x,
                   pixel_grid.n_pixels_y,
                   cell_width=pixel_grid.pixel_width,
                   cell_height=pixel_grid.pixel_height,
                   **kwargs)

    def _build_elements(self, samples):
        """Create one element per interior 2 x 2 block of samples.

        Corner indices follow from (row, col) alone:
        i, i+1, i+1+n_samples_x, i+n_samples_x with i = row*n_samples_x + col
        """

        nx = self.n_samples_x
        elements = []
        for row in range(self.n_elements_y):
            for col in range(self.n_elements_x):
                i = row*nx + col
                corner_ids = (i, i + 1, i + 1 + nx, i + nx)
                corner_values = [samples[k] for k in corner_ids]

                center = ((col + 1)*self.cell_width,
                          (row + 1)*self.cell_height)

                elements.append(InterpolationElement(center,
                                                     self.cell_width,
                                                     self.cell_height,
                                                     corner_values,
                                                     corner_ids))
        return elements

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __repr__(self):
        return 'Interpolated grid of %d x %d elements (cell %s x %s, %s)' \
               % (self.n_elements_x, self.n_elements_y,
                  self.cell_width, self.cell_height,
                  self.search.__class__.__name__)

    def get_element(self, id):
        """Return element number id."""

        if not is_index(id):
            msg = 'Element id must be an integer. I got %s' % repr(id)
            raise IndexOutOfRange(msg)
        if not 0 <= id < len(self.elements):
            msg = 'Element id %s is outside the grid (%d elements)' \
                  % (id, len(self.elements))
            raise IndexOutOfRange(msg)
        return self.elements[id]

    def get_neighbours(self, id):
        """Return the ids of the up to 8 elements adjacent to element id,
        in increasing order.
        """

        self.get_element(id)

        row, col = divmod(id, self.n_elements_x)
        neighbours = []
        for r in (row - 1, row, row + 1):
            if not 0 <= r < self.n_elements_y:
                continue
            for c in (col - 1, col, col + 1):
                if not 0 <= c < self.n_elements_x:
                    continue
                if (r, c) != (row, col):
                    neighbours.append(r*self.n_elements_x + c)
        return neighbours

    def get_extent(self):
        """Return (xmin, xmax, ymin, ymax) covered by the elements,
        or None for an empty grid.
        """

        if len(self.elements) == 0:
            return None

        first = self.elements[0].extents
        last = self.elements[-1].extents
        return first.xmin, last.xmax, first.ymin, last.ymax

    def find_element_id(self, point):
        """Return the id of the element containing point.

        point is an (x, y) pair, a Point_cartesian or a Point_polar.

        With the default search the element with the nearest centre wins,
        provided its squared distance is below cell_width + cell_height.
        Points that find no element give 0 under off_mesh='first_element'
        and None under off_mesh='not_found'.
        """

        x, y = self._as_cartesian(point)

        k = self.search.search(x, y)
        if k is None:
            log.debug('Point (%s, %s) is not on any element' % (x, y))
            if self.off_mesh == 'first_element':
                return 0
        return k

    def find_value_at(self, point, NODATA_value=default_NODATA_value,
                      output_type=None):
        """Return the value interpolated at point.

        point is an (x, y) pair, a Point_cartesian or a Point_polar.

        Points that find no element give NODATA_value under
        off_mesh='not_found'. Under the default policy they are evaluated
        on element 0. If output_type is given the value is passed through it,
        e.g. output_type=int.
        """

        x, y = self._as_cartesian(point)

        k = self.find_element_id((x, y))
        if k is None:
            value = NODATA_value
        else:
            value = self.get_element(k).value_at(x, y)

        if output_type is not None:
            return output_type(value)
        return value

    def find_value_at_polar(self, polar_point, **kwargs):
        """Return the value interpolated at polar_point (r, theta)."""

        return self.find_value_at(polar_to_cartesian(polar_point), **kwargs)

    def interpolate_block(self, point_coordinates,
                          NODATA_value=default_NODATA_value,
                          verbose=False):
        """Return the values interpolated at many points.

        point_coordinates: List of coordinate pairs [x, y] or an nx2
                           numeric array.

        Output follows the same rules as find_value_at, as a float array.
        """

        point_coordinates = ensure_points(point_coordinates)

        if verbose:
            log.critical('Locating %d points' % point_coordinates.shape[0])
        ids = self.search.search_block(point_coordinates)

        outside = num.flatnonzero(ids < 0)
        if len(outside) > 0:
            log.warning('%d of %d points are not on any element'
                        % (len(outside), len(ids)))
            if self.off_mesh == 'first_element':
                if len(self.elements) == 0:
                    self.get_element(0)
                ids[outside] = 0

        z = num.full(len(ids), NODATA_value, float)
        for k in num.unique(ids):
            if k < 0:
                continue
            mask = ids == k
            z[mask] = self.elements[k].values_at(point_coordinates[mask])

        return z

    def interpolate_polar(self, r, theta,
                          NODATA_value=default_NODATA_value,
                          verbose=False):
        """Return the values interpolated at polar points.

        r and theta are scalars or sequences that broadcast against each
        other, e.g. a sweep of angles at one radius.
        """

        points = polar_to_cartesian_array(r, theta)
        return self.interpolate_block(points,
                                      NODATA_value=NODATA_value,
                                      verbose=verbose)

    def _as_cartesian(self, point):
        if isinstance(point, Point_polar):
            return polar_to_cartesian(point)

        x, y = point
        return float(x), float(y)
