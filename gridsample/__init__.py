""" gridsample resamples a 2D field sampled on a rectangular grid, such as
    the pixels of an image, at arbitrary points. Query points are usually
    given in polar coordinates (r, theta).

    This is the public API to gridsample:

    >>> import gridsample
    >>> grid = gridsample.InterpolatedGrid(samples, 10, 10)
    >>> grid.find_value_at(gridsample.Point_polar(1.1, 0.2))

    The grid is made of bilinear interpolation elements spanning each 2 x 2
    block of neighbouring samples.
"""

__version__ = '1.0.0'

# ---------------------------------
# Setup the tester from numpy
# ---------------------------------
from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester

# --------------------------------
# Important basic classes
# --------------------------------
from gridsample.coordinate_transforms.point import Point_cartesian, \
     Point_polar, polar_to_cartesian, cartesian_to_polar, \
     polar_to_cartesian_array
from gridsample.fit_interpolate.interpolation_element import \
     InterpolationElement
from gridsample.fit_interpolate.interpolated_grid import InterpolatedGrid, \
     interpolate
from gridsample.fit_interpolate.search_functions import ElementSearch, \
     NearestCentreSearch, ContainmentSearch, QuadtreeSearch, KDTreeSearch
from gridsample.pixel_grid.pixel_grid import Pixel, PixelGrid
from gridsample.gridsample_exceptions import GridsampleError, \
     InvalidDimension, IndexOutOfRange
