"""Pixel-centred view of a rectangular sample array.

   Every sample is a pixel of size pixel_width x pixel_height whose centre
   sits at

       (pixel_width/2 + col*pixel_width, pixel_height/2 + row*pixel_height)

   Pixels are numbered row by row starting at 1,

       id = col + n_pixels_x*row + 1

   so pixel id - 1 is the flat index of the sample. Interpolation elements
   of an InterpolatedGrid built from the same array have their corners on
   pixel centres.
"""

import numpy as num

from gridsample.config import default_grid_base_value
from gridsample.gridsample_exceptions import InvalidDimension, IndexOutOfRange
from gridsample.utilities.numerical_tools import ensure_numeric, \
     is_positive_size, is_index
import gridsample.utilities.log as log


class Pixel(object):
    """One sample of the source array with its position.
    """

    __slots__ = ('id', 'value', 'x', 'y', 'width', 'height')

    def __init__(self, id, value, x, y, width, height):
        self.id = id
        self.value = value
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def __repr__(self):
        return 'Pixel %d at (%s, %s) has a value of %s' \
               % (self.id, self.x, self.y, self.value)


class PixelGrid(object):

    def __init__(self,
                 n_pixels_x,
                 n_pixels_y,
                 pixel_width,
                 pixel_height,
                 grid_base_value=default_grid_base_value,
                 values=None,
                 verbose=False):
        """Build a grid of n_pixels_x by n_pixels_y pixels.

        Inputs:
          n_pixels_x, n_pixels_y: Number of pixels along x and y. May be 0.
          pixel_width, pixel_height: Pixel size, must be > 0.
          grid_base_value: Value of every pixel when values is None.
          values: Optional flat row-major (or n_pixels_y x n_pixels_x)
              array of pixel values. Copied.
        """

        n_pixels_x = int(n_pixels_x)
        n_pixels_y = int(n_pixels_y)
        if n_pixels_x < 0 or n_pixels_y < 0:
            msg = 'Pixel counts must not be negative. I got %d x %d' \
                  % (n_pixels_x, n_pixels_y)
            raise IndexOutOfRange(msg)

        if not is_positive_size(pixel_width):
            msg = 'Pixel width must be a positive number. I got %s' \
                  % pixel_width
            raise InvalidDimension(msg)
        if not is_positive_size(pixel_height):
            msg = 'Pixel height must be a positive number. I got %s' \
                  % pixel_height
            raise InvalidDimension(msg)

        self.n_pixels_x = n_pixels_x
        self.n_pixels_y = n_pixels_y
        self.pixel_width = float(pixel_width)
        self.pixel_height = float(pixel_height)

        n = n_pixels_x*n_pixels_y
        if values is None:
            self.values = num.full(n, float(grid_base_value))
        else:
            values = ensure_numeric(values, float).ravel()
            if len(values) < n:
                msg = 'Expected at least %d pixel values for a %d x %d grid. ' \
                      'I got %d' % (n, n_pixels_x, n_pixels_y, len(values))
                raise IndexOutOfRange(msg)
            self.values = num.array(values[:n], float)

        self.pixels = []
        for row in range(n_pixels_y):
            for col in range(n_pixels_x):
                pos_x = self.pixel_width/2 + col*self.pixel_width
                pos_y = self.pixel_height/2 + row*self.pixel_height
                k = col + n_pixels_x*row
                self.pixels.append(Pixel(k + 1,
                                         float(self.values[k]),
                                         pos_x,
                                         pos_y,
                                         self.pixel_width,
                                         self.pixel_height))

        if verbose:
            log.critical('PixelGrid: Built %d x %d pixels'
                         % (n_pixels_x, n_pixels_y))

    @classmethod
    def from_samples(cls, samples, n_pixels_x, n_pixels_y,
                     pixel_width, pixel_height, verbose=False):
        """Build a pixel grid holding the given sample values.
        """

        return cls(n_pixels_x, n_pixels_y, pixel_width, pixel_height,
                   values=samples, verbose=verbose)

    def __len__(self):
        return len(self.pixels)

    def __iter__(self):
        return iter(self.pixels)

    def __repr__(self):
        return 'PixelGrid(%d x %d pixels of %s x %s)' \
               % (self.n_pixels_x, self.n_pixels_y,
                  self.pixel_width, self.pixel_height)

    def get_values(self):
        """Return a copy of the pixel values, flat and row-major."""
        return self.values.copy()

    def get_pixel(self, id):
        """Return the pixel with the given 1-based id."""

        if not is_index(id):
            msg = 'Pixel id must be an integer. I got %s' % repr(id)
            raise IndexOutOfRange(msg)
        if not 1 <= id <= len(self.pixels):
            msg = 'Pixel id %s is outside the grid (1 to %d)' \
                  % (id, len(self.pixels))
            raise IndexOutOfRange(msg)
        return self.pixels[id - 1]

    def get_pixel_centres(self):
        """Return an n x 2 array of pixel centres in id order."""

        centres = num.zeros((len(self.pixels), 2), float)
        for k, pixel in enumerate(self.pixels):
            centres[k, :] = [pixel.x, pixel.y]
        return centres
