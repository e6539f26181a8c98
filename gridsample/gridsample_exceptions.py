"""Exceptions used by gridsample
"""


class GridsampleError(Exception):
    """ Generic gridsample error. """
    pass

class InvalidDimension(GridsampleError, ValueError):
    """ Element, pixel or cell size is not a positive number. """
    pass

class IndexOutOfRange(GridsampleError, IndexError):
    """ Sample array too short, or an element/pixel id outside the grid. """
    pass
