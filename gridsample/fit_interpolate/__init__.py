"""
    2D grid interpolation.

    Builds bilinear interpolation elements over a rectangular sample array,
    locates the element a point belongs to, and allows data to be sampled
    at any given point.
"""

from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester
