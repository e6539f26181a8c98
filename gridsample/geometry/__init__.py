"""
    Bounding boxes and the quadtree used to index them.
"""

from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester
