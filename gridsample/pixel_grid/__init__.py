"""
    Pixel-centred view of a rectangular sample array.
"""

from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester
