"""
    Cartesian and polar points and conversions between them.
"""

from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester
