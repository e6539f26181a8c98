"""
    Logging and numerical helpers.
"""

from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester
