#! /usr/bin/env python
#
# Setup.py layout taken from scikit learn

descr = """Bilinear resampling of rectangular sample grids at polar points"""

import os

from setuptools import setup, find_packages


#==============================================================================
DISTNAME = 'gridsample'
DESCRIPTION = 'Bilinear resampling of rectangular sample grids at polar points'
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)),
                       'README.rst')) as f:
    LONG_DESCRIPTION = f.read()
LICENSE = 'GPL'
VERSION = '1.0.0'
#===============================================================================


###############################################################################
def setup_package():

    metadata = dict(name=DISTNAME,
                    description=DESCRIPTION,
                    license=LICENSE,
                    version=VERSION,
                    long_description=LONG_DESCRIPTION,
                    long_description_content_type='text/x-rst',
                    packages=find_packages(include=['gridsample',
                                                    'gridsample.*']),
                    python_requires='>=3.8',
                    install_requires=['numpy',
                                      'scipy'],
                    extras_require={'test': ['pytest']},
                    zip_safe=False,
                    classifiers=['Intended Audience :: Science/Research',
                                 'Intended Audience :: Developers',
                                 'License :: OSI Approved',
                                 'Programming Language :: Python',
                                 'Topic :: Software Development',
                                 'Topic :: Scientific/Engineering',
                                 'Operating System :: POSIX',
                                 'Operating System :: Unix',
                                 'Operating System :: MacOS',
                                 'Operating System :: Microsoft :: Windows',
                                 'Programming Language :: Python :: 3',
                                 ])

    setup(**metadata)


if __name__ == "__main__":
    setup_package()
