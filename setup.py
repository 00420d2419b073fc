#! /usr/bin/env python
# -*- coding: utf-8 -*-
"""
SeisSAC - reading, writing and processing SAC seismic traces.

SeisSAC reads and writes the binary file format of the Seismic Analysis Code
(SAC), keeps the SAC header consistent with the trace data and provides the
common SAC trace processing operations: cutting, filtering, differentiation,
integration, tapering, rotation, time shifting and interpolation.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import inspect
import os
import sys

from setuptools import find_packages, setup


# The minimum python version which can be used to run SeisSAC
MIN_PYTHON_VERSION = (3, 8)

# Fail fast if the user is on an unsupported version of python.
if sys.version_info < MIN_PYTHON_VERSION:
    msg = ("SeisSAC requires python version >= {}".format(MIN_PYTHON_VERSION) +
           " you are using python version {}".format(sys.version_info))
    print(msg, file=sys.stderr)
    sys.exit(1)

# Directory of the current file in the (hopefully) most reliable way
# possible
SETUP_DIRECTORY = os.path.dirname(os.path.abspath(inspect.getfile(
    inspect.currentframe())))

DOCSTRING = __doc__.split("\n")

# Hard dependencies needed to install/run SeisSAC.
INSTALL_REQUIRES = [
    'numpy>=1.20',
    'scipy>=1.7',
    'decorator',
    'geographiclib',
]
# Extra dependencies
EXTRAS_REQUIRES = {
    'tests': [
        'pytest',
    ],
}
EXTRAS_REQUIRES['all'] = [dep for depl in EXTRAS_REQUIRES.values()
                          for dep in depl]

KEYWORDS = [
    'SAC', 'Seismic Analysis Code', 'seismology', 'waveform', 'filter',
    'rotation', 'interpolation', 'taper', 'great circle', 'geodesy']


def get_version():
    with open(os.path.join(SETUP_DIRECTORY, 'seissac', '__init__.py')) as fh:
        for line in fh:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip("'\"")
    raise RuntimeError("Unable to find version string.")


def setupPackage():
    # setup package
    setup(
        name='seissac',
        version=get_version(),
        description=DOCSTRING[1],
        long_description="\n".join(DOCSTRING[3:]),
        author='The SeisSAC Development Team',
        license='GNU Lesser General Public License, Version 3 (LGPLv3)',
        platforms='OS Independent',
        classifiers=[
            'Development Status :: 4 - Beta',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: '
                'GNU Lesser General Public License v3 (LGPLv3)',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Physics'],
        keywords=KEYWORDS,
        packages=find_packages(),
        include_package_data=True,
        zip_safe=False,
        python_requires=f'>={MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]}',
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRES,
    )


if __name__ == '__main__':
    setupPackage()
