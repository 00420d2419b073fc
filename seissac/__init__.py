# -*- coding: utf-8 -*-
"""
SeisSAC: Reading, writing and processing SAC seismic traces
===========================================================

SeisSAC reads and writes files in the binary format of the Seismic Analysis
Code (SAC), keeps the SAC header consistent with the trace data and provides
the common SAC processing operations: cutting, filtering, differentiation,
integration, tapering, rotation, time shifting and interpolation.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
__version__ = '0.1.0'

from seissac.sactrace import SACTrace  # NOQA
from seissac.util import (  # NOQA
    SacError, SacFormatError, SacEndianMismatchError, SacInvalidRangeError,
    SacValidationError, SacInvalidContentError, SacHeaderError)
from seissac.batch import read_wild, write_many  # NOQA

read = SACTrace.read


__all__ = ["__version__", "SACTrace", "read", "read_wild", "write_many",
           "SacError", "SacFormatError", "SacEndianMismatchError",
           "SacInvalidRangeError", "SacValidationError",
           "SacInvalidContentError", "SacHeaderError"]
