# -*- coding: utf-8 -*-
"""
seissac.signal - Array level signal processing for SAC traces
=============================================================
Filtering, finite differences, running integrals, rotation of horizontal
component pairs and spline interpolation on plain NumPy arrays.  The trace
level operations in :mod:`seissac.processing` are built on top of these.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from .filter import (FilterDesigner, FilterSpec, Prototype,  # NOQA
                     ScipyFilterDesigner, filter_data)
from .interpolation import ScipySplineFitter, SplineFitter  # NOQA
