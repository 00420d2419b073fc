# -*- coding: utf-8 -*-
"""
seissac.geodetics - Geodesy providers for SAC headers
=====================================================

Distance and azimuth calculations used to keep the SAC headers ``gcarc``,
``az`` and ``baz`` consistent with the event and station coordinates.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from .base import (DEFAULT_GEODESY, WGS84_A, WGS84_B, WGS84_F,  # NOQA
                   GeodesyProvider, GeographicLibGeodesy, great_circle)
