# -*- coding: utf-8 -*-
# ------------------------------------------------------------------
# Filename: rotate.py
#  Purpose: Rotation of horizontal component pairs
# ------------------------------------------------------------------
"""
Rotation of orthogonal horizontal component pairs.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from math import cos, radians, sin

import numpy as np


def rotate_through(x, y, phi):
    """
    Rotate a pair of horizontal components clockwise by ``phi`` degrees.

    Applies the rotation matrix ``[[cos(phi), sin(phi)], [-sin(phi),
    cos(phi)]]`` to every sample pair ``(x[i], y[i])``.

    :type x: :class:`~numpy.ndarray`
    :param x: Data of the first component.
    :type y: :class:`~numpy.ndarray`
    :param y: Data of the second component, 90 degrees clockwise of x.
    :type phi: float
    :param phi: Rotation angle in degrees.
    :return: The rotated components, in the order of input.
    """
    if len(x) != len(y):
        raise TypeError("Component 1 and 2 have different length.")
    phi = radians(phi)
    x_new = cos(phi) * np.asarray(x) + sin(phi) * np.asarray(y)
    y_new = -sin(phi) * np.asarray(x) + cos(phi) * np.asarray(y)
    return x_new, y_new


def is_orthogonal(azimuth1, azimuth2, tolerance=1e-3):
    """
    Check that two component azimuths are 90 degrees apart, modulo 180.

    >>> is_orthogonal(10.0, 280.0)
    True
    >>> is_orthogonal(0.0, 180.0)
    False
    """
    return abs(abs(azimuth2 - azimuth1) % 180.0 - 90.0) <= tolerance
