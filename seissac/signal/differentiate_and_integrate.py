# -*- coding: utf-8 -*-
"""
Finite difference derivatives and running integrals of evenly sampled data.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import numpy as np
from scipy.integrate import cumulative_trapezoid


def differentiate_two_point(data, dx):
    """
    Forward difference ``(x[i+1] - x[i]) / dx``.

    The result has one sample less than ``data`` and is centered half a
    sample after the first input sample.

    >>> differentiate_two_point(np.array([1., 2., 4.]), 0.5).tolist()
    [2.0, 4.0]
    """
    return np.diff(data) / dx


def differentiate_three_point(data, dx):
    """
    Centered difference ``(x[i+1] - x[i-1]) / (2 dx)``.

    The result has two samples less than ``data``; the first output sample
    belongs to the second input sample.
    """
    return (data[2:] - data[:-2]) / (2.0 * dx)


def differentiate_five_point(data, dx):
    """
    Five point centered difference.

    ``(2/3) (x[i+1] - x[i-1]) / dx - (1/12) (x[i+2] - x[i-2]) / dx`` for all
    samples with two neighbours on each side, and the three point difference
    for the second and second-to-last sample.  Like
    :func:`differentiate_three_point`, the result has two samples less than
    ``data`` and starts at the second input sample.
    """
    out = differentiate_three_point(data, dx)
    if len(data) > 4:
        out[1:-1] = ((2.0 / 3.0) * (data[3:-1] - data[1:-3]) -
                     (1.0 / 12.0) * (data[4:] - data[:-4])) / dx
    return out


def integrate_trapezium(data, dx):
    """
    Running trapezium rule integral.

    The result has one sample less than ``data``; sample ``i`` is the
    integral up to half a sample after input sample ``i``.
    """
    return cumulative_trapezoid(data, dx=dx)


def integrate_rectangle(data, dx):
    """
    Running rectangle rule integral, ``dx * cumsum(x)``.

    The result has as many samples as ``data``.
    """
    return dx * np.cumsum(data)
