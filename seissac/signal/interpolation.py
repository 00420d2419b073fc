# -*- coding: utf-8 -*-
"""
Spline interpolation of evenly sampled data onto a new time grid.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import abc

from scipy.interpolate import InterpolatedUnivariateSpline


class SplineFitter(metaclass=abc.ABCMeta):
    """
    Interface of spline back ends.
    """
    @abc.abstractmethod
    def fit_spline(self, times, data, degree=2):
        """
        Fit an interpolating spline of the given degree through the samples
        and return a model usable by :meth:`evaluate`.
        """
        pass

    @abc.abstractmethod
    def evaluate(self, model, new_times):
        """
        Evaluate a fitted model at new times.
        """
        pass


class ScipySplineFitter(SplineFitter):
    """
    Interpolating splines from
    :class:`scipy.interpolate.InterpolatedUnivariateSpline`.

    Points outside of the fitted range are extrapolated.
    """
    def fit_spline(self, times, data, degree=2):
        return InterpolatedUnivariateSpline(times, data, k=degree)

    def evaluate(self, model, new_times):
        return model(new_times)


DEFAULT_FITTER = ScipySplineFitter()


def interpolate_spline(data, old_times, new_times, degree=2, fitter=None):
    """
    Resample data given at ``old_times`` onto ``new_times``.

    :param degree: Spline degree, needs at least ``degree + 1`` samples.
    :param fitter: A :class:`SplineFitter`, by default
        :class:`ScipySplineFitter`.
    """
    fitter = fitter or DEFAULT_FITTER
    model = fitter.fit_spline(old_times, data, degree=degree)
    return fitter.evaluate(model, new_times)
