# -*- coding: utf-8 -*-
"""
Geodetic utilities: great circle distance and azimuths on an ellipsoid.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import abc
import math

from geographiclib.geodesic import Geodesic


WGS84_A = 6378137.0
WGS84_B = 6356752.3142
WGS84_F = (WGS84_A - WGS84_B) / WGS84_A


def _check_latitude(latitude, variable_name='latitude'):
    """
    Check whether latitude is in the -90 to +90 range.
    """
    if latitude > 90 or latitude < -90:
        msg = '{} out of bounds! (-90 <= {} <=90)'.format(
            variable_name, variable_name)
        raise ValueError(msg)


class GeodesyProvider(metaclass=abc.ABCMeta):
    """
    Interface of anything that can solve the inverse geodesic problem for
    SAC headers.
    """
    @abc.abstractmethod
    def great_circle(self, lon0, lat0, lon1, lat1, flattening=WGS84_F):
        """
        Distance and azimuths between two points on an ellipsoid.

        :param lon0: Longitude of point A in degrees.
        :param lat0: Latitude of point A in degrees.
        :param lon1: Longitude of point B in degrees.
        :param lat1: Latitude of point B in degrees.
        :param flattening: Flattening of the ellipsoid.
        :return: (distance in degrees, azimuth A->B in degrees,
            azimuth B->A in degrees), azimuths in the range [0, 360).
        """
        pass


class GeographicLibGeodesy(GeodesyProvider):
    """
    Geodesy provider backed by :mod:`geographiclib`.

    The distance is the geodesic length on an ellipsoid of unit semi-major
    axis, expressed in degrees.
    """
    def great_circle(self, lon0, lat0, lon1, lat1, flattening=WGS84_F):
        _check_latitude(lat0, 'lat0')
        _check_latitude(lat1, 'lat1')
        result = Geodesic(a=1.0, f=flattening).Inverse(lat0, lon0, lat1, lon1)
        azim = result['azi1'] % 360.0
        bazim = (result['azi2'] + 180.0) % 360.0
        return (math.degrees(result['s12']), azim, bazim)


def great_circle(lon0, lat0, lon1, lat1, flattening=WGS84_F):
    """
    Distance in degrees, azimuth and back azimuth between two points, using
    :class:`GeographicLibGeodesy`.

    .. rubric:: Example

    >>> dist, az, baz = great_circle(0.0, 0.0, 10.0, 0.0)
    >>> print(round(dist, 4), round(az, 1), round(baz, 1))
    10.0 90.0 270.0
    """
    return DEFAULT_GEODESY.great_circle(lon0, lat0, lon1, lat1,
                                        flattening=flattening)


DEFAULT_GEODESY = GeographicLibGeodesy()
