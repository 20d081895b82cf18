"""
Core functions of ellipsoidal geometry.

In geodesy the semi-major axis (a) and the flattening (f) are the usual defining
parameters of a reference ellipsoid, so every quantity here is derived from those
two values. Functions are built from numpy ufuncs and therefore accept either
scalars or arrays; out-of-domain parameters yield NaN/inf rather than raising.

References:
    Torge, W. (2001). Geodesy, 3rd ed., Walter de Gruyter.
"""

__all__ = [
    'M', 'N', 'eccentricity_squared', 'geocentric_latitude',
    'geocentric_latitude_at_height', 'infinitesimal_meridian_arc',
    'linear_eccentricity', 'mean_earth_radius', 'parallel_arc_length',
    'polar_radius_of_curvature', 'reduced_latitude', 'semi_minor',
    'third_flattening',
]

from typing import Tuple

import numpy as np


def eccentricity_squared(f):
    """
    The squared (first) eccentricity, e^2 = (a^2 - b^2) / a^2 = (2 - f) * f

    Args:
        f:
            Flattening

    Returns:
        Squared eccentricity
    """
    return (2. - f) * f


def third_flattening(f):
    """The third flattening, n = (a - b) / (a + b) = f / (2 - f)"""
    return f / (2. - f)


def semi_minor(a, f):
    """
    The semi-minor axis, b = a * (1 - f). Units follow those of the semi-major axis.

    Args:
        a:
            Semi-major axis

        f:
            Flattening

    Returns:
        Semi-minor axis
    """
    return a * (1. - f)


def linear_eccentricity(a, f):
    """The linear eccentricity, E = sqrt(a^2 - b^2)"""
    b = semi_minor(a, f)
    return np.sqrt(a * a - b * b)


def polar_radius_of_curvature(a, f):
    """The polar radius of curvature, c = a^2 / b"""
    b = semi_minor(a, f)
    return a * a / b


def mean_earth_radius(a, f):
    """
    The mean radius as defined by the IUGG, R1 = (2a + b) / 3

    See https://en.wikipedia.org/wiki/Earth_radius#Mean_radius
    """
    return (2. * a + semi_minor(a, f)) / 3.


def _normal_radius_and_sinlat(a, f, lat) -> Tuple:
    """Normal radius of curvature at lat, along with the sin(lat) used to compute it"""
    sinlat = np.sin(lat)
    return a / np.sqrt(1. - eccentricity_squared(f) * sinlat * sinlat), sinlat


def N(a, f, lat):  # pylint: disable=invalid-name
    """
    The normal radius of curvature (prime vertical) at a given latitude.

    Args:
        a:
            Semi-major axis

        f:
            Flattening

        lat:
            Geodetic latitude, in radians

    Returns:
        Normal radius of curvature, in the units of a
    """
    return _normal_radius_and_sinlat(a, f, lat)[0]


def M(a, f, lat):  # pylint: disable=invalid-name
    """
    The meridional radius of curvature at a given latitude.

    Args:
        a:
            Semi-major axis

        f:
            Flattening

        lat:
            Geodetic latitude, in radians

    Returns:
        Meridional radius of curvature, in the units of a
    """
    rn, sinlat = _normal_radius_and_sinlat(a, f, lat)
    e2 = eccentricity_squared(f)
    return rn * ((1. - e2) / (1. - e2 * sinlat * sinlat))


def geocentric_latitude(f, lat):
    """
    The geocentric latitude of a point lying ON the ellipsoid (height = 0), i.e. the
    angle between the equatorial plane and the radius from the centre to the point:

        theta = atan((1 - f)^2 * tan(phi))

    Geodetic and geocentric latitudes agree at the equator and at the poles and differ
    by a few minutes of arc in between (Torge, 2001, Eq. 4.11).

    For points off the surface use geocentric_latitude_at_height.

    Args:
        f:
            Flattening

        lat:
            Geodetic latitude, in radians

    Returns:
        Geocentric latitude, in radians
    """
    return np.arctan((1. - f) * (1. - f) * np.tan(lat))


def geocentric_latitude_at_height(a, f, lat, h):
    """
    The geocentric latitude of a point with ellipsoidal height h. The rectangular
    distance from the polar axis (rho) and height above the equator (z) are formed
    first, so the result is exact at any height.

    Args:
        a:
            Semi-major axis

        f:
            Flattening

        lat:
            Geodetic latitude, in radians

        h:
            Ellipsoidal height, in the units of a

    Returns:
        Geocentric latitude, in radians
    """
    rn, sinlat = _normal_radius_and_sinlat(a, f, lat)
    rho = (rn + h) * np.cos(lat)
    z = (rn * (1. - eccentricity_squared(f)) + h) * sinlat
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.where(rho == 0, np.copysign(np.pi / 2, z), np.arctan(z / rho))[()]


def reduced_latitude(f, lat):
    """
    The parametric (reduced) latitude: the angle to the point on the circumscribing
    sphere of radius a obtained by projecting the ellipsoid point parallel to the
    polar axis (Torge, 2001, Eq. 4.11).
    """
    return np.arctan((1. - f) * np.tan(lat))


def infinitesimal_meridian_arc(a, f, lat, dlat):
    """
    Arc length of an infinitesimal element on the meridian, M(lat) * dlat.

    Only valid for (very) small latitude differences; this is not a meridian arc
    integral. See https://en.wikipedia.org/wiki/Meridian_arc
    """
    return M(a, f, lat) * dlat


def parallel_arc_length(a, f, lat, dlon):
    """Arc length along the parallel at lat spanned by dlon radians of longitude"""
    return N(a, f, lat) * np.cos(lat) * dlon
