"""
Transformations between geodetic, geocentric Cartesian and spherical coordinates.

All angles are in radians and all lengths are in the unit of the ellipsoid's
semi-major axis (meters for the built-in reference ellipsoids). Scalar functions
take and return plain floats; the *_array variants broadcast over numpy arrays for
bulk conversion.
"""

__all__ = [
    'cartesian2geodetic', 'cartesian2geodetic_array', 'cartesian2spherical',
    'geodetic2cartesian', 'geodetic2cartesian_array', 'spherical2cartesian',
]

import math
from typing import Tuple, Union

import numpy as np

from geoellipsoids._const import POLE_TOLERANCE
from geoellipsoids.ellipsoid import Ellipsoid, ReferenceEllipsoid, WGS84

_EllipsoidLike = Union[Ellipsoid, ReferenceEllipsoid, str]


def geodetic2cartesian(
    lat: float,
    lon: float,
    h: float,
    ellipsoid: _EllipsoidLike = WGS84,
) -> Tuple[float, float, float]:
    """
    Convert geodetic (ellipsoidal) coordinates to geocentric Cartesian coordinates.

    Args:
        lat:
            Geodetic latitude, in radians [-pi/2, pi/2]

        lon:
            Longitude, in radians (-pi, pi]

        h:
            Ellipsoidal height

        ellipsoid: (Default WGS84)
            The reference ellipsoid, or its name

    Returns:
        (x, y, z)
    """
    ell = Ellipsoid.resolve(ellipsoid)
    e2 = ell.eccentricity_squared
    rn = ell.N(lat)

    cos_lat = math.cos(lat)
    return (
        (rn + h) * cos_lat * math.cos(lon),
        (rn + h) * cos_lat * math.sin(lon),
        ((1. - e2) * rn + h) * math.sin(lat),
    )


def cartesian2geodetic(
    x: float,
    y: float,
    z: float,
    ellipsoid: _EllipsoidLike = WGS84,
    pole_tolerance: float = POLE_TOLERANCE,
) -> Tuple[float, float, float]:
    """
    Convert geocentric Cartesian coordinates to geodetic latitude, longitude and
    ellipsoidal height.

    Uses the direct (non-iterative) method of Fukushima, which applies a single
    Halley correction to a Newton step and reaches near machine precision without
    a convergence loop:

        Fukushima, T., "Transformation from Cartesian to geodetic coordinates
        accelerated by Halley's method", J. Geodesy (2006), 79(12): 689-693

    Points on the polar axis have no defined longitude; it is reported as 0.
    Longitude is returned in (-pi, pi].

    Args:
        x:
            Cartesian x-component

        y:
            Cartesian y-component

        z:
            Cartesian z-component

        ellipsoid: (Default WGS84)
            The reference ellipsoid, or its name

        pole_tolerance: (Default 1e-32)
            Points with x^2 + y^2 <= a^2 * pole_tolerance are treated as lying on
            the polar axis

    Returns:
        (lat, lon, h)
    """
    ell = Ellipsoid.resolve(ellipsoid)
    a = ell.a
    e2 = ell.eccentricity_squared
    ep2 = 1. - e2
    ep = math.sqrt(ep2)

    p2 = x * x + y * y
    lon = math.atan2(y, x) if p2 else 0.
    if lon == -math.pi:
        lon = math.pi
    absz = abs(z)

    if p2 > a * a * pole_tolerance:
        p = math.sqrt(p2)

        # Normalize
        s0 = absz / a
        pn = p / a
        zp = ep * s0

        # Newton correction factors
        c0 = ep * pn
        c02 = c0 * c0
        s02 = s0 * s0
        a02 = c02 + s02
        a0 = math.sqrt(a02)
        a03 = a02 * a0
        d0 = zp * a03 + e2 * s02 * s0
        f0 = pn * a03 - e2 * c02 * c0

        # Halley correction factor
        b0 = 1.5 * e2 * e2 * s02 * c02 * pn * (a0 - ep)
        s1 = d0 * f0 - b0 * s0
        cp = ep * (f0 * f0 - b0 * c0)

        lat = math.atan(s1 / cp)
        s12 = s1 * s1
        cp2 = cp * cp
        h = (p * cp + absz * s1 - a * math.sqrt(ep2 * s12 + cp2)) / math.sqrt(s12 + cp2)
    else:
        lat = math.pi / 2
        h = absz - a * ep

    if z < 0:
        lat = -lat

    return lat, lon, h


def cartesian2spherical(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert geocentric Cartesian coordinates to spherical coordinates. The origin
    maps to (0, 0, 0).

    Returns:
        (r, lat, lon), with lat the geocentric latitude
    """
    r = math.sqrt(x * x + y * y + z * z)
    if r == 0:
        return 0., 0., 0.

    return r, math.atan2(z, math.hypot(x, y)), math.atan2(y, x)


def spherical2cartesian(r: float, lat: float, lon: float) -> Tuple[float, float, float]:
    """
    Convert spherical coordinates (radius, geocentric latitude, longitude) to
    Cartesian coordinates.

    Returns:
        (x, y, z)
    """
    cos_lat = math.cos(lat)
    return (
        r * cos_lat * math.cos(lon),
        r * cos_lat * math.sin(lon),
        r * math.sin(lat),
    )


def geodetic2cartesian_array(lat, lon, h, ellipsoid: _EllipsoidLike = WGS84):
    """
    Array form of geodetic2cartesian. Inputs are broadcast against each other.

    Args:
        lat:
            Geodetic latitudes, in radians (array-like)

        lon:
            Longitudes, in radians (array-like)

        h:
            Ellipsoidal heights (array-like)

        ellipsoid: (Default WGS84)
            The reference ellipsoid, or its name

    Returns:
        Tuple of numpy arrays (x, y, z)
    """
    ell = Ellipsoid.resolve(ellipsoid)
    lat, lon, h = np.broadcast_arrays(
        np.asarray(lat, dtype=float),
        np.asarray(lon, dtype=float),
        np.asarray(h, dtype=float),
    )
    rn = ell.N(lat)
    cos_lat = np.cos(lat)
    return (
        (rn + h) * cos_lat * np.cos(lon),
        (rn + h) * cos_lat * np.sin(lon),
        ((1. - ell.eccentricity_squared) * rn + h) * np.sin(lat),
    )


def cartesian2geodetic_array(
    x, y, z,
    ellipsoid: _EllipsoidLike = WGS84,
    pole_tolerance: float = POLE_TOLERANCE,
):
    """
    Array form of cartesian2geodetic. Inputs are broadcast against each other and
    the polar-axis case is selected element by element.

    Args:
        x:
            Cartesian x-components (array-like)

        y:
            Cartesian y-components (array-like)

        z:
            Cartesian z-components (array-like)

        ellipsoid: (Default WGS84)
            The reference ellipsoid, or its name

        pole_tolerance: (Default 1e-32)
            See cartesian2geodetic

    Returns:
        Tuple of numpy arrays (lat, lon, h)
    """
    ell = Ellipsoid.resolve(ellipsoid)
    a = ell.a
    e2 = ell.eccentricity_squared
    ep2 = 1. - e2
    ep = np.sqrt(ep2)

    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float),
    )
    p2 = x * x + y * y
    lon = np.where(p2 != 0, np.arctan2(y, x), 0.)
    lon = np.where(lon == -np.pi, np.pi, lon)
    absz = np.abs(z)
    on_axis = p2 <= a * a * pole_tolerance

    # The general branch divides by zero on the polar axis; those elements are
    # replaced below
    with np.errstate(divide='ignore', invalid='ignore'):
        p = np.sqrt(p2)
        s0 = absz / a
        pn = p / a
        zp = ep * s0
        c0 = ep * pn
        c02 = c0 * c0
        s02 = s0 * s0
        a02 = c02 + s02
        a0 = np.sqrt(a02)
        a03 = a02 * a0
        d0 = zp * a03 + e2 * s02 * s0
        f0 = pn * a03 - e2 * c02 * c0
        b0 = 1.5 * e2 * e2 * s02 * c02 * pn * (a0 - ep)
        s1 = d0 * f0 - b0 * s0
        cp = ep * (f0 * f0 - b0 * c0)
        s12 = s1 * s1
        cp2 = cp * cp

        lat = np.where(on_axis, np.pi / 2, np.arctan(s1 / cp))
        h = np.where(
            on_axis,
            absz - a * ep,
            (p * cp + absz * s1 - a * np.sqrt(ep2 * s12 + cp2)) / np.sqrt(s12 + cp2),
        )

    lat = np.where(z < 0, -lat, lat)
    return lat, lon, h
