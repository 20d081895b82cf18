"""
East-North-Up (ENU) topocentric helpers.

The ENU frame is right-handed and centred on an observer: East and North are
tangent to the ellipsoid, Up is along the ellipsoid normal. Azimuth is measured
clockwise from North in [0, 2*pi); elevation is the angle above the local
horizon.
"""

__all__ = ['cartesian2enu', 'enu2dae', 'enu2dae_partials', 'enu_rotation']

from typing import Sequence, Tuple, Union

import numpy as np

from geoellipsoids.conversion import normalize_angle
from geoellipsoids.ellipsoid import Ellipsoid, ReferenceEllipsoid, WGS84
from geoellipsoids.transformations import cartesian2geodetic

_EllipsoidLike = Union[Ellipsoid, ReferenceEllipsoid, str]


def enu_rotation(lat: float, lon: float) -> np.ndarray:
    """
    The rotation matrix taking a geocentric Cartesian vector into the ENU frame at
    the given geodetic latitude and longitude.

    Args:
        lat:
            Geodetic latitude of the observer, in radians

        lon:
            Longitude of the observer, in radians

    Returns:
        3x3 numpy array whose rows are the E, N and U axes
    """
    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    sin_lon, cos_lon = np.sin(lon), np.cos(lon)
    return np.array([
        [-sin_lon, cos_lon, 0.],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
    ])


def cartesian2enu(
    observer: Sequence[float],
    target: Sequence[float],
    ellipsoid: _EllipsoidLike = WGS84,
) -> np.ndarray:
    """
    The ENU displacement of a target as seen from an observer.

    Args:
        observer:
            Geocentric Cartesian position [x, y, z] of the observer

        target:
            Geocentric Cartesian position [x, y, z] of the target

        ellipsoid: (Default WGS84)
            The reference ellipsoid used to locate the observer's horizon

    Returns:
        numpy array [e, n, u]
    """
    observer = np.asarray(observer, dtype=float)
    lat, lon, _ = cartesian2geodetic(*observer, ellipsoid)
    return enu_rotation(lat, lon) @ (np.asarray(target, dtype=float) - observer)


def enu2dae(enu: Sequence[float]) -> Tuple[float, float, float]:
    """
    Distance, azimuth and elevation of an ENU displacement vector.

    Args:
        enu:
            The displacement [e, n, u]

    Returns:
        (distance, azimuth, elevation); angles in radians
    """
    e, n, u = np.asarray(enu, dtype=float)
    rho = np.hypot(e, n)

    azimuth = normalize_angle(float(np.arctan2(e, n)))
    with np.errstate(divide='ignore', invalid='ignore'):
        elevation = float(np.arctan(u / rho))

    return float(np.sqrt(rho * rho + u * u)), azimuth, elevation


def enu2dae_partials(
    enu: Sequence[float]
) -> Tuple[float, float, float, np.ndarray, np.ndarray]:
    """
    Distance, azimuth and elevation of an ENU displacement vector, along with the
    partial derivatives of azimuth and elevation with respect to the ENU
    components.

    The partials are undefined for a vector along the Up axis (e = n = 0).

    Args:
        enu:
            The displacement [e, n, u]

    Returns:
        (distance, azimuth, elevation, dA/d[e,n,u], dE/d[e,n,u])
    """
    e, n, u = np.asarray(enu, dtype=float)
    distance, azimuth, elevation = enu2dae(enu)

    rho2 = e * e + n * n
    rho = np.sqrt(rho2)
    r2 = rho2 + u * u
    with np.errstate(divide='ignore', invalid='ignore'):
        d_azimuth = np.array([n / rho2, -e / rho2, 0.])
        d_elevation = np.array([-e * u / rho / r2, -n * u / rho / r2, rho / r2])

    return distance, azimuth, elevation, d_azimuth, d_elevation
