"""
Representations of a specific point in geodetic, geocentric Cartesian and spherical
coordinates
"""

__all__ = ['CartesianPoint', 'GeodeticPoint', 'SphericalPoint']

from functools import cached_property
import math
from typing import List, Tuple, Union

import numpy as np

from geoellipsoids.conversion import normalize_angle
from geoellipsoids.ellipsoid import Ellipsoid, ReferenceEllipsoid, WGS84
from geoellipsoids.transformations import (
    cartesian2geodetic, cartesian2spherical, geodetic2cartesian, spherical2cartesian
)
from geoellipsoids.utils.functions import round_half_up
from geoellipsoids.utils.logging import warn_once

_EllipsoidLike = Union[Ellipsoid, ReferenceEllipsoid, str]


class GeodeticPoint:
    """
    Representation of a point by geodetic latitude, longitude (both in radians) and
    ellipsoidal height.

    Latitudes beyond a pole are folded back over it (shifting the longitude by pi)
    and longitudes are wrapped into (-pi, pi], unless _bounded is False.
    """

    def __init__(
        self,
        lat: Union[float, int, str],
        lon: Union[float, int, str],
        h: Union[float, int, str] = 0.,
        _bounded: bool = True,
    ):
        lat, lon = float(lat), float(lon)
        if _bounded and math.isfinite(lat) and math.isfinite(lon):
            if not -math.pi <= lat < math.pi:
                lat = normalize_angle(lat, -math.pi, math.pi)
            if not -math.pi / 2 <= lat <= math.pi / 2:
                # Crosses one of the poles
                lat = math.copysign(math.pi, lat) - lat
                lon += math.pi

            if not -math.pi < lon <= math.pi:
                # Crosses the antimeridian
                lon = normalize_angle(lon, -math.pi, math.pi)
                if lon == -math.pi:
                    lon = math.pi

        self.lat = lat
        self.lon = lon
        self.h = float(h)

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.lat == other.lat and
            self.lon == other.lon and
            self.h == other.h
        )

    def __hash__(self):
        return hash((self.lat, self.lon, self.h))

    def __repr__(self):
        return f'<GeodeticPoint({self.lat}, {self.lon}, {self.h})>'

    @cached_property
    def normal(self) -> List[float]:
        """The outward unit normal of the ellipsoid at this latitude/longitude [x,y,z]"""
        return [
            math.cos(self.lat) * math.cos(self.lon),
            math.cos(self.lat) * math.sin(self.lon),
            math.sin(self.lat)
        ]

    @classmethod
    def from_degrees(cls, lat: float, lon: float, h: float = 0.):
        """Creates a GeodeticPoint from a latitude and longitude in decimal degrees"""
        return GeodeticPoint(math.radians(lat), math.radians(lon), h)

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[int, int, float, str],
        lon: Tuple[int, int, float, str],
        h: float = 0.,
    ):
        """
        Creates a GeodeticPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            h:
                (Default 0.) The ellipsoidal height

        Returns:
            GeodeticPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            if dms[3] not in ('N', 'S', 'E', 'W'):
                warn_once(f"Unrecognized DMS quadrant '{dms[3]}'; treated as 'N'/'E'.")
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return GeodeticPoint.from_degrees(convert(lat), convert(lon), h)

    def to_degrees(self) -> Tuple[float, float, float]:
        """Converts the point to a tuple of (latitude, longitude) in degrees, and height"""
        return math.degrees(self.lat), math.degrees(self.lon), self.h

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted (latitude, longitude), each as (degrees, minutes, seconds, hemisphere)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        lat, lon, _ = self.to_degrees()
        return (
            (*convert(lat), 'N' if lat >= 0 else 'S'),
            (*convert(lon), 'E' if lon >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the point to a tuple of (latitude, longitude, height)"""
        return self.lat, self.lon, self.h

    def to_cartesian(self, ellipsoid: _EllipsoidLike = WGS84) -> 'CartesianPoint':
        """
        Convert this point to geocentric Cartesian coordinates.

        Args:
            ellipsoid: (Default WGS84)
                The reference ellipsoid, or its name

        Returns:
            CartesianPoint
        """
        return CartesianPoint(*geodetic2cartesian(self.lat, self.lon, self.h, ellipsoid))

    def to_spherical(self, ellipsoid: _EllipsoidLike = WGS84) -> 'SphericalPoint':
        """Convert this point to spherical coordinates (via its Cartesian position)"""
        return self.to_cartesian(ellipsoid).to_spherical()


class CartesianPoint:
    """Representation of a point in geocentric Cartesian coordinates"""

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        z: Union[float, int, str],
    ):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __eq__(self, other):
        if not isinstance(other, CartesianPoint):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<CartesianPoint({self.x}, {self.y}, {self.z})>'

    @property
    def norm(self) -> float:
        """Distance from the origin"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def to_float(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_geodetic(self, ellipsoid: _EllipsoidLike = WGS84, **kwargs) -> GeodeticPoint:
        """
        Convert this point to geodetic coordinates.

        Args:
            ellipsoid: (Default WGS84)
                The reference ellipsoid, or its name

        Keyword Args:
            pole_tolerance: (float) (Default 1e-32)
                Relative (squared) distance from the polar axis below which the
                point is treated as lying on it

        Returns:
            GeodeticPoint
        """
        lat, lon, h = cartesian2geodetic(self.x, self.y, self.z, ellipsoid, **kwargs)
        return GeodeticPoint(lat, lon, h)

    def to_spherical(self) -> 'SphericalPoint':
        return SphericalPoint(*cartesian2spherical(self.x, self.y, self.z))


class SphericalPoint:
    """
    Representation of a point by geocentric radius, geocentric latitude and longitude
    (angles in radians)
    """

    def __init__(
        self,
        r: Union[float, int, str],
        lat: Union[float, int, str],
        lon: Union[float, int, str],
    ):
        self.r = float(r)
        self.lat = float(lat)
        self.lon = float(lon)

    def __eq__(self, other):
        if not isinstance(other, SphericalPoint):
            return False

        return self.r == other.r and self.lat == other.lat and self.lon == other.lon

    def __hash__(self):
        return hash((self.r, self.lat, self.lon))

    def __repr__(self):
        return f'<SphericalPoint({self.r}, {self.lat}, {self.lon})>'

    def to_float(self) -> Tuple[float, float, float]:
        return self.r, self.lat, self.lon

    def to_cartesian(self) -> CartesianPoint:
        return CartesianPoint(*spherical2cartesian(self.r, self.lat, self.lon))

    def to_geodetic(self, ellipsoid: _EllipsoidLike = WGS84) -> GeodeticPoint:
        """Convert this point to geodetic coordinates (via its Cartesian position)"""
        return self.to_cartesian().to_geodetic(ellipsoid)
