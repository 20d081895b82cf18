"""
Reference ellipsoids and the runtime Ellipsoid value type.

Commonly used reference ellipsoids are enumerated by ReferenceEllipsoid, each
carrying its fundamental constants (semi-major axis, flattening, name). An
Ellipsoid can be built from one of these or from any (a, f) pair; derived
constants are computed once, on first use.

Note that the semi-major axis is sometimes referred to as the "equatorial radius"
and the semi-minor axis as the "polar radius". Unless qualified otherwise, latitude
means geodetic latitude.
"""

__all__ = ['Ellipsoid', 'EllipsoidTraits', 'ReferenceEllipsoid', 'GRS80', 'PZ90', 'WGS84']

from enum import Enum
from functools import cached_property
import math
from typing import NamedTuple, Optional, Union

from geoellipsoids import core
from geoellipsoids._const import GRS80_A, GRS80_F, PZ90_A, PZ90_F, WGS84_A, WGS84_F
from geoellipsoids.conversion import convert_from_meters
from geoellipsoids.utils.logging import warn_once


class EllipsoidTraits(NamedTuple):
    """The fundamental geometric constants of a reference ellipsoid"""
    a: float
    f: float
    name: str


class ReferenceEllipsoid(Enum):
    """Well-known reference ellipsoids"""

    GRS80 = EllipsoidTraits(GRS80_A, GRS80_F, 'GRS80')
    WGS84 = EllipsoidTraits(WGS84_A, WGS84_F, 'WGS84')
    PZ90 = EllipsoidTraits(PZ90_A, PZ90_F, 'PZ90')

    @property
    def a(self) -> float:
        return self.value.a

    @property
    def f(self) -> float:
        return self.value.f

    @property
    def ellipsoid_name(self) -> str:
        return self.value.name

    @classmethod
    def from_name(cls, name: str) -> 'ReferenceEllipsoid':
        """
        Look up a reference ellipsoid by name. Matching ignores case as well as
        dashes, underscores and spaces, so 'wgs-84' resolves to WGS84.

        Args:
            name:
                The name of the reference ellipsoid

        Returns:
            ReferenceEllipsoid
        """
        key = ''.join(c for c in name.upper() if c not in '-_ ')
        if key not in cls.__members__:
            raise ValueError(
                f"Unknown reference ellipsoid '{name}'. Options: {list(cls.__members__.keys())}"
            )

        return cls.__members__[key]


class Ellipsoid:
    """
    A reference ellipsoid, defined by its semi-major axis (a) and flattening
    (f = (a - b) / a).

    Instances are immutable values: equal (a, f) pairs compare and hash equal.
    Parameters are not validated; the arithmetic of a geometrically invalid
    ellipsoid (a <= 0 or f >= 1) simply propagates NaN/inf.

    Args:
        a:
            The semi-major axis. Every length computed from this ellipsoid is
            expressed in the same unit (meters for the built-in references).

        f:
            The flattening

        name: (Optional)
            A label for the ellipsoid
    """

    __frozen = False

    def __init__(self, a: float, f: float, name: Optional[str] = None):
        self._a = float(a)
        self._f = float(f)
        self._name = name

        if not (math.isfinite(self._a) and math.isfinite(self._f)) or \
                self._a <= 0 or self._f >= 1:
            warn_once(
                f'Ellipsoid parameters a={self._a}, f={self._f} do not describe a valid '
                'ellipsoid; results will not be meaningful.'
            )

        self.__frozen = True

    def __setattr__(self, key, value):
        if self.__frozen:
            raise AttributeError(f'{self.__class__.__name__} is immutable')
        super().__setattr__(key, value)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        if self._name:
            return f'<Ellipsoid {self._name} (a={self._a}, f={self._f})>'
        return f'<Ellipsoid (a={self._a}, f={self._f})>'

    @classmethod
    def from_reference(cls, reference: Union['ReferenceEllipsoid', str]) -> 'Ellipsoid':
        """
        Create an Ellipsoid from a reference ellipsoid or its name.

        Args:
            reference:
                A ReferenceEllipsoid, or a name such as 'GRS80'

        Returns:
            Ellipsoid
        """
        if isinstance(reference, str):
            reference = ReferenceEllipsoid.from_name(reference)

        return cls(reference.a, reference.f, reference.ellipsoid_name)

    @classmethod
    def resolve(cls, ellipsoid: Union['Ellipsoid', 'ReferenceEllipsoid', str]) -> 'Ellipsoid':
        """Coerce an Ellipsoid, ReferenceEllipsoid or reference name to an Ellipsoid"""
        if isinstance(ellipsoid, Ellipsoid):
            return ellipsoid

        if isinstance(ellipsoid, ReferenceEllipsoid):
            return _REFERENCES[ellipsoid]

        if isinstance(ellipsoid, str):
            return _REFERENCES[ReferenceEllipsoid.from_name(ellipsoid)]

        raise TypeError(
            f'Expected an Ellipsoid, ReferenceEllipsoid or ellipsoid name, not {type(ellipsoid)}'
        )

    @property
    def a(self) -> float:
        return self._a

    @property
    def f(self) -> float:
        return self._f

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def semi_major(self) -> float:
        return self._a

    @property
    def flattening(self) -> float:
        return self._f

    @cached_property
    def eccentricity_squared(self) -> float:
        return core.eccentricity_squared(self._f)

    @cached_property
    def third_flattening(self) -> float:
        return core.third_flattening(self._f)

    @cached_property
    def semi_minor(self) -> float:
        return core.semi_minor(self._a, self._f)

    @cached_property
    def linear_eccentricity(self) -> float:
        return core.linear_eccentricity(self._a, self._f)

    @cached_property
    def polar_radius_of_curvature(self) -> float:
        return core.polar_radius_of_curvature(self._a, self._f)

    @cached_property
    def mean_earth_radius(self) -> float:
        return core.mean_earth_radius(self._a, self._f)

    def N(self, lat):  # pylint: disable=invalid-name
        """The normal radius of curvature at a (geodetic) latitude, in radians"""
        return core.N(self._a, self._f, lat)

    def M(self, lat):  # pylint: disable=invalid-name
        """The meridional radius of curvature at a (geodetic) latitude, in radians"""
        return core.M(self._a, self._f, lat)

    def geocentric_latitude(self, lat, h=None):
        """
        The geocentric latitude at a geodetic latitude.

        Args:
            lat:
                Geodetic latitude, in radians

            h: (Optional)
                Ellipsoidal height. If omitted the point is assumed to lie on the
                ellipsoid surface.

        Returns:
            Geocentric latitude, in radians
        """
        if h is None:
            return core.geocentric_latitude(self._f, lat)

        return core.geocentric_latitude_at_height(self._a, self._f, lat, h)

    def reduced_latitude(self, lat):
        """The parametric (reduced) latitude at a geodetic latitude, in radians"""
        return core.reduced_latitude(self._f, lat)

    def infinitesimal_meridian_arc(self, lat, dlat):
        """Arc length on the meridian for an infinitesimal latitude difference dlat"""
        return core.infinitesimal_meridian_arc(self._a, self._f, lat, dlat)

    def parallel_arc_length(self, lat, dlon):
        """Arc length on the parallel at lat for a longitude difference dlon"""
        return core.parallel_arc_length(self._a, self._f, lat, dlon)

    def to_units(self, unit: str) -> 'Ellipsoid':
        """
        Express this ellipsoid (assumed to be in meters) in another length unit.

        Args:
            unit:
                The target unit (kilometer='km', mile='mi', feet='ft',
                nautical mile='nmi', yard='yd', meter='m')

        Returns:
            Ellipsoid
        """
        name = f'{self._name} [{unit.lower()}]' if self._name else None
        return Ellipsoid(convert_from_meters(self._a, unit), self._f, name)


_REFERENCES = {ref: Ellipsoid.from_reference(ref) for ref in ReferenceEllipsoid}

GRS80 = _REFERENCES[ReferenceEllipsoid.GRS80]
WGS84 = _REFERENCES[ReferenceEllipsoid.WGS84]
PZ90 = _REFERENCES[ReferenceEllipsoid.PZ90]
