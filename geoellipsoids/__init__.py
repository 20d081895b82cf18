
from geoellipsoids._version import __version__  # noqa: F401
from geoellipsoids.utils.logging import LOGGER
from geoellipsoids.ellipsoid import (
    Ellipsoid, EllipsoidTraits, ReferenceEllipsoid, GRS80, PZ90, WGS84
)
from geoellipsoids.transformations import (
    cartesian2geodetic, cartesian2geodetic_array, cartesian2spherical,
    geodetic2cartesian, geodetic2cartesian_array, spherical2cartesian
)
from geoellipsoids.coordinates import CartesianPoint, GeodeticPoint, SphericalPoint
from geoellipsoids.topocentric import cartesian2enu, enu2dae, enu2dae_partials, enu_rotation

__all__ = [
    'CartesianPoint',
    'Ellipsoid',
    'EllipsoidTraits',
    'GeodeticPoint',
    'GRS80',
    'PZ90',
    'ReferenceEllipsoid',
    'SphericalPoint',
    'WGS84',
    'cartesian2enu',
    'cartesian2geodetic',
    'cartesian2geodetic_array',
    'cartesian2spherical',
    'enu2dae',
    'enu2dae_partials',
    'enu_rotation',
    'geodetic2cartesian',
    'geodetic2cartesian_array',
    'spherical2cartesian',
    'LOGGER',
]
