import math

import numpy as np
import pytest

from geoellipsoids import CartesianPoint, GeodeticPoint, SphericalPoint
from geoellipsoids.ellipsoid import GRS80, WGS84
from tests.functions import assert_points_equal


def test_geodetic_point_init():
    p = GeodeticPoint(0.1, 0.2, 30.)
    assert p.lat == 0.1
    assert p.lon == 0.2
    assert p.h == 30.

    p = GeodeticPoint('0.1', '0.2')
    assert (p.lat, p.lon, p.h) == (0.1, 0.2, 0.)

    # Longitude adjustment
    assert GeodeticPoint(0., -math.pi).lon == math.pi
    assert GeodeticPoint(0., 3 * math.pi / 2).lon == pytest.approx(-math.pi / 2)
    assert GeodeticPoint(0., -3 * math.pi / 2).lon == pytest.approx(math.pi / 2)

    # Latitude adjustment
    p = GeodeticPoint(math.pi / 2 + 0.1, 0.5)
    assert p.lat == pytest.approx(math.pi / 2 - 0.1)
    assert p.lon == pytest.approx(0.5 - math.pi)

    p = GeodeticPoint(-math.pi / 2 - 0.1, -0.5)
    assert p.lat == pytest.approx(-math.pi / 2 + 0.1)
    assert p.lon == pytest.approx(math.pi - 0.5)

    # Unbounded points don't auto-adjust
    assert GeodeticPoint(2., 4., _bounded=False).to_float() == (2., 4., 0.)


def test_geodetic_point_large_angles():
    for lat, lon in ((0., 1e17), (1e17, 0.), (-1e17, -1e12), (1e12, 7.5), (3 * math.pi, 0.2)):
        p = GeodeticPoint(lat, lon)
        assert -math.pi / 2 <= p.lat <= math.pi / 2
        assert -math.pi < p.lon <= math.pi

    # Past the pole and back by a full turn
    p = GeodeticPoint(math.pi / 2 + 0.1 + 4 * math.pi, 0.5 + 6 * math.pi)
    assert p.lat == pytest.approx(math.pi / 2 - 0.1)
    assert p.lon == pytest.approx(0.5 - math.pi)

    # Non-finite values are left alone
    assert math.isnan(GeodeticPoint(float('nan'), 0.).lat)


def test_geodetic_point_eq_hash():
    assert GeodeticPoint(0.1, 0.2) == GeodeticPoint(0.1, 0.2, 0.)
    assert GeodeticPoint(0.1, 0.2) != GeodeticPoint(0.1, 0.2, 1.)
    assert GeodeticPoint(0.1, 0.2) != (0.1, 0.2, 0.)

    points = [GeodeticPoint(0., 0.), GeodeticPoint(0., 0.), GeodeticPoint(1., 1.)]
    assert len(set(points)) == 2


def test_geodetic_point_repr():
    assert repr(GeodeticPoint(0.5, 1., 2.)) == '<GeodeticPoint(0.5, 1.0, 2.0)>'


def test_geodetic_point_degrees():
    p = GeodeticPoint.from_degrees(45., -90., 10.)
    assert p.lat == pytest.approx(math.pi / 4)
    assert p.lon == pytest.approx(-math.pi / 2)
    assert p.to_degrees() == pytest.approx((45., -90., 10.))


def test_geodetic_point_to_dms():
    assert GeodeticPoint.from_degrees(51.509865, -0.118092).to_dms() == (
        (51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')
    )


def test_geodetic_point_from_dms():
    assert GeodeticPoint.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E')) == GeodeticPoint(0., 0.)
    assert_points_equal(
        GeodeticPoint.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W'), 12.),
        GeodeticPoint.from_degrees(51.509865, -0.118092, 12.),
    )


def test_geodetic_point_from_dms_bad_quadrant(caplog):
    p = GeodeticPoint.from_dms((10, 0, 0.0, 'Q'), (0, 0, 0.0, 'E'))
    assert "Unrecognized DMS quadrant 'Q'" in caplog.text
    assert p.lat == pytest.approx(math.radians(10.))


def test_geodetic_point_normal():
    assert GeodeticPoint(0., 0.).normal == [1., 0., 0.]
    normal = GeodeticPoint(0.4, 1.3).normal
    assert math.sqrt(sum(x * x for x in normal)) == pytest.approx(1.)


def test_geodetic_point_to_cartesian():
    assert GeodeticPoint(0., 0.).to_cartesian() == CartesianPoint(WGS84.a, 0., 0.)
    assert_points_equal(
        GeodeticPoint(math.pi / 2, 0.3, 50.).to_cartesian(GRS80),
        CartesianPoint(0., 0., GRS80.semi_minor + 50.),
        abs_tol=1e-6,
    )


def test_geodetic_point_to_spherical():
    sph = GeodeticPoint(0., 0.7, 100.).to_spherical()
    assert_points_equal(sph, SphericalPoint(WGS84.a + 100., 0., 0.7), abs_tol=1e-6)

    # Spherical (geocentric) latitude is smaller than geodetic latitude
    sph = GeodeticPoint(0.7, 0., 0.).to_spherical()
    assert sph.lat == pytest.approx(WGS84.geocentric_latitude(0.7), abs=1e-12)


def test_cartesian_point():
    p = CartesianPoint(3., '4', 12)
    assert p.to_float() == (3., 4., 12.)
    assert p.norm == 13.
    assert np.array_equal(p.to_array(), np.array([3., 4., 12.]))
    assert repr(p) == '<CartesianPoint(3.0, 4.0, 12.0)>'
    assert p == CartesianPoint(3., 4., 12.)
    assert p != CartesianPoint(3., 4., 13.)
    assert len({p, CartesianPoint(3., 4., 12.)}) == 1


def test_cartesian_point_to_geodetic():
    assert_points_equal(
        CartesianPoint(WGS84.a, 0., 0.).to_geodetic(),
        GeodeticPoint(0., 0., 0.),
        abs_tol=1e-8
    )

    geod = GeodeticPoint(-0.9, 2.2, 812.)
    assert_points_equal(geod.to_cartesian('GRS80').to_geodetic('GRS80'), geod, abs_tol=1e-7)

    # Longitude at the pole is 0 by convention
    assert CartesianPoint(0., 0., -7e6).to_geodetic().to_float()[:2] == (-math.pi / 2, 0.)

    p = CartesianPoint(1e-6, 0., WGS84.semi_minor).to_geodetic(pole_tolerance=1e-20)
    assert p.lat == math.pi / 2


def test_spherical_point():
    p = SphericalPoint(1., 0., 0.)
    assert p.to_float() == (1., 0., 0.)
    assert repr(p) == '<SphericalPoint(1.0, 0.0, 0.0)>'
    assert p == SphericalPoint(1., 0., 0.)
    assert p != SphericalPoint(1., 0., 0.1)
    assert len({p, SphericalPoint(1., 0., 0.)}) == 1

    assert CartesianPoint(0., 0., 0.).to_spherical() == SphericalPoint(0., 0., 0.)
    assert_points_equal(
        CartesianPoint(0., 2., 0.).to_spherical(),
        SphericalPoint(2., 0., math.pi / 2)
    )


def test_spherical_point_round_trip():
    p = CartesianPoint(-1234.5, 6789.0, -42.)
    assert_points_equal(p.to_spherical().to_cartesian(), p, abs_tol=1e-9)

    geod = GeodeticPoint(0.3, -1.2, 400.)
    assert_points_equal(geod.to_spherical().to_geodetic(), geod, abs_tol=1e-7)
