import math

import numpy as np
import pytest

from geoellipsoids._const import GRS80_A, GRS80_F, WGS84_A, WGS84_F
from geoellipsoids.core import *
from geoellipsoids.core import _normal_radius_and_sinlat


def test_eccentricity_squared():
    assert eccentricity_squared(WGS84_F) == pytest.approx(0.00669437999014, abs=1e-12)
    assert eccentricity_squared(GRS80_F) == pytest.approx(0.00669438002290, abs=1e-14)
    assert eccentricity_squared(0.) == 0.


def test_third_flattening():
    f = GRS80_F
    b = semi_minor(GRS80_A, f)
    assert third_flattening(f) == pytest.approx((GRS80_A - b) / (GRS80_A + b), rel=1e-12)
    assert third_flattening(0.) == 0.


def test_semi_minor():
    assert semi_minor(GRS80_A, GRS80_F) == pytest.approx(6356752.3141, abs=1e-4)
    assert semi_minor(1., 0.) == 1.


def test_linear_eccentricity():
    assert linear_eccentricity(GRS80_A, GRS80_F) == pytest.approx(521854.0097, abs=1e-4)
    assert linear_eccentricity(1., 0.) == 0.


def test_polar_radius_of_curvature():
    assert polar_radius_of_curvature(GRS80_A, GRS80_F) == pytest.approx(6399593.6259, abs=1e-4)


def test_mean_earth_radius():
    assert mean_earth_radius(GRS80_A, GRS80_F) == pytest.approx(6371008.7714, abs=1e-4)
    assert mean_earth_radius(10., 0.) == pytest.approx(10.)


def test_invalid_parameters_propagate():
    # Prolate "ellipsoid" has a < b; linear eccentricity is imaginary
    with pytest.warns(RuntimeWarning):
        assert math.isnan(linear_eccentricity(1., -0.5))


def test_normal_radius_of_curvature():
    assert N(WGS84_A, WGS84_F, 0.) == WGS84_A
    assert N(WGS84_A, WGS84_F, math.pi / 2) == pytest.approx(
        polar_radius_of_curvature(WGS84_A, WGS84_F), rel=1e-12
    )

    rn, sinlat = _normal_radius_and_sinlat(WGS84_A, WGS84_F, 0.5)
    assert sinlat == math.sin(0.5)
    assert rn == N(WGS84_A, WGS84_F, 0.5)


def test_normal_radius_monotonic():
    lats = np.linspace(0., math.pi / 2, 1001)
    for f in (WGS84_F, 0.1, 0.5):
        values = N(WGS84_A, f, lats)
        assert np.all(np.diff(values) >= -1e-9)


def test_radii_of_curvature_symmetry():
    for lat in (0.1, 0.5, 1.0, 1.5, math.pi / 2, 2.5):
        assert N(WGS84_A, WGS84_F, -lat) == N(WGS84_A, WGS84_F, lat)
        assert M(WGS84_A, WGS84_F, -lat) == M(WGS84_A, WGS84_F, lat)


def test_meridional_radius_of_curvature():
    e2 = eccentricity_squared(WGS84_F)
    assert M(WGS84_A, WGS84_F, 0.) == pytest.approx(WGS84_A * (1 - e2), rel=1e-14)

    # N and M coincide at the poles
    assert M(WGS84_A, WGS84_F, math.pi / 2) == pytest.approx(
        N(WGS84_A, WGS84_F, math.pi / 2), rel=1e-12
    )

    # M <= N everywhere on an oblate ellipsoid
    lats = np.linspace(-1.5, 1.5, 31)
    assert np.all(M(WGS84_A, WGS84_F, lats) <= N(WGS84_A, WGS84_F, lats))


def test_geocentric_latitude():
    assert geocentric_latitude(WGS84_F, 0.) == 0.
    assert geocentric_latitude(0., 0.7) == pytest.approx(0.7)

    # Geocentric latitude is closer to the equator than geodetic latitude
    assert 0. < geocentric_latitude(WGS84_F, 0.7) < 0.7

    # Maximum difference, about 11.5 arc minutes, near 45 degrees
    diff = math.radians(45) - geocentric_latitude(WGS84_F, math.radians(45))
    assert math.degrees(diff) * 60 == pytest.approx(11.5, abs=0.1)


def test_geocentric_latitude_at_height():
    for lat in (-1.2, -0.3, 0., 0.4, 1.1):
        assert geocentric_latitude_at_height(WGS84_A, WGS84_F, lat, 0.) == pytest.approx(
            geocentric_latitude(WGS84_F, lat), abs=1e-14
        )

    # Higher points sit closer to the ellipsoid normal
    at_surface = geocentric_latitude_at_height(WGS84_A, WGS84_F, 0.7, 0.)
    at_altitude = geocentric_latitude_at_height(WGS84_A, WGS84_F, 0.7, 1e7)
    assert at_surface < at_altitude < 0.7

    # Point on the polar axis
    h = -N(WGS84_A, WGS84_F, 0.3)
    assert geocentric_latitude_at_height(WGS84_A, WGS84_F, 0.3, h) == -math.pi / 2


def test_reduced_latitude():
    assert reduced_latitude(WGS84_F, 0.) == 0.
    lat = 0.9
    # Reduced latitude lies between the geocentric and geodetic latitudes
    assert geocentric_latitude(WGS84_F, lat) < reduced_latitude(WGS84_F, lat) < lat


def test_arc_lengths():
    e2 = eccentricity_squared(WGS84_F)
    assert infinitesimal_meridian_arc(WGS84_A, WGS84_F, 0., 1e-6) == pytest.approx(
        WGS84_A * (1 - e2) * 1e-6, rel=1e-12
    )
    assert parallel_arc_length(WGS84_A, WGS84_F, 0., 2 * math.pi) == pytest.approx(
        2 * math.pi * WGS84_A
    )
    assert parallel_arc_length(WGS84_A, WGS84_F, math.pi / 2, 1.) == pytest.approx(0., abs=1e-6)
