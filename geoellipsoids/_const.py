"""
Constants declarations for geoellipsoids
"""
import math

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0  # Semi-major axis (meters)
GRS80_F = 1 / 298.257222101  # Flattening

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# PZ90 Ellipsoid Constants (GLONASS)
PZ90_A = 6378136.0  # Semi-major axis (meters)
PZ90_F = 1 / 298.257839303  # Flattening

# Points closer to the polar axis than sqrt(a**2 * POLE_TOLERANCE) are
# treated as lying on it
POLE_TOLERANCE = 1e-32

D2PI = 2 * math.pi

# Milliarcseconds to radians
MAS2RAD = math.pi / 648_000_000
