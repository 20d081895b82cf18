"""
Module for unit and angle conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters', 'mas_to_radians', 'normalize_angle']

import math

from geoellipsoids._const import D2PI, MAS2RAD

_LENGTH_FACTORS = {
    'm': 1.,
    'km': 1000.,
    'mi': 1609.34,
    'ft': 0.3048,
    'nmi': 1852.,
    'yd': 0.9144,
}


def _length_factor(unit: str) -> float:
    unit = unit.lower()
    if unit not in _LENGTH_FACTORS:
        raise ValueError(f"Unknown unit '{unit}'. Options: {list(_LENGTH_FACTORS.keys())}")

    return _LENGTH_FACTORS[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (kilometer= 'km', mile = 'mi'
        , feet ='ft',nautical mile = 'nmi', yard = 'yd', meter = 'm').

    Returns:
        float: The distance in meters.
    """
    return distance * _length_factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance value, in meters.
        unit (str): The target unit (see convert_to_meters).

    Returns:
        float: The distance in the target unit.
    """
    return distance / _length_factor(unit)


def mas_to_radians(mas: float) -> float:
    """Converts milliarcseconds to radians"""
    return mas * MAS2RAD


def normalize_angle(angle: float, lower: float = 0., upper: float = D2PI) -> float:
    """
    Wraps an angle into the half-open range [lower, upper).

    Args:
        angle (float): The angle, in radians.
        lower (float): (Default 0) The lower bound of the range.
        upper (float): (Default 2*pi) The upper bound of the range.

    Returns:
        float: The equivalent angle within [lower, upper)
    """
    span = upper - lower
    wrapped = lower + math.fmod(angle - lower, span)
    if wrapped < lower:
        wrapped += span
    if wrapped >= upper:
        # a tiny negative remainder plus the span rounds to upper
        wrapped -= span
    return wrapped
