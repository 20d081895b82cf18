"""
Package logger for geoellipsoids.

Numerical routines never raise for out-of-domain input; the conditions worth
reporting (e.g. an ellipsoid with a <= 0 or f >= 1, an unknown DMS quadrant)
are logged once per distinct message through LOGGER.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geoellipsoids')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNED = set()


def warn_once(message: str):
    """Logs a warning, unless the identical message has been logged before"""
    if message in _WARNED:
        return

    LOGGER.warning(message)
    _WARNED.add(message)
