"""
Exposes the version of geoellipsoids: the installed distribution's metadata, or
the VERSION file at the repository root (the one setup.py reads) when running
from a source checkout.
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> str | None:
    if not _VERSION_FILE.is_file():
        return None

    return _VERSION_FILE.read_text(encoding='utf-8').strip()


try:
    __version__ = version('geoellipsoids')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
