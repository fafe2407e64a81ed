"""
pintour
=======

Groups viewer-location pins into regional clusters and plans an animated map tour through them.
"""

import logging
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("pintour")
except PackageNotFoundError:  # pragma: no cover - occurs in local dev before install
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
