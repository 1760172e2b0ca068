"""Latitude: static asset server for the Latitude Sales site.

Maps request paths to files under one public directory, with per-type
cache policy and on-the-fly gzip.

Basic usage::

    from latitude import Site, SiteConfig

    site = Site(SiteConfig(root="public", port=3000))

or from a shell::

    PORT=8080 latitude run --root public
"""

from latitude.config import SiteConfig
from latitude.errors import (
    CompressionFailure,
    ConfigurationError,
    HTTPError,
    LatitudeError,
    NotFound,
    PathUnsafe,
)
from latitude.server.app import Site

__version__ = "0.1.0"
__all__ = [
    "CompressionFailure",
    "ConfigurationError",
    "HTTPError",
    "LatitudeError",
    "NotFound",
    "PathUnsafe",
    "Site",
    "SiteConfig",
]
