"""Content-type and cache-policy tables.

Built once at import time and never mutated.  ``AssetPolicy`` bundles the
tables with the route aliases so the server gets one immutable object.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        ".html": "text/html; charset=UTF-8",
        ".css": "text/css; charset=UTF-8",
        ".js": "application/javascript; charset=UTF-8",
        ".json": "application/json; charset=UTF-8",
        ".xml": "application/xml; charset=UTF-8",
        ".webmanifest": "application/manifest+json; charset=UTF-8",
        ".txt": "text/plain; charset=UTF-8",
        ".png": "image/png",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".gif": "image/gif",
        ".webp": "image/webp",
        ".avif": "image/avif",
        ".svg": "image/svg+xml",
        ".ico": "image/x-icon",
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".ttf": "font/ttf",
        ".otf": "font/otf",
    }
)

# Cache classes
IMMUTABLE = "public, max-age=31536000, immutable"
REVALIDATE_MEDIUM = "public, max-age=86400, must-revalidate"
REVALIDATE_SHORT = "public, max-age=300, must-revalidate"
ALWAYS_REVALIDATE = "no-cache"
DEFAULT_CACHE_CONTROL = "public, max-age=3600"

_CACHE_CLASSES: dict[str, tuple[str, ...]] = {
    IMMUTABLE: (
        ".png", ".jpg", ".jpeg", ".gif", ".webp", ".avif", ".svg", ".ico",
        ".woff", ".woff2", ".ttf", ".otf",
    ),
    REVALIDATE_MEDIUM: (".css", ".js"),
    REVALIDATE_SHORT: (".json", ".xml", ".webmanifest"),
    ALWAYS_REVALIDATE: (".html",),
}

CACHE_POLICIES: Mapping[str, str] = MappingProxyType(
    {ext: directive for directive, exts in _CACHE_CLASSES.items() for ext in exts}
)

COMPRESSIBLE: frozenset[str] = frozenset({".html", ".css", ".js", ".json", ".svg"})


@dataclass(frozen=True, slots=True)
class AssetPolicy:
    """Everything the asset server needs to decide headers for a file.

    ``aliases`` maps reserved request paths to file names relative to the
    public root.
    """

    aliases: Mapping[str, str]
    mime_types: Mapping[str, str] = field(default_factory=lambda: MIME_TYPES)
    cache_policies: Mapping[str, str] = field(default_factory=lambda: CACHE_POLICIES)
    compressible: frozenset[str] = COMPRESSIBLE

    def content_type(self, extension: str) -> str:
        return self.mime_types.get(extension.lower(), DEFAULT_CONTENT_TYPE)

    def cache_control(self, extension: str) -> str:
        return self.cache_policies.get(extension.lower(), DEFAULT_CACHE_CONTROL)

    def is_compressible(self, extension: str) -> bool:
        return extension.lower() in self.compressible
