"""Latitude exception hierarchy.

Shared by the asset pipeline, the ASGI app, and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class LatitudeError(Exception):
    """Base for all latitude-specific errors."""


class ConfigurationError(LatitudeError):
    """Raised when site configuration is invalid.

    Typically raised by ``SiteConfig.validate()`` when the site is built.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(LatitudeError):
    """An error that maps directly to an HTTP status code.

    The asset server raises these; the ASGI app turns them into plain-text
    responses.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class PathUnsafe(HTTPError):  # noqa: N818
    """400: the request path is malformed or escapes the public root."""

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404: the target is missing, not a regular file, or unreadable."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(status=404, detail=detail)


class CompressionFailure(LatitudeError):  # noqa: N818
    """gzip encoding failed. Never reaches the client."""
