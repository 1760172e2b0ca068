"""Immutable HTTP request.

The asset server only needs request metadata, so the body is never read.
"""

from dataclasses import dataclass

from latitude._internal.asgi import HTTPScope, Scope
from latitude.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An HTTP request as an explicit value.

    ``path`` is the percent-decoded path from the ASGI scope; the query
    string is kept separately and never used for file resolution.
    """

    method: str
    path: str
    query_string: str
    headers: Headers
    client: tuple[str, int] | None = None

    @classmethod
    def from_asgi(cls, scope: Scope) -> "Request":
        """Build a Request from a raw ASGI ``http`` scope."""
        parsed = HTTPScope.from_scope(scope)
        return cls(
            method=parsed.method.upper(),
            path=parsed.path,
            query_string=parsed.query_string.decode("latin-1"),
            headers=Headers(parsed.headers),
            client=parsed.client,
        )

    @property
    def accept_encoding(self) -> str | None:
        """The ``Accept-Encoding`` header, or None when absent."""
        return self.headers.get("accept-encoding")

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"

    @property
    def url(self) -> str:
        """Path plus query string, for log lines."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path
