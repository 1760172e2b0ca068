"""HTTP response with a chainable ``.with_*()`` API.

Each transformation returns a new Response.  ``Content-Length`` is not
stored: the sender derives it from the body actually transmitted.
"""

from dataclasses import dataclass, replace

PLAIN_TEXT = "text/plain; charset=UTF-8"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: bytes = b""
    status: int = 200
    content_type: str = PLAIN_TEXT
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_body(self, body: bytes) -> "Response":
        """Return a new Response with a different body."""
        return replace(self, body=body)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @classmethod
    def plain(cls, text: str, status: int) -> "Response":
        """A short ``text/plain`` response, used for 4xx/5xx bodies."""
        return cls(body=text.encode("utf-8"), status=status)
