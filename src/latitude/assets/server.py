"""Static asset serving.

Turns a ``Request`` into a ``Response`` for a file under the public root:
alias and traversal-safe resolution, async reads, per-extension
content type and cache policy, and optional gzip.

Failures are raised as ``HTTPError`` subclasses and mapped to responses by
the ASGI app.  Read errors of any kind are reported as ``NotFound``.
"""

import logging
from pathlib import Path

import anyio
import anyio.to_thread

from latitude.assets.compress import accepts_gzip, gzip_body
from latitude.assets.policy import AssetPolicy
from latitude.assets.routes import is_within, resolve_path
from latitude.errors import CompressionFailure, NotFound, PathUnsafe
from latitude.http.request import Request
from latitude.http.response import Response

logger = logging.getLogger("latitude.assets")


class StaticAssetServer:
    """Serve files from a single public directory.

    Security: the request path is checked lexically before any filesystem
    access, then the symlink-resolved target is checked again, so neither
    ``..`` segments nor links can reach outside the root.

    Usage::

        server = StaticAssetServer(Path("public").resolve(), config.policy())
        response = await server.serve(request)
    """

    __slots__ = ("_policy", "_read_timeout", "_root")

    def __init__(self, root: Path, policy: AssetPolicy, *, read_timeout: float = 10.0) -> None:
        self._root = root
        self._policy = policy
        self._read_timeout = read_timeout

    @property
    def root(self) -> Path:
        return self._root

    async def serve(self, request: Request) -> Response:
        """Resolve, read, and encode the file behind *request*.

        Raises:
            PathUnsafe: The path is malformed or escapes the root.
            NotFound: The target is missing, not a regular file, or unreadable.
        """
        file_path = resolve_path(request.path, self._root, self._policy.aliases)
        body = await self._read(file_path)
        return await self._build_response(request, file_path, body)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _read(self, file_path: Path) -> bytes:
        try:
            with anyio.fail_after(self._read_timeout):
                real, body = await anyio.to_thread.run_sync(
                    self._read_sync, file_path, abandon_on_cancel=True
                )
        except TimeoutError:
            logger.warning("Read of %s timed out after %.1fs", file_path, self._read_timeout)
            raise NotFound from None
        except OSError as exc:
            # Permission and I/O faults look like absence to the client.
            logger.warning("Read of %s failed: %s", file_path, exc)
            raise NotFound from exc

        # Raised outside the deadline scope: its exit rewrites __traceback__,
        # which a frozen dataclass exception refuses.
        if not is_within(real, self._root):
            raise PathUnsafe(f"{str(file_path)!r} links outside the public root")
        if body is None:
            raise NotFound(f"{str(file_path)!r} is not a regular file")
        return body

    def _read_sync(self, file_path: Path) -> tuple[Path, bytes | None]:
        """Resolve links and read a regular file. Runs in a worker thread.

        Nothing is read when the resolved target leaves the root or is not a
        regular file; the body is None then.
        """
        real = file_path.resolve()
        if not is_within(real, self._root) or not real.is_file():
            return real, None
        return real, real.read_bytes()

    async def _build_response(self, request: Request, file_path: Path, body: bytes) -> Response:
        policy = self._policy
        extension = file_path.suffix

        response = Response(
            body=body,
            content_type=policy.content_type(extension),
        ).with_header("Cache-Control", policy.cache_control(extension))

        if not policy.is_compressible(extension):
            return response

        response = response.with_header("Vary", "Accept-Encoding")
        if not accepts_gzip(request.accept_encoding):
            return response

        try:
            compressed = await gzip_body(body)
        except CompressionFailure as exc:
            logger.warning("gzip of %s failed, sending identity: %s", file_path, exc)
            return response
        return response.with_body(compressed).with_header("Content-Encoding", "gzip")
