"""The Site ASGI application.

The only component that touches raw ASGI directly.  Converts ``http``
scopes into ``Request`` values, runs them through the asset server, maps
``HTTPError`` to plain-text responses, and answers ``lifespan`` messages.
"""

import logging

from latitude._internal.asgi import Receive, Scope, Send
from latitude.assets.server import StaticAssetServer
from latitude.config import SiteConfig
from latitude.errors import HTTPError
from latitude.http.request import Request
from latitude.http.response import Response
from latitude.server.sender import send_response

logger = logging.getLogger("latitude.server")


class Site:
    """ASGI 3 application serving one public directory.

    Usage::

        site = Site(SiteConfig.from_env())
        # run with any ASGI server, e.g. ``latitude run``
    """

    __slots__ = ("assets", "config")

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig()
        self.config.validate()
        self.assets = StaticAssetServer(
            self.config.root_path,
            self.config.policy(),
            read_timeout=self.config.read_timeout,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            await self._handle_http(scope, send)
        elif scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)

    async def handle(self, request: Request) -> Response:
        """Produce exactly one response for *request*."""
        try:
            return await self.assets.serve(request)
        except HTTPError as exc:
            logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
            return Response.plain(_REASONS.get(exc.status, str(exc.status)), exc.status)

    async def _handle_http(self, scope: Scope, send: Send) -> None:
        request = Request.from_asgi(scope)
        try:
            response = await self.handle(request)
        except Exception:
            logger.exception("500 %s %s", request.method, request.path)
            response = Response.plain("Internal Server Error", 500)

        logger.info(
            '%s "%s %s" %d %d',
            request.client[0] if request.client else "-",
            request.method,
            request.url,
            response.status,
            len(response.body),
        )
        await send_response(response, send, head=request.is_head)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.info("Latitude Sales site running at %s", self.config.url)
                logger.info("Serving %s", self.assets.root)
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return


_REASONS = {
    400: "Bad request",
    404: "Not found",
}
