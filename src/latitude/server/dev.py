"""Serve a Site with the pounce ASGI server.

Single worker: the site is stateless and I/O bound, so one event loop
handles concurrent requests without a thread pool.
"""

from latitude.server.app import Site


def run_server(site: Site) -> None:
    """Start pounce with the live Site object and block until it exits.

    Pounce's ``run()`` takes an import string, but the site is built from
    CLI flags at runtime, so ``pounce.Server`` is driven directly with the
    ASGI callable.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=site.config.host,
        port=site.config.port,
        workers=1,
        log_level=site.config.log_level.lower(),
    )
    server = Server(config, site)
    server.run()
