"""gzip content negotiation and encoding.

Compression runs in a worker thread so a large stylesheet never stalls the
event loop.  Any failure surfaces as ``CompressionFailure``; the server
recovers by sending the raw body.
"""

import gzip

import anyio.to_thread

from latitude.errors import CompressionFailure

COMPRESS_LEVEL = 6


def accepts_gzip(accept_encoding: str | None) -> bool:
    """Whether an ``Accept-Encoding`` value lists ``gzip`` with a non-zero q.

    ::

        >>> accepts_gzip("gzip, deflate, br")
        True
        >>> accepts_gzip("br, gzip;q=0")
        False
    """
    if not accept_encoding:
        return False
    for item in accept_encoding.split(","):
        coding, _, params = item.partition(";")
        if coding.strip().lower() != "gzip":
            continue
        return _qvalue(params) > 0
    return False


def _qvalue(params: str) -> float:
    for param in params.split(";"):
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value.strip())
            except ValueError:
                return 0.0
    return 1.0


def gzip_bytes(body: bytes) -> bytes:
    """Compress *body* deterministically (fixed mtime)."""
    try:
        return gzip.compress(body, compresslevel=COMPRESS_LEVEL, mtime=0)
    except Exception as exc:
        raise CompressionFailure(str(exc)) from exc


async def gzip_body(body: bytes) -> bytes:
    """Compress *body* off the event loop."""
    return await anyio.to_thread.run_sync(gzip_bytes, body)
