"""Tests for latitude.server.sender response emission rules."""

from latitude.http.response import Response
from latitude.server.sender import send_response


async def capture(response: Response, *, head: bool = False) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_200_preserves_body(self) -> None:
        messages = await capture(Response(b"ok", content_type="text/css; charset=UTF-8"))

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/css; charset=UTF-8"
        assert headers[b"content-length"] == b"2"
        assert messages[1] == {"type": "http.response.body", "body": b"ok"}

    async def test_header_names_are_lowercased(self) -> None:
        response = Response(b"x").with_header("Cache-Control", "no-cache")
        messages = await capture(response)
        assert (b"cache-control", b"no-cache") in messages[0]["headers"]

    async def test_content_length_matches_encoded_body(self) -> None:
        response = Response(b"\x1f\x8b" + b"\x00" * 18).with_header("Content-Encoding", "gzip")
        messages = await capture(response)
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"20"
        assert len(messages[1]["body"]) == 20

    async def test_single_content_length_header(self) -> None:
        messages = await capture(Response(b"abc"))
        names = [name for name, _ in messages[0]["headers"]]
        assert names.count(b"content-length") == 1


class TestNoBody:
    async def test_304_drops_body(self) -> None:
        messages = await capture(Response(b"unexpected-body", status=304))
        assert dict(messages[0]["headers"])[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    async def test_head_keeps_length_and_drops_body(self) -> None:
        messages = await capture(Response(b"0123456789"), head=True)
        assert dict(messages[0]["headers"])[b"content-length"] == b"10"
        assert messages[1]["body"] == b""
