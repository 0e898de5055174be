"""Tests for edgeroute.server.sender — Response to ASGI messages."""

from typing import Any

from edgeroute.http.response import Response
from edgeroute.server.sender import send_response


async def _capture(response: Response) -> list[dict[str, Any]]:
    sent: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        sent.append(message)

    await send_response(response, send)
    return sent


class TestSendResponse:
    async def test_start_and_body(self) -> None:
        response = Response(body='{"a":1}', headers=(("Content-Type", "application/json"),))
        start, body = await _capture(response)

        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        assert start["headers"] == [
            (b"content-type", b"application/json"),
            (b"content-length", b"7"),
        ]
        assert body == {"type": "http.response.body", "body": b'{"a":1}'}

    async def test_empty_body(self) -> None:
        start, body = await _capture(Response(headers=(("Allow", "GET"),)))

        assert start["headers"] == [(b"allow", b"GET"), (b"content-length", b"0")]
        assert body["body"] == b""

    async def test_not_found_status_and_body(self) -> None:
        response = Response(
            body="resource not found",
            status=404,
            headers=(("content-type", "text/plain"),),
        )
        start, body = await _capture(response)

        assert start["status"] == 404
        assert (b"content-length", b"18") in start["headers"]
        assert body["body"] == b"resource not found"
