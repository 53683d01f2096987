"""ASGI response sending — translates wren responses to ASGI messages.

Handles in-memory ``Response`` bodies and files streamed from disk.
"""

import logging
import os

import anyio

from wren._internal.asgi import Send
from wren.http.response import FileResponse, Response

logger = logging.getLogger("wren.server")

CHUNK_SIZE = 64 * 1024


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _encode_headers(
    content_type: str, headers: tuple[tuple[str, str], ...]
) -> list[tuple[bytes, bytes]]:
    raw_headers = [(b"content-type", content_type.encode("latin-1"))]
    for name, value in headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    return raw_headers


async def send_response(response: Response, send: Send, *, include_body: bool = True) -> None:
    """Translate a wren Response into ASGI send() calls."""
    raw_headers = _encode_headers(response.content_type, response.headers)

    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": response.status, "headers": raw_headers})
    await send({"type": "http.response.body", "body": body if include_body else b""})


async def send_file_response(
    response: FileResponse, send: Send, *, include_body: bool = True
) -> None:
    """Stream a file from disk in ``CHUNK_SIZE`` pieces.

    The file is opened before any header is sent, so a file that vanished
    after resolution still gets a clean 404.
    """
    try:
        handle = await anyio.open_file(response.path, "rb")
    except OSError as exc:
        logger.warning("Could not open %s for sending: %s", response.path, exc)
        await send_response(
            Response(body="Not Found", status=404, content_type="text/plain; charset=utf-8"),
            send,
            include_body=include_body,
        )
        return

    async with handle:
        body_allowed = _body_allowed(response.status)
        size = os.fstat(handle.wrapped.fileno()).st_size if body_allowed else 0
        raw_headers = _encode_headers(response.media_type, response.headers)
        raw_headers.append((b"content-length", str(size).encode("latin-1")))

        await send(
            {"type": "http.response.start", "status": response.status, "headers": raw_headers}
        )

        if not include_body or not body_allowed:
            await send({"type": "http.response.body", "body": b""})
            return

        while chunk := await handle.read(CHUNK_SIZE):
            await send({"type": "http.response.body", "body": chunk, "more_body": True})
        await send({"type": "http.response.body", "body": b"", "more_body": False})
