"""Immutable HTTP request.

Frozen metadata. The request is honest about what it is: received data
that doesn't change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from wren._internal.asgi import Receive
from wren.http.method import Method


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the percent-decoded path the server handed us.
    ``raw_path`` is the path exactly as received (still percent-encoded),
    or ``None`` when the server could not supply it.
    """

    method: str
    path: str
    raw_path: bytes | None
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    http_version: str
    client: tuple[str, int] | None
    path_params: dict[str, str]

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    @property
    def method_kind(self) -> Method:
        """The request method classified as GET, HEAD, or OTHER."""
        return Method.parse(self.method)

    @property
    def path_without_query(self) -> str | None:
        """The still-encoded request path, without any query component.

        Returns ``None`` when no origin-form path is available (for
        example ``OPTIONS *``) or when the raw bytes are not UTF-8.
        Servers that omit ``raw_path`` get the decoded path re-quoted.
        """
        if self.raw_path is None:
            raw = quote(self.path, safe="/")
        else:
            try:
                raw = self.raw_path.split(b"?", 1)[0].decode("utf-8")
            except UnicodeDecodeError:
                return None
        if not raw or raw == "*":
            return None
        return raw

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for header *name* (case-insensitive)."""
        key = name.lower().encode("latin-1")
        for raw_name, value in self.headers:
            if raw_name.lower() == key:
                return value.decode("latin-1")
        return default

    async def body(self) -> bytes:
        """Read the full request body."""
        chunks: list[bytes] = []
        while True:
            message = await self._receive()
            chunk = message.get("body", b"")
            if chunk:
                chunks.append(chunk)
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    @classmethod
    def from_asgi(
        cls,
        scope: dict[str, Any],
        receive: Receive,
        path_params: dict[str, str] | None = None,
    ) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            raw_path=scope.get("raw_path") or None,
            query_string=scope.get("query_string", b""),
            headers=tuple(scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            path_params=path_params or {},
            _receive=receive,
        )
