"""Tests for wren.server.negotiation — return value to response."""

import pytest

from wren.errors import ConfigurationError
from wren.http.response import FileResponse, Response
from wren.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        response = Response("x")
        assert negotiate(response) is response

    def test_file_response_passthrough(self, tmp_path) -> None:
        response = FileResponse(tmp_path / "a.txt")
        assert negotiate(response) is response

    def test_str(self) -> None:
        response = negotiate("hi")
        assert response.text == "hi"
        assert response.content_type.startswith("text/html")

    def test_bytes(self) -> None:
        assert negotiate(b"\x00").content_type == "application/octet-stream"

    def test_tuple_overrides_status(self) -> None:
        assert negotiate(("made", 201)).status == 201

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigurationError):
            negotiate(42)
