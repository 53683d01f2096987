"""Content negotiation — turn handler return values into responses.

Dispatch order:

1. ``Response`` / ``FileResponse`` -> pass through
2. ``str``                         -> 200, text/html
3. ``bytes``                       -> 200, application/octet-stream
4. ``(value, int)``                -> negotiate value, override status
"""

from typing import Any

from wren.errors import ConfigurationError
from wren.http.response import FileResponse, Response
from wren.middleware.protocol import AnyResponse


def negotiate(value: Any) -> AnyResponse:
    """Convert a handler return value into a response."""
    match value:
        case Response() | FileResponse():
            return value
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a Response, FileResponse, str, bytes, or (value, status)."
            )
            raise ConfigurationError(msg)
