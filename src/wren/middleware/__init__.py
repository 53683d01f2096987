"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> AnyResponse

Built-in middleware:
    StaticFilesHandler -- Serve regular files from beneath a root directory
"""

from wren.middleware.protocol import AnyResponse, Middleware, Next
from wren.middleware.static import StaticFilesHandler

__all__ = [
    "AnyResponse",
    "Middleware",
    "Next",
    "StaticFilesHandler",
]
