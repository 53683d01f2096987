"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI HTTP scopes directly. Converts
scope dicts to typed Request objects, dispatches through middleware and
routing, and sends the response back through ASGI send().
"""

import inspect
from collections.abc import Callable
from typing import Any

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.invoke import invoke
from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import FileResponse
from wren.middleware.protocol import AnyResponse, Next
from wren.routing.router import Router
from wren.server.errors import handle_http_error, handle_internal_error
from wren.server.negotiation import negotiate
from wren.server.sender import send_file_response, send_response


def _build_handler_kwargs(handler: Callable[..., Any], request: Request) -> dict[str, Any]:
    """Inspect handler signature and build kwargs from request + path params."""
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler).parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in request.path_params:
            kwargs[name] = request.path_params[name]
    return kwargs


def build_pipeline(middleware: tuple[Callable[..., Any], ...], router: Router) -> Next:
    """Wrap *middleware* around router dispatch, outermost first."""

    async def dispatch(request: Request) -> AnyResponse:
        match = router.match(request.method, request.path)
        routed = Request(
            method=request.method,
            path=request.path,
            raw_path=request.raw_path,
            query_string=request.query_string,
            headers=request.headers,
            http_version=request.http_version,
            client=request.client,
            path_params=match.path_params,
            _receive=request._receive,
        )
        kwargs = _build_handler_kwargs(match.route.handler, routed)
        result = await invoke(match.route.handler, **kwargs)
        return negotiate(result)

    handler: Next = dispatch
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> AnyResponse:
            return await _mw(req, _next)

        handler = make_next
    return handler


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    pipeline: Next,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await pipeline(request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    include_body = request.method != "HEAD"
    if isinstance(response, FileResponse):
        await send_file_response(response, send, include_body=include_body)
    else:
        await send_response(response, send, include_body=include_body)
