"""Static file serving middleware.

Serves regular files found beneath a root directory. ``/`` maps to
``index.html``; every other request path is taken relative to the root
after percent-decoding. Paths containing parent-directory markers, roots,
or drive prefixes are refused with 400 before the filesystem is touched.

Anything that is not a regular file falls through to the next handler.
"""

import logging
from pathlib import Path

from wren.errors import BadRequest, DecodeError
from wren.files.paths import extract_path, percent_decode
from wren.files.resolution import PassThrough, Reject, Resolution, Serve, resolve_file
from wren.http.request import Request
from wren.http.response import FileResponse
from wren.middleware.protocol import AnyResponse, Next

logger = logging.getLogger("wren.static")


class StaticFilesHandler:
    """Middleware that serves files from within a given root directory.

    The file to serve is determined by joining the request path onto the
    root directory. The root is taken as given (absolute or relative to
    the process working directory) and never changes afterwards, so one
    instance can be shared by any number of concurrent requests.

    Usage::

        app.add_middleware(StaticFilesHandler("/path/to/serve/"))
    """

    __slots__ = ("_root",)

    def __init__(self, root_path: str | Path) -> None:
        self._root = Path(root_path)

    @property
    def root_path(self) -> Path:
        return self._root

    def __repr__(self) -> str:
        return f"StaticFilesHandler({str(self._root)!r})"

    def resolve(self, request: Request) -> Resolution:
        """Decide what to do with *request* without producing a response."""
        candidate = extract_path(request.method_kind, request.path_without_query)
        if candidate is None:
            return PassThrough()

        logger.debug("%s %s/%s", request.method, self._root, candidate)

        try:
            decoded = percent_decode(candidate)
        except DecodeError as exc:
            return Reject(400, str(exc))

        return resolve_file(self._root, decoded)

    async def __call__(self, request: Request, next: Next) -> AnyResponse:
        """Serve the file, reject the path, or fall through."""
        match self.resolve(request):
            case Serve(path=path):
                return FileResponse(path)
            case Reject(reason=reason):
                raise BadRequest(reason)
            case _:
                return await next(request)
