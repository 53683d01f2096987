"""Pure path handling for static file requests.

Nothing in this module touches the filesystem. Each function takes a
string and returns a string, a classification, or raises ``DecodeError``.
"""

import re
from collections.abc import Iterator
from enum import Enum
from pathlib import PurePath, PureWindowsPath
from urllib.parse import unquote_to_bytes

from wren.errors import DecodeError
from wren.http.method import Method

INDEX_FILE = "index.html"

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def extract_path(method: Method, path: str | None) -> str | None:
    """Derive the candidate relative path for a request, if it has one.

    Only GET and HEAD are eligible. ``"/"`` maps to ``index.html``; any
    other path loses exactly its first character.
    """
    if method not in (Method.GET, Method.HEAD):
        return None
    if path is None:
        return None
    if path == "/":
        return INDEX_FILE
    return path[1:]


def percent_decode(candidate: str) -> str:
    """Decode ``%XX`` escapes to raw bytes, then interpret them as UTF-8.

    Raises:
        DecodeError: On a ``%`` not followed by two hex digits, or when the
            decoded bytes are not valid UTF-8.
    """
    match = _MALFORMED_ESCAPE.search(candidate)
    if match is not None:
        snippet = candidate[match.start() : match.start() + 3]
        msg = f"malformed percent-escape {snippet!r} in {candidate!r}"
        raise DecodeError("malformed-escape", msg)

    raw = unquote_to_bytes(candidate)

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"invalid utf-8 sequence of {exc.end - exc.start} bytes from index {exc.start}"
        raise DecodeError("invalid-utf8", msg) from exc


class Component(Enum):
    """Structural class of one path component."""

    CURRENT = "current"
    PARENT = "parent"
    NORMAL = "normal"
    ROOT = "root"
    PREFIX = "prefix"


_SAFE = frozenset({Component.CURRENT, Component.NORMAL})


def components(
    path: str, flavour: type[PurePath] = PurePath
) -> Iterator[tuple[Component, str]]:
    """Split *path* into classified components using *flavour*'s rules.

    ``flavour`` defaults to the host platform. A leading ``.`` is reported
    as ``CURRENT`` even though pathlib folds it away. A segment that itself
    carries a drive (``C:x`` under Windows rules) is a ``PREFIX`` wherever
    it appears.
    """
    pure = flavour(path)
    if pure.drive:
        yield Component.PREFIX, pure.drive
    if pure.root:
        yield Component.ROOT, pure.root

    separators = r"[\\/]" if isinstance(pure, PureWindowsPath) else "/"
    if not pure.anchor and re.split(separators, path, maxsplit=1)[0] == ".":
        yield Component.CURRENT, "."

    for part in pure.parts[1:] if pure.anchor else pure.parts:
        if part == "..":
            yield Component.PARENT, part
        elif part == ".":
            yield Component.CURRENT, part
        elif flavour(part).anchor:
            yield Component.PREFIX, part
        else:
            yield Component.NORMAL, part


def is_safe_path(path: str, flavour: type[PurePath] = PurePath) -> bool:
    """True iff every component is a current-directory marker or a name.

    Any parent marker, root, or platform prefix makes the whole path
    unsafe, regardless of position.
    """
    return all(kind in _SAFE for kind, _ in components(path, flavour))
