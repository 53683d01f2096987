"""Resolve a decoded relative path against a root directory.

One ``os.stat`` probe per call, no content read, no caching. The outcome
is one of ``Serve``, ``PassThrough``, or ``Reject``.
"""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from wren.files.paths import is_safe_path

logger = logging.getLogger("wren.static")


@dataclass(frozen=True, slots=True)
class Serve:
    """A regular file exists at ``path`` and should be sent."""

    path: Path


@dataclass(frozen=True, slots=True)
class PassThrough:
    """Not ours to answer; defer to the next handler."""


@dataclass(frozen=True, slots=True)
class Reject:
    """Terminal client error."""

    status: int
    reason: str


Resolution: TypeAlias = Serve | PassThrough | Reject


def resolve_file(root: Path, relative: str) -> Resolution:
    """Classify *relative* beneath *root*.

    Unsafe paths are rejected before the filesystem is consulted.
    """
    if not is_safe_path(relative):
        return Reject(400, f"The path {relative!r} was denied access.")

    # Joined as text so a trailing "/" or "/." reaches the probe.
    joined = os.path.join(root, relative)
    path = Path(joined)
    try:
        attr = os.stat(joined)
    except FileNotFoundError:
        return PassThrough()
    except (OSError, ValueError) as exc:
        # ValueError: embedded NUL byte from a decoded %00
        logger.debug("Error getting metadata for file %r: %s", joined, exc)
        return PassThrough()

    if stat.S_ISREG(attr.st_mode):
        return Serve(path)
    return PassThrough()
