"""Request-to-file resolution.

Pure path handling (extraction, percent-decoding, component
classification) lives in ``wren.files.paths``; the single filesystem
probe and its outcome types live in ``wren.files.resolution``.
"""

from wren.files.paths import Component, components, extract_path, is_safe_path, percent_decode
from wren.files.resolution import PassThrough, Reject, Resolution, Serve, resolve_file

__all__ = [
    "Component",
    "PassThrough",
    "Reject",
    "Resolution",
    "Serve",
    "components",
    "extract_path",
    "is_safe_path",
    "percent_decode",
    "resolve_file",
]
