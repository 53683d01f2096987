"""HTTP method classification.

Static file serving only distinguishes GET, HEAD, and everything else,
so the method is classified into a closed enum instead of being compared
as free-form strings at every call site.
"""

from enum import StrEnum


class Method(StrEnum):
    GET = "GET"
    HEAD = "HEAD"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: str) -> "Method":
        """Classify a request method token (case-sensitive, per RFC 9110)."""
        if value == "GET":
            return cls.GET
        if value == "HEAD":
            return cls.HEAD
        return cls.OTHER
