# site_mirror/errors.py
"""
Exception hierarchy for SiteMirror.

Every error raised by a crawl step carries the URL it happened on, so the
orchestrator can record it without extra bookkeeping.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class MirrorError(Exception):
    """Base class for all crawl failures."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class ParseError(MirrorError):
    """The fetch target is not a usable absolute URL."""

    def __init__(self, url: str, reason: str = "not an absolute http(s) URL") -> None:
        super().__init__(url, f"cannot parse {url!r}: {reason}")
        self.reason = reason


class TransportError(MirrorError):
    """Connection, DNS, TLS, timeout or body-read failure."""

    def __init__(self, url: str, cause: BaseException) -> None:
        detail = str(cause) or type(cause).__name__
        super().__init__(url, f"GET {url} failed: {detail}")
        self.cause = cause


class HTTPStatusError(MirrorError):
    """The server answered with anything but 200 OK."""

    def __init__(self, url: str, status: int, reason: Optional[str] = None) -> None:
        status_text = f"{status} {reason}" if reason else str(status)
        super().__init__(url, f"HTTP status: {status_text}")
        self.status = status
        self.reason = reason


class FilesystemError(MirrorError):
    """Directory or file could not be created or written."""

    def __init__(self, url: str, path: Path, cause: OSError) -> None:
        super().__init__(url, f"cannot write {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


__all__ = ["MirrorError", "ParseError", "TransportError", "HTTPStatusError", "FilesystemError"]
