# site_mirror/crawler/archiver.py
"""
Archiver: writes fetched pages to ``<dest_root>/<hostname>/<filename>``.
"""
from __future__ import annotations

import asyncio
import posixpath
from pathlib import Path
from typing import Union
from urllib.parse import urlparse

from site_mirror.errors import FilesystemError, ParseError

INDEX_FILENAME = "index.html"
DIR_MODE = 0o755


class Archiver:
    """Persists page bodies under a destination root, one directory per host."""

    @staticmethod
    def target_path(url: str, dest_root: Union[str, Path]) -> Path:
        """
        Derive the file path for *url*.

        Directory-style paths (empty or ending in ``/``) map to ``index.html``,
        anything else to its last path segment. Two URLs with the same last
        segment on one host share a file; the later write wins.
        """
        try:
            parsed = urlparse(url)
            host = parsed.hostname
        except ValueError as exc:
            raise ParseError(url, str(exc)) from exc
        if not host:
            raise ParseError(url, "no hostname")

        path = parsed.path
        if path == "" or path.endswith("/"):
            filename = INDEX_FILENAME
        else:
            filename = posixpath.basename(path)
        return Path(dest_root) / host / filename

    async def store(self, url: str, content: bytes, dest_root: Union[str, Path]) -> Path:
        """Write *content* for *url*, creating directories as needed. Returns the file path."""
        target = self.target_path(url, dest_root)
        await asyncio.to_thread(self._write, url, target, content)
        return target

    @staticmethod
    def _write(url: str, target: Path, content: bytes) -> None:
        try:
            target.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            raise FilesystemError(url, target, exc) from exc
