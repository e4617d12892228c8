# site_mirror/crawler/fetcher.py
"""
Fetcher module: one plain HTTP GET per call, body buffered in memory.
"""
from __future__ import annotations

import asyncio
from urllib.parse import urlparse

from aiohttp import ClientError, ClientSession
from site_mirror.config import MirrorConfig
from site_mirror.errors import HTTPStatusError, ParseError, TransportError


class Fetcher:
    """Downloads a URL and maps every failure onto the SiteMirror error types."""

    def __init__(self, session: ClientSession, config: MirrorConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> bytes:
        """
        GET *url* and return the response body.

        Only 200 counts as success. Redirects are followed only when
        ``config.follow_redirects`` is set; otherwise a 3xx is an HTTPStatusError.
        """
        self._check_target(url)
        try:
            async with self.session.get(url, allow_redirects=self.config.follow_redirects) as resp:
                if resp.status != 200:
                    raise HTTPStatusError(url, resp.status, resp.reason)
                return await resp.read()
        except (ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(url, exc) from exc

    @staticmethod
    def _check_target(url: str) -> None:
        try:
            parsed = urlparse(url)
            hostname = parsed.hostname
        except ValueError as exc:
            raise ParseError(url, str(exc)) from exc
        if parsed.scheme not in ("http", "https") or not hostname:
            raise ParseError(url)
