# === FILE: site_mirror/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from pathlib import Path
from typing import AsyncIterator, Callable, List, Optional, Union
from urllib.parse import urlparse

from aiohttp import ClientSession, ClientTimeout

from site_mirror.config import MirrorConfig
from site_mirror.crawler.archiver import Archiver
from site_mirror.crawler.fetcher import Fetcher
from site_mirror.crawler.ledger import VisitedLedger
from site_mirror.crawler.link_extractor import extract_links
from site_mirror.crawler.models import ArchivedPage, CrawlFailure, CrawlResult
from site_mirror.errors import MirrorError
from site_mirror.logger import LOGGER_NAME

__all__ = ("AsyncCrawler", "ProgressCallback")

ProgressCallback = Callable[[ArchivedPage], None]


class AsyncCrawler:
    """
    Recursive same-host mirror.

    Each URL becomes one task: claim it in the ledger, fetch it once, archive
    the body, extract links from the same bytes, then run one child task per
    link and wait for all of them. A failed fetch or archive ends only that
    task; its error travels up to the parent after the parent's join.
    """

    def __init__(
        self,
        dest_root: Union[str, Path],
        config: Optional[MirrorConfig] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.config = config or MirrorConfig()
        self.dest_root = Path(dest_root)
        self.progress = progress
        self.ledger = VisitedLedger()
        self.archiver = Archiver()
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger(LOGGER_NAME)
        self._slots: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(self.config.max_concurrency) if self.config.max_concurrency else None
        )

    async def __aenter__(self) -> AsyncCrawler:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, seed_url: str) -> CrawlResult:
        """Mirror everything reachable from *seed_url* on its host; returns when the whole tree is done."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        self.logger.info("Start mirroring: %s -> %s", seed_url, self.dest_root)
        start = time.monotonic()
        result = await self._visit(seed_url)
        result.seed = seed_url
        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d pages, %d failures, %d URLs claimed in %.2f s",
            len(result.archived),
            len(result.failures),
            len(self.ledger),
            duration,
        )
        return result

    async def _visit(self, url: str) -> CrawlResult:
        result = CrawlResult(seed=url)
        if self.ledger.check_and_mark(url):
            self.logger.debug("Already visited: %s", url)
            return result

        try:
            async with self._slot():
                page, content = await self._download(url)
        except MirrorError as exc:
            self.logger.warning("Failed %s: %s", url, exc)
            result.failures.append(CrawlFailure(url, exc))
            result.error = exc
            return result

        result.archived.append(page)
        if self.progress is not None:
            self.progress(page)

        parsed = urlparse(url)
        scheme = parsed.scheme if self.config.relative_scheme == "page" else ""
        links = extract_links(parsed.netloc, content, page_scheme=scheme)
        self.logger.debug("%s: %d in-scope links", url, len(links))

        for child in await self._dispatch(links):
            result.merge(child)
        return result

    async def _dispatch(self, links: List[str]) -> List[CrawlResult]:
        # gather keeps running siblings when one of them fails
        if not links:
            return []
        return list(await asyncio.gather(*(self._visit(link) for link in links)))

    async def _download(self, url: str) -> tuple[ArchivedPage, bytes]:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        content = await self.fetcher.fetch(url)
        path = await self.archiver.store(url, content, self.dest_root)
        return ArchivedPage(url, path), content

    @contextlib.asynccontextmanager
    async def _slot(self) -> AsyncIterator[None]:
        if self._slots is None:
            yield
            return
        async with self._slots:
            yield
