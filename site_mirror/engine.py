# File: site_mirror/engine.py
"""site_mirror.engine: entry point used by the CLI and tests to run one mirroring pass."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from site_mirror.config import MirrorConfig
from site_mirror.crawler.crawler import AsyncCrawler, ProgressCallback
from site_mirror.crawler.models import CrawlResult
from site_mirror.logger import logger

__all__ = ["start_mirror"]


async def start_mirror(
    seed_url: str,
    dest_root: Union[str, Path],
    config: Optional[MirrorConfig] = None,
    progress: Optional[ProgressCallback] = None,
) -> CrawlResult:
    """
    Open a crawler session, mirror *seed_url* into *dest_root* and return the result.

    Crawl failures are reported in ``CrawlResult.error``; only unexpected
    exceptions escape.
    """
    async with AsyncCrawler(dest_root, config, progress=progress) as crawler:
        result = await crawler.crawl(seed_url)
    if not result.ok:
        logger.info("Mirroring of %s ended with an error: %s", seed_url, result.error)
    return result
