# File: site_mirror/crawler/__init__.py
"""site_mirror.crawler: ledger, fetcher, archiver, link extractor and the orchestrator tying them together."""

from .archiver import Archiver
from .crawler import AsyncCrawler
from .fetcher import Fetcher
from .ledger import VisitedLedger
from .link_extractor import extract_links
from .models import ArchivedPage, CrawlFailure, CrawlResult

__all__ = [
    "Archiver",
    "ArchivedPage",
    "AsyncCrawler",
    "CrawlFailure",
    "CrawlResult",
    "Fetcher",
    "VisitedLedger",
    "extract_links",
]
