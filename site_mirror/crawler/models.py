# site_mirror/crawler/models.py
"""
Data models for the SiteMirror crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from site_mirror.errors import MirrorError


@dataclass(slots=True)
class ArchivedPage:
    """A fetched URL and the file its body was written to."""

    url: str
    path: Path


@dataclass(slots=True)
class CrawlFailure:
    """A URL whose fetch or archive step failed."""

    url: str
    error: MirrorError


@dataclass(slots=True)
class CrawlResult:
    """Outcome of a crawl (or of one subtree of it).

    ``error`` is the failure that propagated up to this point of the task
    tree: the task's own failure, otherwise the first failing child.
    """

    seed: str
    archived: List[ArchivedPage] = field(default_factory=list)
    failures: List[CrawlFailure] = field(default_factory=list)
    error: Optional[MirrorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def merge(self, child: CrawlResult) -> None:
        """Fold a finished child subtree into this result."""
        self.archived.extend(child.archived)
        self.failures.extend(child.failures)
        if self.error is None and child.error is not None:
            self.error = child.error
