# site_mirror/crawler/ledger.py
"""
Visited-URL ledger shared by every crawl task.
"""
from __future__ import annotations

import threading
from typing import Set


class VisitedLedger:
    """Concurrency-safe set of URLs whose fetch has already been claimed."""

    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self._lock = threading.Lock()

    def check_and_mark(self, url: str) -> bool:
        """
        Return True if *url* was claimed before, otherwise claim it and return False.

        Lookup and insert happen under one lock, so exactly one caller per URL
        ever gets False.
        """
        with self._lock:
            if url in self._seen:
                return True
            self._seen.add(url)
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)
