# File: tests/test_ledger.py
import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from site_mirror.crawler.ledger import VisitedLedger


def test_first_call_claims_url():
    ledger = VisitedLedger()
    assert ledger.check_and_mark("http://example.com/") is False
    assert ledger.check_and_mark("http://example.com/") is True
    assert ledger.check_and_mark("http://example.com/") is True
    assert len(ledger) == 1


def test_distinct_urls_are_independent():
    ledger = VisitedLedger()
    assert ledger.check_and_mark("http://example.com/a") is False
    assert ledger.check_and_mark("http://example.com/b") is False
    assert ledger.check_and_mark("http://example.com/c") is False
    assert len(ledger) == 3


@pytest.mark.parametrize("callers", [2, 16, 64])
def test_concurrent_threads_claim_once(callers):
    ledger = VisitedLedger()
    barrier = threading.Barrier(callers)

    def claim():
        barrier.wait()
        return ledger.check_and_mark("http://example.com/page")

    with ThreadPoolExecutor(max_workers=callers) as pool:
        results = list(pool.map(lambda _: claim(), range(callers)))

    assert results.count(False) == 1
    assert results.count(True) == callers - 1


@pytest.mark.asyncio()
async def test_concurrent_tasks_claim_once():
    ledger = VisitedLedger()

    async def claim(url: str) -> bool:
        await asyncio.sleep(0)
        return ledger.check_and_mark(url)

    urls = ["http://example.com/a", "http://example.com/b"] * 50
    results = await asyncio.gather(*(claim(u) for u in urls))

    for url in set(urls):
        claimed = [r for u, r in zip(urls, results) if u == url]
        assert claimed.count(False) == 1
        assert claimed.count(True) == 49
