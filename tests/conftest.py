# File: tests/conftest.py
import logging
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
from aiohttp import web
from site_mirror.config import MirrorConfig
from site_mirror.crawler.models import ArchivedPage, CrawlResult
from site_mirror.logger import LOGGER_NAME


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def html_page(*hrefs: str) -> Callable:
    """Build a handler returning an HTML page that links to *hrefs*."""
    body = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)

    async def handler(_):
        return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")

    return handler


@pytest.fixture(autouse=True)
def restore_logger():
    """The CLI reconfigures the project logger; put the original handlers back."""
    lg = logging.getLogger(LOGGER_NAME)
    handlers, level = list(lg.handlers), lg.level
    yield
    lg.handlers[:] = handlers
    lg.setLevel(level)


@pytest.fixture()
def dest_root(tmp_path) -> Path:
    """Destination directory for archived pages."""
    return tmp_path / "mirror"


@pytest.fixture()
def basic_config() -> MirrorConfig:
    """Short timeouts for the local test servers."""
    return MirrorConfig(timeout=5.0)


@pytest.fixture()
def sample_result(tmp_path) -> CrawlResult:
    """A finished crawl with two archived pages and no error."""
    return CrawlResult(
        seed="http://example.com/",
        archived=[
            ArchivedPage("http://example.com/", tmp_path / "example.com" / "index.html"),
            ArchivedPage("http://example.com/about", tmp_path / "example.com" / "about"),
        ],
    )
