# site_mirror/crawler/link_extractor.py
"""
Link extraction for SiteMirror: anchors on a page that stay on the page's host.
"""
from __future__ import annotations

from typing import List, Optional, Union
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

FETCHABLE_SCHEMES = ("http", "https")


def extract_links(page_host: str, content: Union[bytes, str], *, page_scheme: str = "") -> List[str]:
    """
    Extract same-host links from the ``<a href>`` tags of *content*.

    *page_host* is the authority the page was fetched from (``host`` or
    ``host:port``). Hrefs with a scheme other than http(s) are skipped.
    Protocol-relative hrefs (``//host/path``) get *page_scheme*. Other hrefs
    without a hostname, except fragment-only ones, are rewritten to
    ``<scheme>://<page_host><path>``, where *scheme* is the href's own scheme
    or *page_scheme* when the href has none. A link is kept only if
    its hostname equals the page's hostname. Order follows the document;
    unparseable hrefs are skipped.
    """
    hostname = urlparse(f"//{page_host}").hostname
    soup = BeautifulSoup(content, "html.parser")
    links: List[str] = []
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        link = _resolve(href_val.strip(), page_host, hostname, page_scheme)
        if link is not None:
            links.append(link)
    return links


def _resolve(href: str, page_host: str, hostname: Optional[str], page_scheme: str) -> Optional[str]:
    try:
        parsed = urlparse(href)
        if parsed.scheme and parsed.scheme not in FETCHABLE_SCHEMES:
            return None
        link = href
        if parsed.hostname:
            if not parsed.scheme:
                # protocol-relative: //host/path
                link = f"{page_scheme}:{href}"
        elif not href.startswith("#"):
            scheme = parsed.scheme or page_scheme
            link = f"{scheme}://{page_host}{parsed.path}"
        if hostname and urlparse(link).hostname == hostname:
            return link
    except ValueError:
        pass
    return None
