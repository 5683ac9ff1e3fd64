from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from services.domain_utils import source_domain


logger = logging.getLogger(__name__)


class Page:
    """Read-only view over a loaded HTML document and the URL it came from."""

    def __init__(self, html: str, url: str = "") -> None:
        self.url = url or ""
        self.soup = BeautifulSoup(html or "", "lxml")
        parsed = urlparse(self.url)
        self.hostname = (parsed.hostname or "").lower()
        self.path = parsed.path or ""
        self.query = parsed.query or ""

    @classmethod
    def from_file(cls, path: str | Path, url: str = "") -> "Page":
        return cls(Path(path).read_text(encoding="utf-8"), url)

    @property
    def source_domain(self) -> str:
        return source_domain(self.url)

    def select_one(self, selector: str) -> Optional[Tag]:
        try:
            return self.soup.select_one(selector)
        except Exception as e:  # soupsieve rejects some browser-only selectors
            logger.debug(f"Selector failed: {selector}: {e}")
            return None

    def select(self, selector: str) -> List[Tag]:
        try:
            return list(self.soup.select(selector))
        except Exception as e:
            logger.debug(f"Selector failed: {selector}: {e}")
            return []

    def text_of(self, selector: str) -> Optional[str]:
        el = self.select_one(selector)
        if el is None:
            return None
        return text_content(el) or None

    def body_text(self) -> str:
        body = self.soup.body or self.soup
        return body.get_text()

    def json_ld_blocks(self) -> List[str]:
        return [
            script.get_text()
            for script in self.select('script[type="application/ld+json"]')
        ]


def text_content(el: Optional[Tag]) -> str:
    """Stripped text of an element, including text of all descendants."""
    if el is None:
        return ""
    return el.get_text().strip()


def inner_text(el: Optional[Tag]) -> str:
    """Text with block boundaries kept as line breaks."""
    if el is None:
        return ""
    return el.get_text(separator="\n", strip=True)
