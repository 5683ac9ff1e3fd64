from __future__ import annotations

import logging
from typing import Any, Optional

from parsers.page import Page


logger = logging.getLogger(__name__)

MODAL_SELECTOR = ".artdeco-modal"
MODAL_CONTENT_SELECTOR = ".artdeco-modal__content"
MODAL_DISMISS_SELECTOR = ".artdeco-modal__dismiss"


class PlaywrightModalDriver:
    """ModalDriverPort over a Playwright sync-API page.

    Every element lookup tolerates absence; the page may still be loading.
    """

    def __init__(self, page: Any) -> None:
        self.page = page

    def snapshot(self) -> Page:
        return Page(self.page.content(), self.page.url)

    def click_mutual_connections_link(self) -> bool:
        for link in self.page.query_selector_all('a[href*="facetNetwork"]'):
            text = (link.text_content() or "").lower()
            if "mutual" in text:
                link.click()
                return True
        section = self.page.query_selector('[data-test-id="mutual-connections"]')
        if section is not None:
            link = section.query_selector("a")
            if link is not None:
                link.click()
                return True
        return False

    def is_modal_open(self) -> bool:
        return self.page.query_selector(MODAL_SELECTOR) is not None

    def modal_scroll_height(self) -> Optional[int]:
        content = self.page.query_selector(MODAL_CONTENT_SELECTOR)
        if content is None:
            return None
        return int(content.evaluate("el => el.scrollHeight"))

    def scroll_modal_to(self, position: int) -> None:
        content = self.page.query_selector(MODAL_CONTENT_SELECTOR)
        if content is not None:
            content.evaluate("(el, top) => { el.scrollTop = top; }", position)

    def close_modal(self) -> None:
        button = self.page.query_selector(MODAL_DISMISS_SELECTOR)
        if button is not None:
            button.click()


def scrape_profile_url(url: str, *, storage_state: Optional[str] = None, headless: bool = True):
    """Open a profile in Chromium and run the exhaustive mutual connection scrape.

    storage_state is a Playwright storage file holding a logged-in LinkedIn
    session.
    """
    from playwright.sync_api import sync_playwright

    from services.modal_scraper import scrape_all_mutual_connections

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            context = browser.new_context(storage_state=storage_state) if storage_state else browser.new_context()
            page = context.new_page()
            page.goto(url, wait_until="domcontentloaded")
            return scrape_all_mutual_connections(PlaywrightModalDriver(page))
        finally:
            browser.close()
