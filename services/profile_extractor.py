from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

from models.profile_record import ProfileRecord
from parsers.page import Page, text_content
from utils.logging_setup import new_run_id


logger = logging.getLogger(__name__)

NAME_FALLBACK_SELECTORS = [
    'h1[data-anonymize="person-name"]',
    '.pv-top-card--list li:first-child',
    '.text-heading-xlarge',
]

MODAL_NAME_SELECTOR = (
    '.artdeco-modal [data-view-name="profile-component-entity"] '
    '.entity-result__title-text a span[aria-hidden="true"]'
)
CARD_NAME_SELECTOR = '.entity-result__title-text a span[aria-hidden="true"]'
INLINE_BUTTON_SELECTOR = '[data-field="mutual_connections"] .inline-show-more-text__button--small'
INLINE_CONTAINER_SELECTOR = '[data-field="mutual_connections"]'
PILL_LINK_SELECTOR = '.pv-shared-connections-card a.app-aware-link'

# "Jane Doe, John Smith and 12 other mutual connections"
_INLINE_NAMES_RE = re.compile(r"([A-Z][a-z]+ [A-Z][a-z]+(?:, [A-Z][a-z]+ [A-Z][a-z]+)*)")


def get_linkedin_url(page: Page) -> Optional[str]:
    canonical = page.select_one('link[rel="canonical"]')
    if canonical is not None and canonical.get("href"):
        return str(canonical["href"])
    if not page.url:
        return None
    parts = urlsplit(page.url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def get_profile_name(page: Page) -> Optional[str]:
    el = page.select_one('h1.text-heading-xlarge')
    if el is not None:
        return text_content(el)
    for selector in NAME_FALLBACK_SELECTORS:
        el = page.select_one(selector)
        if el is not None:
            return text_content(el)
    return None


def get_profile_headline(page: Page) -> Optional[str]:
    return page.text_of('.text-body-medium.break-words')


def _unique_texts(elements) -> List[str]:
    # Raw-string dedup only; name normalization happens at sync time
    names: List[str] = []
    for el in elements:
        name = text_content(el)
        if name and name not in names:
            names.append(name)
    return names


def from_modal(page: Page) -> List[str]:
    return _unique_texts(page.select(MODAL_NAME_SELECTOR))


def from_search_cards(page: Page) -> List[str]:
    return _unique_texts(page.select(CARD_NAME_SELECTOR))


def from_inline_summary(page: Page) -> List[str]:
    if not page.select(INLINE_BUTTON_SELECTOR):
        return []
    container = page.select_one(INLINE_CONTAINER_SELECTOR)
    if container is None:
        return []
    m = _INLINE_NAMES_RE.search(container.get_text())
    if not m:
        return []
    names: List[str] = []
    for name in m.group(1).split(", "):
        name = name.strip()
        if name and name not in names:
            names.append(name)
    return names


def from_connection_pills(page: Page) -> List[str]:
    spans = []
    for link in page.select(PILL_LINK_SELECTOR):
        span = link.select_one('span[aria-hidden="true"]')
        if span is not None:
            spans.append(span)
    return _unique_texts(spans)


MUTUAL_STRATEGIES: List[Tuple[str, Callable[[Page], List[str]]]] = [
    ("modal", from_modal),
    ("search_cards", from_search_cards),
    ("inline_summary", from_inline_summary),
    ("connection_pills", from_connection_pills),
]


def extract_mutual_connections(page: Page) -> List[str]:
    """Mutual-connection names visible on the page; first strategy with results wins."""
    run_id = new_run_id()
    for name, strategy in MUTUAL_STRATEGIES:
        try:
            names = strategy(page)
        except Exception as e:
            logger.warning(
                "Mutual connection strategy failed",
                extra={"step": "extract_profile", "strategy": name, "status": "error", "error": str(e), "run_id": run_id},
            )
            continue
        if names:
            logger.debug(
                f"Found {len(names)} mutual connections",
                extra={"step": "extract_profile", "strategy": name, "status": "hit", "run_id": run_id},
            )
            return names
    return []


def extract_profile_data(page: Page) -> ProfileRecord:
    """Profile fields and the mutual connections currently rendered on the page."""
    return ProfileRecord(
        linkedin_url=get_linkedin_url(page),
        name=get_profile_name(page),
        headline=get_profile_headline(page),
        mutual_connections=extract_mutual_connections(page),
    )
