from __future__ import annotations

import logging
from typing import Optional

from models.job_record import JobRecord
from parsers.base import first_text, new_job_record, truncate_description
from parsers.page import Page, inner_text, text_content


logger = logging.getLogger(__name__)

TITLE_SELECTORS = [
    'h1[class*="job-title"]',
    'h1[class*="title"]',
    '[data-qa="job-title"]',
    '.app-title',
    '.job-title',
    'h1.position-title',
    'h1',
    '[class*="JobTitle"]',
]

COMPANY_SELECTORS = [
    '[class*="company-name"]',
    '[data-qa="company-name"]',
    '.company',
    '[class*="CompanyName"]',
    'a[class*="company"]',
    '.employer',
]

LOCATION_SELECTORS = [
    '[class*="location"]',
    '[data-qa="location"]',
    '.job-location',
    '[class*="JobLocation"]',
]

DESCRIPTION_SELECTORS = [
    '[class*="description"]',
    '[data-qa="job-description"]',
    '.job-description',
    '#job-description',
    '[id*="description"]',
    '.content',
]


def _plausible_location(text: str) -> bool:
    if len(text) >= 150:
        return False
    return "," in text or any(ch.isspace() for ch in text) or len(text) > 5


def _description(page: Page) -> Optional[str]:
    for selector in DESCRIPTION_SELECTORS:
        el = page.select_one(selector)
        if el is not None and len(text_content(el)) > 100:
            return truncate_description(inner_text(el))
    return None


def parse_generic(page: Page) -> Optional[JobRecord]:
    """Last-resort heuristics over common job-board markup."""
    job = new_job_record(page)
    job.job_title = first_text(page, TITLE_SELECTORS, lambda t: len(t) < 200)
    job.company = first_text(page, COMPANY_SELECTORS, lambda t: len(t) < 100)
    job.location = first_text(page, LOCATION_SELECTORS, _plausible_location)
    job.job_description = _description(page)
    job.notes = f"Source: {page.source_domain}"

    if job.job_title:
        return job
    return None
