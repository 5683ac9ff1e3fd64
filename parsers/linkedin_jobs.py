from __future__ import annotations

import logging
import re
from typing import Optional

from models.job_record import JobRecord
from parsers.base import first_text, new_job_record, truncate_description
from parsers.page import Page, inner_text, text_content
from parsers.registry import register


logger = logging.getLogger(__name__)

TITLE_SELECTORS = [
    '.job-details-jobs-unified-top-card__job-title',
    '.jobs-unified-top-card__job-title',
    'h1.t-24',
    'h1[class*="job-title"]',
    '.jobs-details-top-card__job-title',
    'h2.t-24',
]

COMPANY_SELECTORS = [
    '.job-details-jobs-unified-top-card__company-name',
    '.jobs-unified-top-card__company-name',
    '.jobs-unified-top-card__subtitle-primary-grouping a',
    'a[data-tracking-control-name="public_jobs_topcard-org-name"]',
    '.topcard__org-name-link',
    '.jobs-details-top-card__company-url',
]

SALARY_SELECTORS = [
    '.job-details-jobs-unified-top-card__job-insight',
    '.jobs-unified-top-card__job-insight',
    'span[class*="salary"]',
    '.compensation',
    'li.jobs-unified-top-card__job-insight',
]

_CITY_STATE_RE = re.compile(r"^[A-Za-z\s]+,\s*[A-Z]{2}")
_CITY_REGION_RE = re.compile(r"[A-Za-z\s]+,\s*[A-Za-z\s]+")
_WORKPLACE_WORD_RE = re.compile(
    r"^(full-time|part-time|contract|on-site|remote|hybrid|reposted|ago|people|clicked)$",
    re.IGNORECASE,
)
_BODY_LOCATION_RE = re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z]{2}(?:\s+\([A-Z][a-z\-]+\))?)")
_SALARY_RE = re.compile(r"\$|USD|EUR|GBP|salary|/yr|/year|/hour|/hr|k-|compensation", re.IGNORECASE)
_INSIGHT_SALARY_RE = re.compile(r"\$|salary|compensation", re.IGNORECASE)
_STATE_ABBREV_RE = re.compile(r"\b[A-Z]{2}\b")


def _location_from_top_card(page: Page) -> Optional[str]:
    container = page.select_one(
        '.jobs-unified-top-card__primary-description, '
        '.jobs-unified-top-card__primary-description-without-tagline'
    )
    if container is None:
        return None
    lines = [line.strip() for line in text_content(container).split("\n")]
    for line in lines:
        if not line:
            continue
        if _CITY_STATE_RE.search(line) or _CITY_REGION_RE.search(line):
            return line
    return None


def _location_from_bullets(page: Page) -> Optional[str]:
    for bullet in page.select('.jobs-unified-top-card__bullet'):
        text = text_content(bullet)
        if text and 3 < len(text) < 100 and not _WORKPLACE_WORD_RE.match(text):
            return text
    return None


def _location_from_body(page: Page) -> Optional[str]:
    m = _BODY_LOCATION_RE.search(page.body_text())
    if m:
        location = m.group(1).strip()
        if len(location) < 50:
            return location
    return None


def _salary_from_insights(page: Page) -> Optional[str]:
    for selector in SALARY_SELECTORS:
        for el in page.select(selector):
            text = text_content(el)
            if _SALARY_RE.search(text):
                return text
    return None


class LinkedInJobsParser:
    parser_name = "linkedin_jobs"

    def matches(self, page: Page) -> bool:
        return page.hostname == "www.linkedin.com" and "/jobs/" in page.path

    def parse(self, page: Page) -> Optional[JobRecord]:
        job = new_job_record(page)
        job.job_title = first_text(page, TITLE_SELECTORS)
        job.company = first_text(page, COMPANY_SELECTORS)

        job.location = (
            _location_from_top_card(page)
            or _location_from_bullets(page)
            or _location_from_body(page)
        )
        job.salary = _salary_from_insights(page)

        for item in page.select('ul.jobs-unified-top-card__job-insight-view-model-secondary li'):
            text = text_content(item)
            if not job.location and ("," in text or _STATE_ABBREV_RE.search(text)):
                job.location = text
            if not job.salary and _INSIGHT_SALARY_RE.search(text):
                job.salary = text

        description = page.select_one('.jobs-description__content, .jobs-description, .jobs-box__html-content')
        job.job_description = truncate_description(inner_text(description))

        workplace = page.text_of('.jobs-unified-top-card__workplace-type')
        if workplace:
            job.notes = f"Workplace Type: {workplace}"

        if job.job_title and job.company:
            logger.debug(f"LinkedIn job data extracted: {job.job_title}")
            return job
        return None


def _register():
    register(LinkedInJobsParser.parser_name, LinkedInJobsParser)


_register()
