from __future__ import annotations

import logging
import re
from typing import Optional

from models.job_record import JobRecord
from parsers.base import first_text, new_job_record, truncate_description
from parsers.page import Page, inner_text
from parsers.registry import register
from services.domain_utils import extract_apex_domain


logger = logging.getLogger(__name__)

_LEADING_AT_RE = re.compile(r"^at\s+", re.IGNORECASE)


def company_from_board_slug(page: Page) -> Optional[str]:
    """Board slug (first path segment) as a readable company name."""
    parts = [p for p in page.path.split("/") if p]
    if not parts:
        return None
    return parts[0].replace("-", " ").replace("_", " ").title() or None


class GreenhouseParser:
    parser_name = "greenhouse"

    def matches(self, page: Page) -> bool:
        return extract_apex_domain(page.hostname) == "greenhouse.io"

    def parse(self, page: Page) -> Optional[JobRecord]:
        job = new_job_record(page)
        job.job_title = first_text(page, ["h1.app-title", ".app-title", ".job__title h1", "h1"])
        company = first_text(page, [".company-name", "span.company-name"])
        if company:
            company = _LEADING_AT_RE.sub("", company).strip() or None
        job.company = company or company_from_board_slug(page)
        job.location = first_text(page, [".location", ".job__location", ".job-location"])
        description = page.select_one("#content, .job__description, .job-description, #job-description")
        job.job_description = truncate_description(inner_text(description))
        job.notes = "Source: Greenhouse"

        if job.job_title:
            logger.debug(f"Greenhouse job data extracted: {job.job_title}")
            return job
        return None


def _register():
    register(GreenhouseParser.parser_name, GreenhouseParser)


_register()
