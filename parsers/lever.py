from __future__ import annotations

import logging
from typing import Optional

from models.job_record import JobRecord
from parsers.base import first_text, new_job_record, truncate_description
from parsers.greenhouse import company_from_board_slug
from parsers.page import Page, inner_text
from parsers.registry import register
from services.domain_utils import extract_apex_domain


logger = logging.getLogger(__name__)


class LeverParser:
    parser_name = "lever"

    def matches(self, page: Page) -> bool:
        return extract_apex_domain(page.hostname) == "lever.co"

    def parse(self, page: Page) -> Optional[JobRecord]:
        job = new_job_record(page)
        job.job_title = first_text(page, [".posting-headline h2", ".posting-headline h1", "h2", "h1"])
        job.company = company_from_board_slug(page)
        job.location = first_text(page, [".posting-categories .location", ".location"])
        commitment = first_text(page, [".posting-categories .commitment"])
        description = page.select_one(".posting-description, .section-wrapper")
        job.job_description = truncate_description(inner_text(description))
        job.notes = f"Source: Lever; Type: {commitment}" if commitment else "Source: Lever"

        if job.job_title:
            logger.debug(f"Lever job data extracted: {job.job_title}")
            return job
        return None


def _register():
    register(LeverParser.parser_name, LeverParser)


_register()
