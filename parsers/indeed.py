from __future__ import annotations

import logging
from typing import Optional

from models.job_record import JobRecord
from parsers.base import new_job_record, truncate_description
from parsers.page import Page, inner_text, text_content
from parsers.registry import register


logger = logging.getLogger(__name__)


class IndeedParser:
    parser_name = "indeed"

    def matches(self, page: Page) -> bool:
        return "indeed.com" in page.hostname and (
            "/viewjob" in page.path
            or "/job/" in page.path
            or "jk=" in page.query
        )

    def parse(self, page: Page) -> Optional[JobRecord]:
        job = new_job_record(page)

        job.job_title = page.text_of(
            '.jobsearch-JobInfoHeader-title, '
            'h1.jobsearch-JobInfoHeader-title-container, '
            'h1[class*="jobTitle"]'
        )
        job.company = page.text_of(
            '[data-company-name], '
            '.jobsearch-InlineCompanyRating-companyHeader a, '
            '[data-testid="inlineHeader-companyName"]'
        )
        if not job.company:
            job.company = page.text_of('.css-1cxc9zk, .jobsearch-CompanyInfoContainer a')

        job.location = page.text_of(
            '[data-testid="inlineHeader-companyLocation"], '
            '.jobsearch-JobInfoHeader-subtitle-location, '
            '.jobsearch-JobInfoHeader-subtitle div'
        )

        salary_text = page.text_of(
            '#salaryInfoAndJobType, '
            '.jobsearch-JobMetadataHeader-item, '
            '[data-testid="jobsearch-JobMetadataHeader-salary"]'
        )
        if salary_text:
            lowered = salary_text.lower()
            if "$" in salary_text or "hour" in lowered or "year" in lowered:
                job.salary = salary_text

        description = page.select_one('#jobDescriptionText, .jobsearch-jobDescriptionText, [id*="jobDescription"]')
        job.job_description = truncate_description(inner_text(description))

        job_type_el = page.select_one('.jobsearch-JobMetadataHeader-item, [data-testid="job-type"]')
        if job_type_el is not None:
            job_type = text_content(job_type_el)
            if job_type and "$" not in job_type and len(job_type) < 50:
                job.notes = f"Job Type: {job_type}"

        if job.job_title and job.company:
            logger.debug(f"Indeed job data extracted: {job.job_title}")
            return job
        return None


def _register():
    register(IndeedParser.parser_name, IndeedParser)


_register()
