from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

from models.job_record import JobRecord
from parsers.base import new_job_record, truncate_description
from parsers.page import Page


logger = logging.getLogger(__name__)


def _is_job_posting(obj: Any) -> bool:
    if not isinstance(obj, dict):
        return False
    kind = obj.get("@type")
    if isinstance(kind, list):
        return "JobPosting" in kind
    return kind == "JobPosting"


def find_job_posting(data: Any) -> Optional[Dict[str, Any]]:
    """JobPosting object from a decoded JSON-LD block (object, array or @graph)."""
    if isinstance(data, list):
        return next((item for item in data if _is_job_posting(item)), None)
    if _is_job_posting(data):
        return data
    if isinstance(data, dict) and isinstance(data.get("@graph"), list):
        return find_job_posting(data["@graph"])
    return None


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _location(posting: Dict[str, Any]) -> Optional[str]:
    loc = posting.get("jobLocation")
    if isinstance(loc, list):
        loc = loc[0] if loc else None
    if isinstance(loc, str):
        return _as_text(loc)
    if isinstance(loc, dict):
        address = loc.get("address")
        if isinstance(address, dict):
            return _as_text(address.get("addressLocality")) or _as_text(address.get("addressRegion"))
    return None


def _salary(posting: Dict[str, Any]) -> Optional[str]:
    salary = posting.get("baseSalary")
    if isinstance(salary, dict):
        value = salary.get("value")
        if isinstance(value, dict):
            return _as_text(value.get("value"))
        return _as_text(value)
    return _as_text(salary)


def _company(posting: Dict[str, Any]) -> Optional[str]:
    org = posting.get("hiringOrganization")
    if isinstance(org, dict):
        return _as_text(org.get("name"))
    return _as_text(org)


def _description(posting: Dict[str, Any]) -> Optional[str]:
    raw = _as_text(posting.get("description"))
    if not raw:
        return None
    # Descriptions are usually HTML fragments
    text = BeautifulSoup(raw, "lxml").get_text(separator="\n", strip=True)
    return truncate_description(text)


def to_job_record(page: Page, posting: Dict[str, Any]) -> JobRecord:
    job = new_job_record(page)
    job.job_title = _as_text(posting.get("title"))
    job.company = _company(posting)
    job.location = _location(posting)
    job.salary = _salary(posting)
    job.job_description = _description(posting)
    employment_type = posting.get("employmentType")
    if isinstance(employment_type, list):
        employment_type = ", ".join(str(t) for t in employment_type if t)
    if employment_type:
        job.notes = f"Type: {employment_type}"
    return job


def parse_structured_data(page: Page) -> Optional[JobRecord]:
    """First JobPosting found in the page's JSON-LD blocks.

    Malformed blocks are skipped. A posting without both title and company
    is not accepted.
    """
    for index, block in enumerate(page.json_ld_blocks()):
        try:
            data = json.loads(block)
        except (json.JSONDecodeError, ValueError) as e:
            logger.debug(f"Skipping malformed JSON-LD block {index}: {e}")
            continue
        posting = find_job_posting(data)
        if posting is None:
            continue
        job = to_job_record(page, posting)
        if job.job_title and job.company:
            return job
        # Only the first JobPosting on the page is considered
        return None
    return None
