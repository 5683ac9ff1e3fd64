from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple

import parsers  # noqa: F401 ensure site parser registration
from models.job_record import JobRecord
from parsers.generic import parse_generic
from parsers.page import Page
from parsers.registry import matching_parsers
from parsers.structured_data import parse_structured_data
from utils.logging_setup import new_run_id


logger = logging.getLogger(__name__)

JobStrategy = Callable[[Page], Optional[JobRecord]]


def parse_site_specific(page: Page) -> Optional[JobRecord]:
    for parser in matching_parsers(page):
        logger.debug(f"Detected {parser.parser_name} job page")
        record = parser.parse(page)
        if record is not None:
            return record
    return None


STRATEGIES: List[Tuple[str, JobStrategy]] = [
    ("site_specific", parse_site_specific),
    ("structured_data", parse_structured_data),
    ("generic", parse_generic),
]


def _run_strategy(name: str, strategy: JobStrategy, page: Page, run_id: str) -> Optional[JobRecord]:
    t0 = time.time()
    try:
        record = strategy(page)
    except Exception as e:
        logger.warning(
            "Job extraction strategy failed",
            extra={"step": "extract_job", "strategy": name, "status": "error", "error": str(e), "run_id": run_id},
        )
        return None
    duration_ms = int((time.time() - t0) * 1000)
    status = "hit" if record is not None else "miss"
    logger.debug(
        "Job extraction strategy finished",
        extra={"step": "extract_job", "strategy": name, "status": status, "duration_ms": duration_ms, "run_id": run_id},
    )
    return record


def extract_job_data(page: Page, strategies: Optional[List[Tuple[str, JobStrategy]]] = None) -> Optional[JobRecord]:
    """Run the extraction cascade; the first record with a job title wins.

    Returns None when no strategy produced a usable record.
    """
    run_id = new_run_id()
    for name, strategy in strategies or STRATEGIES:
        record = _run_strategy(name, strategy, page, run_id)
        if record is not None and record.job_title:
            logger.info(
                f"Job data extracted: {record.job_title}",
                extra={"step": "extract_job", "strategy": name, "status": "ok", "run_id": run_id},
            )
            return record
    logger.info("No job data found on this page", extra={"step": "extract_job", "status": "empty", "run_id": run_id})
    return None
