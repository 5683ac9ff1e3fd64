from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol

from config.settings import get_settings
from models.job_record import JobRecord
from parsers.page import Page, text_content


class JobParser(Protocol):
    parser_name: str

    def matches(self, page: Page) -> bool:
        ...

    def parse(self, page: Page) -> Optional[JobRecord]:
        ...


def new_job_record(page: Page) -> JobRecord:
    return JobRecord(job_url=page.url or None, status=get_settings().default_job_status)


def truncate_description(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    text = text.strip()
    if not text:
        return None
    return text[: get_settings().description_max_chars]


def first_text(
    page: Page,
    selectors: Iterable[str],
    accept: Callable[[str], bool] = bool,
) -> Optional[str]:
    """Text of the first element, in selector rank order, whose text passes accept."""
    for selector in selectors:
        el = page.select_one(selector)
        if el is None:
            continue
        text = text_content(el)
        if text and accept(text):
            return text
    return None
