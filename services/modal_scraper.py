from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from config.settings import Settings, get_settings
from models.profile_record import ProfileRecord
from ports.browser import ModalDriverPort
from services.profile_extractor import extract_mutual_connections, extract_profile_data


logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], None]


def wait_for_modal_connections(
    driver: ModalDriverPort,
    *,
    wait_seconds: float,
    poll_seconds: float,
    settle_seconds: float,
    clock: Clock = time.monotonic,
    sleep: Sleep = time.sleep,
) -> List[str]:
    """Poll until the connections modal shows names or wait_seconds elapse.

    On timeout, returns whatever the page shows at that point.
    """
    start = clock()
    while clock() - start < wait_seconds:
        if driver.is_modal_open():
            sleep(settle_seconds)
            names = extract_mutual_connections(driver.snapshot())
            if names:
                return names
        sleep(poll_seconds)
    logger.info("Timed out waiting for connections modal", extra={"step": "modal_wait", "status": "timeout"})
    return extract_mutual_connections(driver.snapshot())


def scroll_modal_to_load_all(
    driver: ModalDriverPort,
    *,
    max_scrolls: int,
    pause_seconds: float,
    deadline_seconds: float,
    clock: Clock = time.monotonic,
    sleep: Sleep = time.sleep,
) -> int:
    """Scroll the modal until its content height stops growing.

    Stops at max_scrolls steps or after deadline_seconds, whichever comes
    first. Returns the number of scroll steps taken.
    """
    start = clock()
    previous_height = 0
    steps = 0
    while steps < max_scrolls:
        if clock() - start >= deadline_seconds:
            logger.info("Modal scroll deadline reached", extra={"step": "modal_scroll", "status": "timeout"})
            break
        current_height = driver.modal_scroll_height()
        if current_height is None or current_height == previous_height:
            break
        previous_height = current_height
        driver.scroll_modal_to(current_height)
        steps += 1
        sleep(pause_seconds)
    return steps


def scrape_all_mutual_connections(
    driver: ModalDriverPort,
    *,
    settings: Optional[Settings] = None,
    clock: Clock = time.monotonic,
    sleep: Sleep = time.sleep,
) -> ProfileRecord:
    """Open the mutual connections modal, load every page of it and extract.

    Best-effort: if the modal cannot be opened the visible profile data is
    returned, and timeouts return what was loaded so far.
    """
    settings = settings or get_settings()
    record = extract_profile_data(driver.snapshot())

    if not driver.click_mutual_connections_link():
        logger.info("No mutual connections link found", extra={"step": "modal_open", "status": "miss"})
        return record

    names = wait_for_modal_connections(
        driver,
        wait_seconds=settings.modal_wait_seconds,
        poll_seconds=settings.modal_poll_seconds,
        settle_seconds=settings.modal_settle_seconds,
        clock=clock,
        sleep=sleep,
    )
    if names:
        record.mutual_connections = names

    steps = scroll_modal_to_load_all(
        driver,
        max_scrolls=settings.max_scrolls,
        pause_seconds=settings.scroll_pause_seconds,
        deadline_seconds=settings.scroll_deadline_seconds,
        clock=clock,
        sleep=sleep,
    )

    names = extract_mutual_connections(driver.snapshot())
    if names:
        record.mutual_connections = names
    driver.close_modal()

    logger.info(
        f"Collected {len(record.mutual_connections)} mutual connections after {steps} scroll steps",
        extra={"step": "modal_scrape", "status": "ok"},
    )
    return record
