from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    run_env: str
    log_level: str

    # Extension API
    extension_api_key: str | None
    api_base_url: str
    api_host: str
    api_port: int
    http_timeout_seconds: int

    # Extraction
    description_max_chars: int

    # Modal polling / scrolling
    modal_wait_seconds: float
    modal_poll_seconds: float
    modal_settle_seconds: float
    scroll_pause_seconds: float
    max_scrolls: int
    scroll_deadline_seconds: float

    default_job_status: str = "interested"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        db_path=os.getenv("DB_PATH", "crm.db"),
        run_env=os.getenv("RUN_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        extension_api_key=os.getenv("EXTENSION_API_KEY") or None,
        api_base_url=os.getenv("API_BASE_URL", "http://localhost:8000"),
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("API_PORT", "8000")),
        http_timeout_seconds=int(os.getenv("HTTP_TIMEOUT_SECONDS", "20")),
        description_max_chars=int(os.getenv("DESCRIPTION_MAX_CHARS", "2000")),
        modal_wait_seconds=float(os.getenv("MODAL_WAIT_SECONDS", "5.0")),
        modal_poll_seconds=float(os.getenv("MODAL_POLL_SECONDS", "0.2")),
        modal_settle_seconds=float(os.getenv("MODAL_SETTLE_SECONDS", "0.5")),
        scroll_pause_seconds=float(os.getenv("SCROLL_PAUSE_SECONDS", "0.3")),
        max_scrolls=int(os.getenv("MAX_SCROLLS", "20")),
        scroll_deadline_seconds=float(os.getenv("SCROLL_DEADLINE_SECONDS", "10.0")),
    )
