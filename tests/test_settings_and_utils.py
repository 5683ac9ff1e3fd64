from __future__ import annotations

import logging

import pytest

from config.settings import get_settings
from services.domain_utils import (
    extract_apex_domain,
    extract_linkedin_username,
    normalize_linkedin_path,
    normalize_linkedin_profile_url,
    source_domain,
)
from utils.logging_setup import SafeExtraFormatter


def test_settings_defaults(monkeypatch):
    for key in ("DB_PATH", "EXTENSION_API_KEY", "MAX_SCROLLS", "DESCRIPTION_MAX_CHARS"):
        monkeypatch.delenv(key, raising=False)
    s = get_settings()
    assert s.db_path == "crm.db"
    assert s.extension_api_key is None
    assert s.max_scrolls == 20
    assert s.description_max_chars == 2000
    assert s.default_job_status == "interested"


def test_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("DB_PATH", "/tmp/other.db")
    monkeypatch.setenv("MAX_SCROLLS", "7")
    monkeypatch.setenv("MODAL_WAIT_SECONDS", "1.5")
    s = get_settings()
    assert s.db_path == "/tmp/other.db"
    assert s.max_scrolls == 7
    assert s.modal_wait_seconds == 1.5


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s step=%(step)s strategy=%(strategy)s")
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    record.step = "extract_job"
    assert formatter.format(record) == "hello step=extract_job strategy=-"


@pytest.mark.parametrize(
    "url,path",
    [
        ("https://www.linkedin.com/in/Jane-Doe/", "/in/jane-doe"),
        ("linkedin.com/in/jane-doe?trk=abc", "/in/jane-doe"),
        ("", ""),
    ],
)
def test_normalize_linkedin_path(url, path):
    assert normalize_linkedin_path(url) == path


def test_linkedin_username_and_profile_url():
    assert extract_linkedin_username("https://www.linkedin.com/in/Jane-Doe/details/") == "jane-doe"
    assert extract_linkedin_username("https://example.com/in/jane") == ""
    assert normalize_linkedin_profile_url("https://de.linkedin.com/in/Jane-Doe/en/") == "https://linkedin.com/in/jane-doe"
    assert normalize_linkedin_profile_url("https://example.com/in/jane") is None


def test_domains():
    assert source_domain("https://www.careers.example.com/jobs/1") == "careers.example.com"
    assert source_domain(None) == ""
    assert extract_apex_domain("https://boards.greenhouse.io/acme/jobs/1") == "greenhouse.io"
    assert extract_apex_domain("jobs.lever.co") == "lever.co"
