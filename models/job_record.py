from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JobRecord(BaseModel):
    """Extraction output: one job posting as scraped from a page."""

    job_title: str | None = None
    company: str | None = None
    location: str | None = None
    salary: str | None = None
    job_url: str | None = None
    job_description: str | None = None
    status: str = "interested"
    notes: str | None = None

    model_config = ConfigDict(extra="ignore")
