from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProfileRecord(BaseModel):
    """Extraction output: a LinkedIn profile and the mutual connections visible on it."""

    linkedin_url: str | None = None
    name: str | None = None
    headline: str | None = None
    mutual_connections: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
