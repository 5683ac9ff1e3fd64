from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContactRecord(BaseModel):
    """App/DB record shape: a stored contact and its mutual connections."""

    id: int
    name: str | None = None
    title: str | None = None
    company: str | None = None
    linkedin_url: str | None = None
    mutual_connections: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
