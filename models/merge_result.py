from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MergeResult(BaseModel):
    merged: list[str] = Field(default_factory=list)
    added: list[str] = Field(default_factory=list)
    already_existed: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
