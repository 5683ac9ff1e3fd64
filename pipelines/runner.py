from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from models.contact_record import ContactRecord
from models.merge_result import MergeResult
from utils.logging_setup import init_logging, new_run_id


@dataclass
class RunContext:
    linkedin_url: Optional[str] = None
    incoming_names: List[str] = field(default_factory=list)
    contact: Optional[ContactRecord] = None
    merge: Optional[MergeResult] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        ctx.meta.setdefault("run_id", new_run_id())
        for step in self.steps:
            ctx = step.run(ctx)
            # A step that cannot proceed marks the context halted
            if ctx.meta.get("halted"):
                break
        return ctx
