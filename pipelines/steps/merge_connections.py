from __future__ import annotations

from pipelines.runner import RunContext
from services.name_matching import merge_names


class MergeConnections:
    def run(self, ctx: RunContext) -> RunContext:
        existing = ctx.contact.mutual_connections if ctx.contact else []
        ctx.merge = merge_names(existing, ctx.incoming_names)
        return ctx
