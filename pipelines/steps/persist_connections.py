from __future__ import annotations

import logging

from pipelines.runner import RunContext
from ports.repos import ContactsRepoPort


logger = logging.getLogger(__name__)


class PersistConnections:
    """Write the merged list back, only when the merge added someone."""

    def __init__(self, repo: ContactsRepoPort) -> None:
        self.repo = repo

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.contact is None or ctx.merge is None:
            return ctx
        if not ctx.merge.added:
            ctx.meta["persisted"] = False
            return ctx
        self.repo.update_mutual_connections(ctx.contact.id, ctx.merge.merged)
        ctx.meta["persisted"] = True
        logger.info(
            f"Synced {len(ctx.merge.added)} connections to contact {ctx.contact.name} ({ctx.contact.id})",
            extra={"step": "persist_connections", "status": "ok", "run_id": ctx.meta.get("run_id")},
        )
        return ctx
