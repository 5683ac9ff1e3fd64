from __future__ import annotations

import logging

from pipelines.runner import RunContext
from ports.repos import ContactsRepoPort


logger = logging.getLogger(__name__)


class LookupContact:
    def __init__(self, repo: ContactsRepoPort) -> None:
        self.repo = repo

    def run(self, ctx: RunContext) -> RunContext:
        ctx.contact = self.repo.find_by_linkedin_url(ctx.linkedin_url or "")
        if ctx.contact is None:
            logger.info(
                f"No contact for {ctx.linkedin_url}",
                extra={"step": "lookup_contact", "status": "not_found", "run_id": ctx.meta.get("run_id")},
            )
            ctx.meta["halted"] = True
            ctx.meta["error"] = "Contact not found with that LinkedIn URL"
        return ctx
