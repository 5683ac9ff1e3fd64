from __future__ import annotations

from typing import Any, Dict, List, Optional

from pipelines.runner import Pipeline, RunContext
from pipelines.steps import LookupContact, MergeConnections, PersistConnections
from ports.repos import ContactsRepoPort


def lookup_contact(repo: ContactsRepoPort, linkedin_url: str) -> Dict[str, Any]:
    """{found: False} or {found: True, contact: {...}} for a profile URL."""
    contact = repo.find_by_linkedin_url(linkedin_url)
    if contact is None:
        return {"found": False}
    return {
        "found": True,
        "contact": {
            "id": contact.id,
            "name": contact.name,
            "title": contact.title,
            "company": contact.company,
            "linkedin": contact.linkedin_url,
            "mutual_connections": list(contact.mutual_connections),
        },
    }


def sync_connections(repo: ContactsRepoPort, linkedin_url: str, mutual_connections: Optional[List[str]]) -> Dict[str, Any]:
    """Merge scraped mutual connections into the matching contact.

    Returns a tagged result; a missing contact is reported as
    {success: False, error: ...}, not raised.
    """
    ctx = RunContext(linkedin_url=linkedin_url, incoming_names=list(mutual_connections or []))
    ctx = Pipeline([
        LookupContact(repo),
        MergeConnections(),
        PersistConnections(repo),
    ]).run(ctx)

    if ctx.contact is None or ctx.merge is None:
        return {"success": False, "error": ctx.meta.get("error") or "Contact not found with that LinkedIn URL"}

    return {
        "success": True,
        "contact_id": ctx.contact.id,
        "contact_name": ctx.contact.name,
        "added": ctx.merge.added,
        "already_existed": ctx.merge.already_existed,
        "total_connections": len(ctx.merge.merged),
    }
