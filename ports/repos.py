from __future__ import annotations

from typing import List, Optional, Protocol

from models.contact_record import ContactRecord


class ContactsRepoPort(Protocol):
    def find_by_linkedin_url(self, linkedin_url: str) -> Optional[ContactRecord]:
        ...

    def update_mutual_connections(self, contact_id: int, names: List[str]) -> None:
        ...
