from __future__ import annotations

import json
import sqlite3
from typing import List, Optional

from models.contact_record import ContactRecord
from services.domain_utils import extract_linkedin_username, normalize_linkedin_path


_COLUMNS = "id, name, title, company, linkedin_url, mutual_connections_json"


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _decode_names(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return []
    if not isinstance(data, list):
        return []
    return [str(n) for n in data if n is not None]


def _row_to_contact(row) -> ContactRecord:
    return ContactRecord(
        id=int(row[0]),
        name=row[1],
        title=row[2],
        company=row[3],
        linkedin_url=row[4],
        mutual_connections=_decode_names(row[5]),
    )


class ContactsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def insert_contact(
        self,
        name: Optional[str],
        linkedin_url: Optional[str],
        title: Optional[str] = None,
        company: Optional[str] = None,
        mutual_connections: Optional[List[str]] = None,
    ) -> int:
        """Insert a contact; returns contact id."""
        cur = self.conn.cursor()
        cur.execute(
            (
                "INSERT INTO contacts (name, title, company, linkedin_url, mutual_connections_json) "
                "VALUES (?, ?, ?, ?, ?)"
            ),
            (name, title, company, linkedin_url, json.dumps(list(mutual_connections or []), ensure_ascii=False)),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def get(self, contact_id: int) -> Optional[ContactRecord]:
        cur = self.conn.cursor()
        cur.execute(f"SELECT {_COLUMNS} FROM contacts WHERE id = ?", (contact_id,))
        row = cur.fetchone()
        return _row_to_contact(row) if row else None

    def find_by_linkedin_url(self, linkedin_url: str) -> Optional[ContactRecord]:
        """First contact whose stored URL contains the profile path or username.

        Matching is case-insensitive (SQLite LIKE folds ASCII case).
        """
        path = normalize_linkedin_path(linkedin_url)
        # A bare "/in" or "/" would match every stored profile
        if len([p for p in path.split("/") if p]) < 2:
            path = ""
        username = extract_linkedin_username(linkedin_url)
        clauses = []
        params: List[str] = []
        for needle in (path, username):
            if needle:
                clauses.append("linkedin_url LIKE ? ESCAPE '\\'")
                params.append(f"%{_escape_like(needle)}%")
        if not clauses:
            return None
        cur = self.conn.cursor()
        cur.execute(
            f"SELECT {_COLUMNS} FROM contacts WHERE linkedin_url IS NOT NULL AND ({' OR '.join(clauses)}) "
            "ORDER BY id LIMIT 1",
            params,
        )
        row = cur.fetchone()
        return _row_to_contact(row) if row else None

    def update_mutual_connections(self, contact_id: int, names: List[str]) -> None:
        self.conn.execute(
            "UPDATE contacts SET mutual_connections_json = ?, updated_at = datetime('now') WHERE id = ?",
            (json.dumps(list(names), ensure_ascii=False), contact_id),
        )
        self.conn.commit()
