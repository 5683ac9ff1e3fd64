from __future__ import annotations

import sqlite3
from typing import Any, Dict


JOB_FIELDS = [
    "job_title",
    "company",
    "location",
    "salary",
    "job_url",
    "status",
    "applied_date",
    "job_description",
    "notes",
]


class JobsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def insert_job(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a job row and return it as a dict including its id."""
        values = [fields.get(f) for f in JOB_FIELDS]
        values[JOB_FIELDS.index("status")] = fields.get("status") or "interested"
        cur = self.conn.cursor()
        cur.execute(
            f"INSERT INTO jobs ({', '.join(JOB_FIELDS)}) VALUES ({', '.join('?' for _ in JOB_FIELDS)})",
            values,
        )
        self.conn.commit()
        job_id = int(cur.lastrowid)
        cur.execute(f"SELECT id, {', '.join(JOB_FIELDS)}, created_at FROM jobs WHERE id = ?", (job_id,))
        row = cur.fetchone()
        keys = ["id", *JOB_FIELDS, "created_at"]
        return {k: row[i] for i, k in enumerate(keys)}
