from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create contacts/jobs schema and indexes (idempotent)."""
    cur = conn.cursor()

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS contacts (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  name TEXT,\n"
            "  title TEXT,\n"
            "  company TEXT,\n"
            "  linkedin_url TEXT,\n"
            "  mutual_connections_json TEXT NOT NULL DEFAULT '[]',\n"
            "  created_at TEXT NOT NULL DEFAULT (datetime('now')),\n"
            "  updated_at TEXT\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_contacts_linkedin_url ON contacts(linkedin_url);")

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS jobs (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  job_title TEXT NOT NULL,\n"
            "  company TEXT NOT NULL,\n"
            "  location TEXT,\n"
            "  salary TEXT,\n"
            "  job_url TEXT,\n"
            "  status TEXT NOT NULL DEFAULT 'interested',\n"
            "  applied_date TEXT,\n"
            "  job_description TEXT,\n"
            "  notes TEXT,\n"
            "  created_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_jobs_status ON jobs(status);")

    conn.commit()
