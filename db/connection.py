from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open the CRM database.

    WAL lets the API read while a sync writes; foreign keys stay enforced.
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA foreign_keys=ON;")
    return conn


@contextmanager
def open_db(db_path: str) -> Iterator[sqlite3.Connection]:
    """Connection scoped to one request or command; always closed."""
    conn = get_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()
