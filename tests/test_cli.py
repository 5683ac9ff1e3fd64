from __future__ import annotations

import json
import sqlite3
import sys
from typing import List

import pytest


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


def test_cli_add_contact_and_sync(tmp_path, capsys):
    db_path = tmp_path / "cli.db"
    _run_cli_with_args(["--db", str(db_path), "bootstrap"])
    _run_cli_with_args([
        "--db", str(db_path),
        "add-contact",
        "--name", "Jane Doe",
        "--linkedin-url", "https://www.linkedin.com/in/Jane-Doe/",
        "--connection", "Bob Lee",
    ])
    _run_cli_with_args([
        "--db", str(db_path),
        "sync-connections",
        "--profile", "https://linkedin.com/in/jane-doe",
        "--names", "Bob Lee, MBA", "Cara Diaz",
    ])
    out = capsys.readouterr().out
    assert "Added contact 1" in out
    assert '"added": [\n    "Cara Diaz"\n  ]' in out

    conn = sqlite3.connect(str(db_path))
    try:
        cur = conn.cursor()
        cur.execute("SELECT linkedin_url, mutual_connections_json FROM contacts")
        url, names_json = cur.fetchone()
        assert url == "https://linkedin.com/in/jane-doe"
        assert json.loads(names_json) == ["Bob Lee", "Cara Diaz"]
    finally:
        conn.close()


def test_cli_sync_unknown_contact_exits_nonzero(tmp_path):
    db_path = tmp_path / "cli.db"
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args([
            "--db", str(db_path),
            "sync-connections",
            "--profile", "https://linkedin.com/in/ghost",
            "--names", "Bob Lee",
        ])
    assert exc.value.code == 1


def test_cli_extract_profile_and_sync_from_file(tmp_path, capsys):
    db_path = tmp_path / "cli.db"
    _run_cli_with_args([
        "--db", str(db_path),
        "add-contact",
        "--name", "Jane Doe",
        "--linkedin-url", "https://www.linkedin.com/in/jane-doe",
    ])
    profile_html = tmp_path / "profile.html"
    profile_html.write_text(
        '<html><body><h1 class="text-heading-xlarge">Jane Doe</h1>'
        '<div class="pv-shared-connections-card">'
        '<a class="app-aware-link"><span aria-hidden="true">Ann Wu</span></a>'
        "</div></body></html>",
        encoding="utf-8",
    )
    _run_cli_with_args([
        "--db", str(db_path),
        "extract-profile",
        "--html", str(profile_html),
        "--url", "https://www.linkedin.com/in/jane-doe/?trk=x",
        "--sync",
    ])
    out = capsys.readouterr().out
    assert '"name": "Jane Doe"' in out
    assert '"total_connections": 1' in out


def test_cli_extract_job_and_save(tmp_path, capsys):
    db_path = tmp_path / "cli.db"
    job_html = tmp_path / "job.html"
    job_html.write_text(
        '<html><body><h1>Staff Engineer</h1><span class="company-name">Acme</span></body></html>',
        encoding="utf-8",
    )
    _run_cli_with_args([
        "--db", str(db_path),
        "extract-job",
        "--html", str(job_html),
        "--url", "https://careers.example.com/jobs/1",
        "--save",
    ])
    out = capsys.readouterr().out
    assert '"job_title": "Staff Engineer"' in out
    assert "Saved job 1" in out

    conn = sqlite3.connect(str(db_path))
    try:
        cur = conn.cursor()
        cur.execute("SELECT job_title, company, status, notes FROM jobs")
        assert cur.fetchone() == ("Staff Engineer", "Acme", "interested", "Source: careers.example.com")
    finally:
        conn.close()


def test_cli_extract_job_without_data(tmp_path, capsys):
    page = tmp_path / "empty.html"
    page.write_text("<html><body><p>Nothing</p></body></html>", encoding="utf-8")
    _run_cli_with_args([
        "--db", str(tmp_path / "cli.db"),
        "extract-job",
        "--html", str(page),
        "--url", "https://example.com/",
    ])
    assert "No job data found on this page" in capsys.readouterr().out


def test_cli_sync_input_must_be_object(tmp_path, capsys):
    input_path = tmp_path / "connections.json"
    input_path.write_text(json.dumps(["Bob Lee", "Cara Diaz"]), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args([
            "--db", str(tmp_path / "cli.db"),
            "sync-connections",
            "--profile", "https://linkedin.com/in/jane-doe",
            "--input", str(input_path),
        ])
    assert exc.value.code == 2
    assert "JSON object" in capsys.readouterr().out
