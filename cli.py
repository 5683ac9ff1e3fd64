import argparse
import json
import logging
import sys

from config.settings import get_settings
from db import schema
from db.connection import get_connection
from db.repos.contacts_repo import ContactsRepo
from db.repos.jobs_repo import JobsRepo
from parsers.page import Page
from services.contact_sync import lookup_contact, sync_connections
from services.domain_utils import normalize_linkedin_profile_url
from services.job_extractor import extract_job_data
from services.profile_extractor import extract_profile_data
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _open(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    return conn


def cmd_bootstrap(args):
    conn = _open(args)
    conn.close()
    print("Schema ready")


def cmd_add_contact(args):
    conn = _open(args)
    try:
        url = normalize_linkedin_profile_url(args.linkedin_url) or args.linkedin_url
        contact_id = ContactsRepo(conn).insert_contact(
            name=args.name,
            linkedin_url=url,
            title=args.title,
            company=args.company,
            mutual_connections=args.connection or [],
        )
    finally:
        conn.close()
    print(f"Added contact {contact_id}")


def cmd_lookup_contact(args):
    conn = _open(args)
    try:
        _print_json(lookup_contact(ContactsRepo(conn), args.profile))
    finally:
        conn.close()


def _sync_and_print(args, linkedin_url, names) -> int:
    conn = _open(args)
    try:
        result = sync_connections(ContactsRepo(conn), linkedin_url, names)
    finally:
        conn.close()
    _print_json(result)
    return 0 if result.get("success") else 1


def cmd_sync_connections(args):
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            print("--input must contain a JSON object")
            sys.exit(2)
        linkedin_url = args.profile or data.get("linkedin_url")
        names = data.get("mutual_connections") or []
    else:
        linkedin_url = args.profile
        names = args.names or []
    if not linkedin_url:
        print("linkedin_url is required (--profile or in --input)")
        sys.exit(2)
    code = _sync_and_print(args, linkedin_url, names)
    if code:
        sys.exit(code)


def cmd_extract_job(args):
    page = Page.from_file(args.html, args.url)
    job = extract_job_data(page)
    if job is None:
        print("No job data found on this page")
        return
    _print_json(job.model_dump())
    if args.save:
        if not (job.job_title and job.company):
            print("Not saved: job_title and company are required")
            sys.exit(1)
        conn = _open(args)
        try:
            saved = JobsRepo(conn).insert_job(job.model_dump())
        finally:
            conn.close()
        print(f"Saved job {saved['id']}")


def cmd_extract_profile(args):
    page = Page.from_file(args.html, args.url)
    profile = extract_profile_data(page)
    _print_json(profile.model_dump())
    if args.sync:
        code = _sync_and_print(args, profile.linkedin_url or args.url, profile.mutual_connections)
        if code:
            sys.exit(code)


def cmd_scrape_profile(args):
    from services.playwright_driver import scrape_profile_url

    profile = scrape_profile_url(args.url, storage_state=args.storage_state, headless=not args.headed)
    _print_json(profile.model_dump())
    if args.sync:
        code = _sync_and_print(args, profile.linkedin_url or args.url, profile.mutual_connections)
        if code:
            sys.exit(code)


def cmd_serve(args):
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
    )


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Job Tracker CRM CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create tables and indexes")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_add = sub.add_parser("add-contact", help="Add a contact")
    p_add.add_argument("--name", required=True)
    p_add.add_argument("--linkedin-url", required=True)
    p_add.add_argument("--title")
    p_add.add_argument("--company")
    p_add.add_argument("--connection", action="append", help="Known mutual connection (repeatable)")
    p_add.set_defaults(func=cmd_add_contact)

    p_lc = sub.add_parser("lookup-contact", help="Find a contact by LinkedIn profile URL")
    p_lc.add_argument("--profile", required=True, help="LinkedIn profile URL")
    p_lc.set_defaults(func=cmd_lookup_contact)

    p_sc = sub.add_parser("sync-connections", help="Merge mutual connection names into a contact")
    p_sc.add_argument("--profile", help="LinkedIn profile URL")
    src = p_sc.add_mutually_exclusive_group(required=True)
    src.add_argument("--names", nargs="+", help="Mutual connection names")
    src.add_argument("--input", help="Profile JSON as printed by extract-profile")
    p_sc.set_defaults(func=cmd_sync_connections)

    p_ej = sub.add_parser("extract-job", help="Extract a job posting from a saved HTML page")
    p_ej.add_argument("--html", required=True, help="Path to saved HTML")
    p_ej.add_argument("--url", required=True, help="URL the page was loaded from")
    p_ej.add_argument("--save", action="store_true", help="Insert the job into the DB")
    p_ej.set_defaults(func=cmd_extract_job)

    p_ep = sub.add_parser("extract-profile", help="Extract a LinkedIn profile from a saved HTML page")
    p_ep.add_argument("--html", required=True)
    p_ep.add_argument("--url", required=True)
    p_ep.add_argument("--sync", action="store_true", help="Sync extracted connections to the matching contact")
    p_ep.set_defaults(func=cmd_extract_profile)

    p_sp = sub.add_parser("scrape-profile", help="Open a live profile and collect all mutual connections")
    p_sp.add_argument("--url", required=True)
    p_sp.add_argument("--storage-state", help="Playwright storage state with a logged-in session")
    p_sp.add_argument("--headed", action="store_true", help="Show the browser window")
    p_sp.add_argument("--sync", action="store_true")
    p_sp.set_defaults(func=cmd_scrape_profile)

    p_srv = sub.add_parser("serve", help="Run the extension HTTP API")
    p_srv.add_argument("--host")
    p_srv.add_argument("--port", type=int)
    p_srv.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
