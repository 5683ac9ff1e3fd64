from __future__ import annotations

import logging
import secrets
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Header
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import Settings, get_settings
from db import schema
from db.connection import open_db
from db.repos.contacts_repo import ContactsRepo
from db.repos.jobs_repo import JOB_FIELDS, JobsRepo
from services.contact_sync import lookup_contact, sync_connections
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)

INVALID_KEY = "Invalid or missing API key"


def _scalar_text(value: Any) -> Optional[str]:
    # Extension parsers may send numbers (e.g. JSON-LD salary values)
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _job_fields(body: Dict[str, Any], default_status: str) -> Dict[str, Optional[str]]:
    """Jobs row from a raw request body; blanks become NULL, status defaults."""
    fields = {name: _scalar_text(body.get(name)) for name in JOB_FIELDS}
    fields["status"] = fields["status"] or default_status
    return fields


def _api_key_ok(settings: Settings, provided: Optional[str]) -> bool:
    expected = settings.extension_api_key
    if not expected or not provided:
        return False
    return secrets.compare_digest(provided, expected)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    init_logging(settings.log_level)

    with open_db(settings.db_path) as conn:
        schema.bootstrap(conn)

    app = FastAPI(title="Job Tracker extension API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "x-api-key", "Authorization"],
    )

    @app.post("/api/extension/lookup-contact")
    def lookup_contact_route(payload: Any = Body(default=None), x_api_key: Optional[str] = Header(default=None)):
        if not _api_key_ok(settings, x_api_key):
            return JSONResponse({"found": False, "error": INVALID_KEY}, status_code=401)
        linkedin_url = payload.get("linkedin_url") if isinstance(payload, dict) else None
        if not linkedin_url:
            return JSONResponse({"found": False, "error": "linkedin_url is required"}, status_code=400)
        try:
            with open_db(settings.db_path) as conn:
                return lookup_contact(ContactsRepo(conn), str(linkedin_url))
        except Exception as e:
            logger.error("Lookup contact unexpected error", extra={"step": "lookup_contact", "status": "error", "error": str(e)})
            return JSONResponse({"found": False, "error": "Internal server error"}, status_code=500)

    @app.post("/api/extension/sync-connections")
    def sync_connections_route(payload: Any = Body(default=None), x_api_key: Optional[str] = Header(default=None)):
        if not _api_key_ok(settings, x_api_key):
            return JSONResponse({"success": False, "error": INVALID_KEY}, status_code=401)
        body = payload if isinstance(payload, dict) else {}
        linkedin_url = body.get("linkedin_url")
        names = body.get("mutual_connections")
        if not linkedin_url:
            return JSONResponse({"success": False, "error": "linkedin_url is required"}, status_code=400)
        if not isinstance(names, list):
            return JSONResponse({"success": False, "error": "mutual_connections must be an array"}, status_code=400)
        names = [str(n) for n in names if isinstance(n, str)]
        try:
            with open_db(settings.db_path) as conn:
                result = sync_connections(ContactsRepo(conn), str(linkedin_url), names)
        except Exception as e:
            logger.error("Sync connections unexpected error", extra={"step": "sync_connections", "status": "error", "error": str(e)})
            return JSONResponse({"success": False, "error": "Internal server error"}, status_code=500)
        if not result.get("success"):
            return JSONResponse(result, status_code=404)
        return result

    @app.post("/api/extension/jobs")
    def add_job_route(payload: Any = Body(default=None), x_api_key: Optional[str] = Header(default=None)):
        if not _api_key_ok(settings, x_api_key):
            return JSONResponse({"success": False, "error": INVALID_KEY}, status_code=401)
        body = payload if isinstance(payload, dict) else {}
        fields = _job_fields(body, settings.default_job_status)
        if not fields["job_title"] or not fields["company"]:
            return JSONResponse({"success": False, "error": "job_title and company are required"}, status_code=400)
        try:
            with open_db(settings.db_path) as conn:
                job = JobsRepo(conn).insert_job(fields)
        except Exception as e:
            logger.error("Create job unexpected error", extra={"step": "add_job", "status": "error", "error": str(e)})
            return JSONResponse({"success": False, "error": "Failed to create job"}, status_code=500)
        logger.info(f"Job created: {job['id']}", extra={"step": "add_job", "status": "ok"})
        return JSONResponse({"success": True, "job": job}, status_code=201)

    return app
