from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from config.settings import get_settings
from models.job_record import JobRecord


logger = logging.getLogger(__name__)

MISSING_KEY = "API key not configured. Please set your API key in extension settings."


class ExtensionApiClient:
    """Calls the CRM's extension endpoints; every method returns a result dict."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.extension_api_key
        self.session = session or requests.Session()
        self.timeout = timeout or settings.http_timeout_seconds

    def _post(self, path: str, payload: Dict[str, Any], failure_key: str, fallback_error: str) -> Dict[str, Any]:
        if not self.api_key:
            return {failure_key: False, "error": MISSING_KEY}
        try:
            resp = self.session.post(
                f"{self.base_url}{path}",
                json=payload,
                headers={"Content-Type": "application/json", "x-api-key": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request to {path} failed: {e}")
            return {failure_key: False, "error": str(e) or fallback_error}

        try:
            result = resp.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if not resp.ok:
            return {failure_key: False, "error": result.get("error") or f"API error: {resp.status_code}"}
        return result

    def lookup_contact(self, linkedin_url: str) -> Dict[str, Any]:
        return self._post(
            "/api/extension/lookup-contact",
            {"linkedin_url": linkedin_url},
            "found",
            "Failed to look up contact",
        )

    def sync_connections(self, linkedin_url: str, mutual_connections: List[str]) -> Dict[str, Any]:
        return self._post(
            "/api/extension/sync-connections",
            {"linkedin_url": linkedin_url, "mutual_connections": list(mutual_connections)},
            "success",
            "Failed to sync connections",
        )

    def add_job(self, job: JobRecord) -> Dict[str, Any]:
        result = self._post("/api/extension/jobs", job.model_dump(), "success", "Failed to add job to tracker")
        if result.get("success") is False:
            return result
        return {"success": True, "data": result}
