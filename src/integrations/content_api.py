"""Content API integration — HTTP persistence gateway.

Talks to the site's content service over JSON via urllib.  Idempotent
requests (GET, PUT) are retried on transient failures with exponential
backoff; POST requests (publish, restore) are sent exactly once.
"""

from __future__ import annotations

import json
import logging
import time
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from typing import Any

from pageforge.config import ApiConfig
from pageforge.content.models import ContentDocument, Revision
from pageforge.errors import FetchError, GatewayError, PublishError, RestoreError, SaveError
from pageforge.gateway import PersistenceGateway

logger = logging.getLogger(__name__)

RETRY_METHODS = frozenset({"GET", "PUT", "HEAD", "DELETE", "OPTIONS", "TRACE"})
RETRY_STATUS_CODES = frozenset({408, 413, 429, 500, 502, 503, 504})


class ContentAPIError(Exception):
    """Transport-level failure, carrying the HTTP status when there was one."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ContentAPIClient:
    """Thin JSON client for the content endpoints.

    Handles headers, timeouts and retries; knows nothing about documents.
    """

    def __init__(
        self,
        config: ApiConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.base_url = config.url.rstrip("/")
        self._sleep = sleep

    def request(self, method: str, path: str, data: Any = None) -> Any:
        """Send a request and return the decoded JSON body (None if empty).

        Raises ContentAPIError once retries are exhausted or for a
        non-retryable failure.
        """
        method = method.upper()
        attempts = 1 + (self.config.retry_limit if method in RETRY_METHODS else 0)
        for attempt in range(attempts):
            try:
                return self._send(method, path, data)
            except ContentAPIError as exc:
                retryable = exc.status_code is None or exc.status_code in RETRY_STATUS_CODES
                if not retryable or attempt == attempts - 1:
                    raise
                wait_time = self.config.backoff * 2**attempt
                logger.info(
                    "%s %s failed (%s), retrying in %.1fs (retry %d/%d)",
                    method, path, exc, wait_time, attempt + 1, attempts - 1,
                )
                self._sleep(wait_time)
        raise ContentAPIError(f"{method} {path} was not attempted")

    def _send(self, method: str, path: str, data: Any) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        body = json.dumps(data).encode("utf-8") if data is not None else None
        req = urllib.request.Request(
            url,
            data=body,
            method=method,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "X-Client-Version": self.config.client_version,
            },
        )
        logger.debug("%s %s", method, url)
        try:
            with urllib.request.urlopen(req, timeout=self.config.timeout) as resp:
                raw = resp.read().decode("utf-8")
        except urllib.error.HTTPError as exc:
            raise ContentAPIError(f"HTTP {exc.code} {exc.reason}", status_code=exc.code) from exc
        except (urllib.error.URLError, TimeoutError) as exc:
            raise ContentAPIError(f"connection failed: {exc}") from exc
        if not raw.strip():
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ContentAPIError(f"invalid JSON response: {exc}") from exc


class HttpContentGateway(PersistenceGateway):
    """Persistence gateway backed by the remote content API."""

    name = "http"

    def __init__(self, config: ApiConfig, client: ContentAPIClient | None = None) -> None:
        self.config = config
        self.client = client or ContentAPIClient(config)

    @staticmethod
    def _page_path(page: str, *parts: str) -> str:
        segments = ["content", page, *parts]
        return "/".join(urllib.parse.quote(s, safe="") for s in segments)

    def _call(
        self,
        error: type[GatewayError],
        page: str,
        method: str,
        path: str,
        data: Any = None,
    ) -> Any:
        try:
            return self.client.request(method, path, data)
        except ContentAPIError as exc:
            raise error(page, str(exc)) from exc

    def _document(self, error: type[GatewayError], page: str, body: Any) -> ContentDocument:
        if not isinstance(body, dict):
            raise error(page, "response is not a JSON object")
        try:
            return ContentDocument.from_payload(page, body)
        except ValueError as exc:
            raise error(page, f"malformed document: {exc}") from exc

    # ── Gateway operations ───────────────────────────────────────

    def fetch(self, page: str) -> ContentDocument | None:
        try:
            body = self.client.request("GET", self._page_path(page))
        except ContentAPIError as exc:
            if exc.status_code == 404:
                logger.info("No server copy of %s", page)
                return None
            raise FetchError(page, str(exc)) from exc
        if body is None:
            return None
        return self._document(FetchError, page, body)

    def save(self, page: str, doc: ContentDocument) -> ContentDocument:
        body = self._call(SaveError, page, "PUT", self._page_path(page), doc.to_payload())
        if body is None:
            return doc
        return self._document(SaveError, page, body)

    def publish(self, page: str) -> ContentDocument:
        body = self._call(PublishError, page, "POST", self._page_path(page, "publish"))
        return self._document(PublishError, page, body)

    def history(self, page: str) -> list[Revision]:
        body = self._call(RestoreError, page, "GET", self._page_path(page, "history"))
        if isinstance(body, dict):
            body = body.get("revisions") or body.get("versions") or []
        if not isinstance(body, list):
            raise RestoreError(page, "history response is not a list")
        return [self._revision(page, entry) for entry in body if isinstance(entry, dict)]

    def restore(self, page: str, revision_id: str) -> ContentDocument:
        body = self._call(
            RestoreError, page, "POST", self._page_path(page, "restore", revision_id)
        )
        return self._document(RestoreError, page, body)

    def _revision(self, page: str, entry: dict[str, Any]) -> Revision:
        data = entry.get("data") or entry.get("content") or {}
        fields: dict[str, Any] = {
            "id": str(entry.get("id", "")),
            "page": page,
            "created_by": entry.get("author") or entry.get("createdBy") or "",
        }
        created = entry.get("timestamp") or entry.get("createdAt")
        if created:
            fields["created_at"] = created
        try:
            fields["document"] = ContentDocument.from_payload(page, data)
            return Revision.model_validate(fields)
        except ValueError as exc:
            raise RestoreError(page, f"malformed revision: {exc}") from exc
