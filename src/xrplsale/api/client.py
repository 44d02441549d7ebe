#!/usr/bin/env python3
"""
XRPL.Sale API Client

Thin facade over the XRPL.Sale REST API. Each resource group (auth,
projects, investments, analytics, webhooks) is exposed as an attribute of
ApiClient and maps one method to one endpoint. Responses are returned as
parsed JSON without reshaping, so `--json` output matches the server
exactly.

Requests are sent sequentially with the configured timeout and are never
retried; any transport failure or non-2xx status raises ApiError.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from ..core.errors import ApiError

logger = logging.getLogger(__name__)

USER_AGENT = "xrplsale-cli"


class ApiClient:
    """
    HTTP client for the XRPL.Sale API.

    Sends the API key in the X-API-Key header when one is available,
    otherwise the wallet session token as a bearer token.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        auth_token: str | None = None,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. https://api.xrpl.sale/v1
            api_key: Long-lived API key
            auth_token: Wallet session token (ignored when api_key is set)
            timeout: Per-request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.auth_token = auth_token
        self.timeout = timeout
        self.session = session or requests.Session()

        self.auth = AuthApi(self)
        self.projects = ProjectsApi(self)
        self.investments = InvestmentsApi(self)
        self.analytics = AnalyticsApi(self)
        self.webhooks = WebhooksApi(self)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        elif self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        None-valued query parameters are dropped so optional CLI flags that
        were not given never reach the server.

        Raises:
            ApiError: On connection failure, timeout or non-2xx status
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        query = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug("%s %s params=%s", method, url, query)

        try:
            response = self.session.request(
                method,
                url,
                params=query or None,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise ApiError(f"Request to {url} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise ApiError(f"Request to {url} failed: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)

        body = _decode_body(response)

        if not response.ok:
            raise ApiError(_error_message(body, response), status_code=response.status_code, payload=body)

        return body

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


def _decode_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any, response: requests.Response) -> str:
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and value.get("message"):
                return str(value["message"])
    if isinstance(body, str) and body.strip():
        return body.strip()[:200]
    return response.reason or "Request failed"


class _Resource:
    """Base class for endpoint groups sharing one ApiClient."""

    def __init__(self, client: ApiClient):
        self.client = client


class AuthApi(_Resource):
    """Authentication and API key management endpoints."""

    def validate_api_key(self) -> Any:
        return self.client.get("auth/validate")

    def get_current_user(self) -> Any:
        return self.client.get("auth/me")

    def generate_challenge(self, wallet_address: str) -> Any:
        return self.client.post("auth/challenge", json={"walletAddress": wallet_address})

    def authenticate(self, wallet_address: str, signature: str, timestamp: int) -> Any:
        return self.client.post(
            "auth/authenticate",
            json={"walletAddress": wallet_address, "signature": signature, "timestamp": timestamp},
        )

    def generate_api_key(self, name: str) -> Any:
        return self.client.post("auth/api-keys", json={"name": name})

    def list_api_keys(self) -> Any:
        return self.client.get("auth/api-keys")

    def revoke_api_key(self, key_id: str) -> Any:
        return self.client.delete(f"auth/api-keys/{key_id}")


class ProjectsApi(_Resource):
    """Token sale project endpoints."""

    def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        status: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> Any:
        return self.client.get(
            "projects",
            params={
                "page": page,
                "limit": limit,
                "status": status,
                "sortBy": sort_by,
                "sortOrder": sort_order,
            },
        )

    def get(self, project_id: str) -> Any:
        return self.client.get(f"projects/{project_id}")

    def create(self, payload: dict[str, Any]) -> Any:
        return self.client.post("projects", json=payload)

    def launch(self, project_id: str) -> Any:
        return self.client.post(f"projects/{project_id}/launch")

    def stats(self, project_id: str) -> Any:
        return self.client.get(f"projects/{project_id}/stats")


class InvestmentsApi(_Resource):
    """Investment endpoints for the authenticated account."""

    def list(
        self,
        project_id: str | None = None,
        status: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Any:
        return self.client.get(
            "investments",
            params={"projectId": project_id, "status": status, "page": page, "limit": limit},
        )

    def get(self, investment_id: str) -> Any:
        return self.client.get(f"investments/{investment_id}")

    def create(self, payload: dict[str, Any]) -> Any:
        return self.client.post("investments", json=payload)


class AnalyticsApi(_Resource):
    """Platform and per-project analytics."""

    def platform(self) -> Any:
        return self.client.get("analytics/platform")

    def project(self, project_id: str, period: str | None = None) -> Any:
        return self.client.get(f"analytics/projects/{project_id}", params={"period": period})


class WebhooksApi(_Resource):
    """Webhook registration endpoints."""

    def list(self) -> Any:
        return self.client.get("webhooks")

    def create(self, url: str, events: list[str], secret: str | None = None) -> Any:
        payload: dict[str, Any] = {"url": url, "events": events}
        if secret:
            payload["secret"] = secret
        return self.client.post("webhooks", json=payload)

    def delete(self, webhook_id: str) -> Any:
        return self.client.delete(f"webhooks/{webhook_id}")

    def test(self, webhook_id: str) -> Any:
        return self.client.post(f"webhooks/{webhook_id}/test")
