"""
Low-level async HTTP client for the LinkedIn Voyager API.

Owns the session credentials, builds browser-like headers for every request
and maps non-2xx responses to LinkedInRequestError. No retry and no
throttling: a request runs once and its outcome is final.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from .auth import Credentials
from .endpoints import BASE_URL, endpoint
from .exceptions import LinkedInRequestError
from .headers import build_headers

logger = logging.getLogger(__name__)


class Client:
    """HTTP client for the LinkedIn Voyager API."""

    LINKEDIN_BASE_URL = "https://www.linkedin.com"
    API_BASE_URL = BASE_URL

    def __init__(
        self,
        credentials: Credentials,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credentials = credentials
        self._transport = transport

    # ── requests ─────────────────────────────────────────────────

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Issue one request against the Voyager API.

        *headers* are merged over the built headers. Transport errors
        (DNS, TLS, resets) propagate unchanged.
        """
        url = f"{self.API_BASE_URL}{path}"
        merged = {**build_headers(self.credentials), **(headers or {})}

        async with httpx.AsyncClient(transport=self._transport) as http:
            res = await http.request(method, url, headers=merged, content=body)

        logger.debug("%s %s -> %d", method, path, res.status_code)
        if not res.is_success:
            raise LinkedInRequestError(res.status_code, path, _error_details(res))
        return res

    async def request_json(self, path: str, **kwargs) -> Any:
        res = await self.request(path, **kwargs)
        return res.json()

    async def post_json(self, path: str, payload: Dict[str, Any], method: str = "POST") -> httpx.Response:
        return await self.request(
            path,
            method=method,
            body=json.dumps(payload),
            headers={"Content-Type": "application/json"},
        )

    # ── session ──────────────────────────────────────────────────

    async def validate_session(self) -> bool:
        """Return True when GET /me succeeds with these credentials."""
        try:
            await self.request(endpoint("me"))
        except (LinkedInRequestError, httpx.TransportError) as e:
            logger.info("Session check failed: %s", e)
            return False
        return True


def _error_details(res: httpx.Response) -> Optional[str]:
    """Pull a human message out of an error body, if it is JSON."""
    try:
        body = res.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        details = body.get("message") or body.get("error")
        if isinstance(details, str) and details:
            return details
    return None
