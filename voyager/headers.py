"""
Request headers for the Voyager API.

Only the cookie and CSRF token depend on the session; everything else is a
constant so the same credentials always produce the same headers.
"""

import json
from typing import Dict

from .auth import Credentials

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)

# Fixed timezone: requests must not vary with the operator's locale.
LI_TRACK = json.dumps(
    {
        "clientVersion": "1.13.8201",
        "mpVersion": "1.13.8201",
        "osName": "web",
        "timezoneOffset": -8,
        "timezone": "America/Los_Angeles",
        "deviceFormFactor": "DESKTOP",
        "mpName": "voyager-web",
    },
    separators=(",", ":"),
)

STATIC_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/vnd.linkedin.normalized+json+2.1",
    "Accept-Language": "en-US,en;q=0.9",
    "X-Li-Lang": "en_US",
    "X-Li-Track": LI_TRACK,
    "X-Restli-Protocol-Version": "2.0.0",
}


def build_headers(credentials: Credentials) -> Dict[str, str]:
    """Return the full header set for a request made with *credentials*."""
    return {
        **STATIC_HEADERS,
        "Cookie": credentials.cookie_header,
        "csrf-token": credentials.csrf_token,
    }
