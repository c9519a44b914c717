"""
Cookie-based session credentials.

A LinkedIn browser session is two cookies: ``li_at`` (the session token) and
``JSESSIONID`` (which doubles as the CSRF token). Values come from CLI flags
first, then from the environment.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import CredentialsError

logger = logging.getLogger(__name__)

LI_AT_ENV = "LINKEDIN_LI_AT"
JSESSIONID_ENV = "LINKEDIN_JSESSIONID"


class Credentials(BaseModel):
    """Immutable session credentials, owned by the API client."""

    model_config = ConfigDict(frozen=True)

    li_at: str
    jsessionid: str
    cookie_header: str
    csrf_token: str
    source: str = ""

    @classmethod
    def from_cookies(cls, li_at: str, jsessionid: str, source: str = "") -> "Credentials":
        jsessionid = strip_quotes(jsessionid)
        return cls(
            li_at=li_at,
            jsessionid=jsessionid,
            cookie_header=build_cookie_header(li_at, jsessionid),
            csrf_token=jsessionid,
            source=source,
        )

    def __repr__(self) -> str:
        return f"<Credentials source={self.source!r}>"

    __str__ = __repr__


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def build_cookie_header(li_at: str, jsessionid: str) -> str:
    return f'li_at={li_at}; JSESSIONID="{jsessionid}"'


def resolve_credentials(
    li_at: Optional[str] = None,
    jsessionid: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Credentials:
    """Combine CLI values with the environment into a Credentials value.

    CLI values win over environment values; ``source`` records where the
    pair came from ("cli", "env" or "cli+env").
    """
    env = os.environ if env is None else env
    cli_used = bool(li_at or jsessionid)

    env_li_at = env.get(LI_AT_ENV) or None
    env_jsessionid = env.get(JSESSIONID_ENV) or None
    env_used = (not li_at and env_li_at) or (not jsessionid and env_jsessionid)

    li_at = li_at or env_li_at
    jsessionid = jsessionid or env_jsessionid

    if not li_at or not jsessionid:
        raise CredentialsError(
            "LinkedIn credentials not found.\n\n"
            "Set environment variables:\n"
            f"  export {LI_AT_ENV}=<your li_at cookie>\n"
            f"  export {JSESSIONID_ENV}=<your JSESSIONID cookie>\n\n"
            "Or use CLI flags:\n"
            "  --li-at <token> --jsessionid <token>\n\n"
            "Find these cookies at linkedin.com (DevTools > Application > Cookies)"
        )

    if cli_used and env_used:
        source = "cli+env"
    elif cli_used:
        source = "cli"
    else:
        source = "env"

    logger.debug("Credentials resolved from %s", source)
    return Credentials.from_cookies(li_at, jsessionid, source=source)
