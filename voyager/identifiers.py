"""
Identifier resolution: username, profile URL or URN -> typed reference.

    parse_identifier("peggyrayzis")                          # USERNAME
    parse_identifier("https://www.linkedin.com/in/peggyrayzis/")  # USERNAME
    parse_identifier("urn:li:fsd_profile:ABC123")            # URN
    parse_identifier("https://www.linkedin.com/company/acme")     # UNRESOLVABLE

Resolution never performs network I/O and never raises; callers that need
a connectable identity turn UNRESOLVABLE into an InputError.
"""

import re
from enum import Enum
from typing import Optional
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict

from .exceptions import InputError

URN_PREFIX = "urn:li:"

_URL_PREFIXES = ("http://", "https://", "linkedin.com/", "www.linkedin.com/")
_PROFILE_PATH = re.compile(r"^/in/([^/?#]+)/?")


class IdentifierKind(str, Enum):
    USERNAME = "username"
    URN = "urn"
    UNRESOLVABLE = "unresolvable"


class ParsedIdentifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind
    raw: str
    value: str = ""
    urn_type: Optional[str] = None
    urn_id: Optional[str] = None

    @property
    def is_urn(self) -> bool:
        return self.kind is IdentifierKind.URN

    @property
    def is_username(self) -> bool:
        return self.kind is IdentifierKind.USERNAME

    @property
    def is_resolvable(self) -> bool:
        return self.kind is not IdentifierKind.UNRESOLVABLE


def parse_identifier(identifier: str) -> ParsedIdentifier:
    """Classify *identifier* as a username, a URN or an unresolvable URL."""
    if identifier.startswith(URN_PREFIX):
        return _parse_urn(identifier)
    if identifier.lower().startswith(_URL_PREFIXES):
        return _parse_url(identifier)
    return ParsedIdentifier(kind=IdentifierKind.USERNAME, raw=identifier, value=identifier)


def require_identifier(identifier: Optional[str], what: str = "profile identifier") -> str:
    """Reject empty input before anything touches the network."""
    if not identifier or not identifier.strip():
        raise InputError(
            f"Invalid {what}. Provide a username, profile URL, or URN."
        )
    return identifier


def _parse_urn(urn: str) -> ParsedIdentifier:
    # urn:li:<type>:<id>; the id itself may contain colons
    parts = urn[len(URN_PREFIX):].split(":", 1)
    urn_type = parts[0] or None
    urn_id = parts[1] if len(parts) > 1 and parts[1] else None
    return ParsedIdentifier(
        kind=IdentifierKind.URN, raw=urn, value=urn, urn_type=urn_type, urn_id=urn_id,
    )


def _parse_url(url: str) -> ParsedIdentifier:
    unresolvable = ParsedIdentifier(kind=IdentifierKind.UNRESOLVABLE, raw=url)

    candidate = url if "://" in url else f"https://{url}"
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return unresolvable

    host = (parts.hostname or "").lower()
    if host != "linkedin.com" and not host.endswith(".linkedin.com"):
        return unresolvable

    match = _PROFILE_PATH.match(unquote(parts.path))
    if not match:
        return unresolvable
    return ParsedIdentifier(kind=IdentifierKind.USERNAME, raw=url, value=match.group(1))
