"""Turn a parsed identifier into a profile URN, asking LinkedIn when needed."""

import logging
from typing import Tuple

from .client import Client
from .endpoints import endpoint
from .exceptions import InputError, ParseError, ProfileNotFoundError
from .identifiers import ParsedIdentifier
from .parser import parse_profile_lookup

logger = logging.getLogger(__name__)


async def resolve_profile_urn(client: Client, username: str) -> Tuple[str, str]:
    """Look *username* up and return ``(urn, canonical_username)``.

    Raises ProfileNotFoundError when LinkedIn returns no elements.
    """
    payload = await client.request_json(endpoint("profileLookup", username=username))
    members = parse_profile_lookup(payload)
    if not members:
        raise ProfileNotFoundError(username)

    first = members[0]
    if not first.urn:
        raise ParseError("profile lookup")
    logger.debug("Resolved %s to %s", username, first.urn)
    return first.urn, first.username or username


async def resolve_recipient(
    client: Client, parsed: ParsedIdentifier, action: str = "connect to",
) -> Tuple[str, str]:
    """``(urn, display_name)`` for an identifier that names a member."""
    if parsed.is_urn:
        return parsed.value, parsed.value
    if parsed.is_username:
        return await resolve_profile_urn(client, parsed.value)
    raise InputError(f"Invalid input: cannot {action} {parsed.raw}")
