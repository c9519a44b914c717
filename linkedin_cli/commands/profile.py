"""Profile command: view a LinkedIn profile by username, URL or URN."""

import logging
from typing import Optional

from voyager import (
    Client,
    Credentials,
    InputError,
    endpoint,
    parse_identifier,
    parse_profile,
    require_identifier,
)

from linkedin_cli.commands.base import OutputOptions
from linkedin_cli.output import format_json, format_profile

logger = logging.getLogger(__name__)


async def profile(
    credentials: Credentials,
    identifier: str,
    options: Optional[OutputOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or OutputOptions()
    require_identifier(identifier)

    parsed = parse_identifier(identifier)
    if parsed.is_urn:
        path = endpoint("profileByUrn", username=parsed.value)
    elif parsed.is_username:
        path = endpoint("profile", username=parsed.value)
    else:
        raise InputError(f"Invalid profile identifier: {identifier}")

    client = client or Client(credentials)
    logger.debug("Fetching profile %s", parsed.value)
    result = parse_profile(await client.request_json(path))

    if options.json:
        return format_json(result)
    return format_profile(result)
