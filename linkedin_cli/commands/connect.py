"""
Connect command: send a connection request.

Accepts a username, profile URL or URN. Usernames are resolved to a profile
URN first; LinkedIn fills in the inviter from the session.
"""

import logging
from typing import Optional

from voyager import (
    Client,
    Credentials,
    endpoint,
    parse_identifier,
    require_identifier,
    resolve_recipient,
)

from linkedin_cli.commands.base import ConnectOptions
from linkedin_cli.output import format_json

logger = logging.getLogger(__name__)


def build_connect_payload(recipient_urn: str, message: Optional[str] = None) -> dict:
    payload = {"recipientProfileUrn": recipient_urn}
    if message:
        payload["message"] = message
    return payload


async def connect(
    credentials: Credentials,
    identifier: str,
    options: Optional[ConnectOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or ConnectOptions()
    require_identifier(identifier)
    parsed = parse_identifier(identifier)

    client = client or Client(credentials)
    recipient_urn, recipient = await resolve_recipient(client, parsed)

    await client.post_json(endpoint("connect"), build_connect_payload(recipient_urn, options.message))
    logger.info("Connection request sent to %s", recipient)

    if options.json:
        result = {"success": True, "recipient": recipient, "recipientUrn": recipient_urn}
        if options.message:
            result["message"] = options.message
        return format_json(result)

    suffix = f' with message: "{options.message}"' if options.message else ""
    return f"Connection request sent to {recipient}{suffix}"
