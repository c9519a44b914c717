"""
Send command: direct message to a LinkedIn member.

The recipient (username, profile URL or URN) is resolved like ``connect``.
If a conversation with them already exists the message is appended to it,
otherwise a new conversation is created carrying the message.
"""

import logging
from typing import Optional

import httpx

from voyager import (
    Client,
    Credentials,
    InputError,
    endpoint,
    parse_conversation_lookup,
    parse_created_conversation,
    parse_identifier,
    parse_sent_message,
    require_identifier,
    resolve_recipient,
)

from linkedin_cli.commands.base import OutputOptions
from linkedin_cli.output import format_json

logger = logging.getLogger(__name__)

MESSAGE_CREATE = "com.linkedin.voyager.messaging.create.MessageCreate"


def build_message_event(message: str) -> dict:
    return {"eventCreate": {"value": {MESSAGE_CREATE: {"body": message, "attachments": []}}}}


def build_conversation_create(recipient_urn: str, message: str) -> dict:
    return {
        "conversationCreate": {
            "recipients": [recipient_urn],
            **build_message_event(message),
        },
    }


def _body(res: httpx.Response) -> dict:
    # Creates may answer 201 with an empty body.
    return res.json() if res.content else {}


async def send(
    credentials: Credentials,
    recipient: str,
    message: str,
    options: Optional[OutputOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or OutputOptions()
    require_identifier(recipient, "recipient")
    if not message or not message.strip():
        raise InputError("Invalid message: message body is required")
    parsed = parse_identifier(recipient)

    client = client or Client(credentials)
    recipient_urn, username = await resolve_recipient(client, parsed, action="message")

    lookup = await client.request_json(endpoint("conversationLookup", urn=recipient_urn))
    conversation_id = parse_conversation_lookup(lookup)

    if conversation_id:
        res = await client.post_json(
            endpoint("sendMessage", conversationId=conversation_id), build_message_event(message),
        )
        message_id = parse_sent_message(_body(res))
        is_new = False
    else:
        res = await client.post_json(
            endpoint("createConversation"), build_conversation_create(recipient_urn, message),
        )
        conversation_id = parse_created_conversation(_body(res))
        message_id = None
        is_new = True
    logger.info("Message sent to %s in conversation %s", username, conversation_id)

    if options.json:
        result = {
            "success": True,
            "recipient": {"username": username, "urn": recipient_urn},
            "conversationId": conversation_id,
            "isNewConversation": is_new,
        }
        if message_id:
            result["messageId"] = message_id
        return format_json(result)

    action = "sent (new conversation)" if is_new else "sent"
    return f"Message {action} to @{username}"
