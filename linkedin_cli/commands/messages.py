"""Messages commands: list conversations and read one thread (single page)."""

from typing import Optional

from voyager import (
    Client,
    Credentials,
    InputError,
    conversation_id_from_urn,
    endpoint,
    parse_conversations,
    parse_messages,
)

from linkedin_cli.commands.base import PageOptions
from linkedin_cli.output import format_conversations, format_json, format_messages


async def list_conversations(
    credentials: Credentials,
    options: Optional[PageOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or PageOptions()
    client = client or Client(credentials)

    path = endpoint("conversations", start=options.start, count=options.page_size)
    conversations, paging = parse_conversations(await client.request_json(path))

    if options.json:
        return format_json({"conversations": conversations, "paging": paging})
    return format_conversations(conversations, paging)


async def read_conversation(
    credentials: Credentials,
    conversation_id: str,
    options: Optional[PageOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    """Read messages of a conversation given its id or conversation URN."""
    options = options or PageOptions()
    if not conversation_id or not conversation_id.strip():
        raise InputError("Invalid conversation ID: ID is required")

    conversation_id = conversation_id_from_urn(conversation_id.strip())
    client = client or Client(credentials)

    path = endpoint(
        "conversationEvents",
        conversationId=conversation_id,
        start=options.start,
        count=options.page_size,
    )
    messages, paging = parse_messages(await client.request_json(path), conversation_id)

    if options.json:
        return format_json({"messages": messages, "paging": paging})
    return format_messages(messages)
