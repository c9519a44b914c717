"""Connections command: one page of the member's most recent connections."""

from typing import Optional

from voyager import Client, Credentials, endpoint, parse_connections

from linkedin_cli.commands.base import PageOptions
from linkedin_cli.output import format_connections, format_json


async def connections(
    credentials: Credentials,
    options: Optional[PageOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or PageOptions()
    client = client or Client(credentials)

    path = endpoint("connections", start=options.start, count=options.page_size)
    results, paging = parse_connections(await client.request_json(path))

    if options.json:
        return format_json({"connections": results, "paging": paging})
    return format_connections(results, paging)
