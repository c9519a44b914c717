"""Whoami command: the logged-in member plus follower / connection counts."""

from typing import Optional

from voyager import Client, Credentials, endpoint, parse_me, parse_network_info

from linkedin_cli.commands.base import OutputOptions
from linkedin_cli.output import format_json, format_whoami


async def whoami(
    credentials: Credentials,
    options: Optional[OutputOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or OutputOptions()
    client = client or Client(credentials)

    me = parse_me(await client.request_json(endpoint("me")))
    # networkinfo is keyed by the username /me just told us
    network = parse_network_info(
        await client.request_json(endpoint("networkInfo", username=me.username))
    )

    if options.json:
        return format_json({"profile": me, "networkInfo": network})
    return format_whoami(me, network)
