"""Check command: is the session still valid, and where did it come from."""

from typing import Optional

from voyager import Client, Credentials

from linkedin_cli.commands.base import OutputOptions
from linkedin_cli.output import format_json


async def check(
    credentials: Credentials,
    options: Optional[OutputOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or OutputOptions()
    client = client or Client(credentials)
    valid = await client.validate_session()

    if options.json:
        return format_json({"valid": valid, "source": credentials.source})

    lines = [f"Session {'valid' if valid else 'invalid'}", f"  Credential source: {credentials.source}"]
    if not valid:
        lines.extend(["", "  Tip: Log into linkedin.com to refresh your session."])
    return "\n".join(lines)
