"""Invites commands: list pending invitations and accept one."""

from typing import Optional

from voyager import Client, Credentials, InputError, endpoint, parse_invitations
from voyager.parser import id_from_urn

from linkedin_cli.commands.base import OutputOptions, PageOptions
from linkedin_cli.output import format_invitations, format_json


async def list_invites(
    credentials: Credentials,
    options: Optional[PageOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    options = options or PageOptions()
    client = client or Client(credentials)

    path = endpoint("invitations", start=options.start, count=options.page_size)
    invitations, paging = parse_invitations(await client.request_json(path))

    if options.json:
        return format_json({"invitations": invitations, "total": paging.total})
    return format_invitations(invitations, paging.total)


async def accept_invite(
    credentials: Credentials,
    invitation_id: str,
    options: Optional[OutputOptions] = None,
    *,
    client: Optional[Client] = None,
) -> str:
    """Accept an invitation given its id or ``urn:li:fsd_invitation:<id>``."""
    options = options or OutputOptions()
    if not invitation_id or not invitation_id.strip():
        raise InputError("Invalid invitation ID: ID is required")

    invitation_id = id_from_urn(invitation_id.strip())
    client = client or Client(credentials)
    await client.post_json(
        endpoint("acceptInvitation", id=invitation_id), {"action": "ACCEPT"}, method="PUT",
    )

    if options.json:
        return format_json({"success": True, "invitationId": invitation_id})
    return f"Invitation {invitation_id} accepted"
