"""Voyager endpoint paths, keyed by logical operation name."""

from urllib.parse import quote

BASE_URL = "https://www.linkedin.com/voyager/api"

ENDPOINTS = {
    "me": "/me",
    "profile": "/identity/profiles/{username}/profileView",
    # {username} receives a URN here, percent-encoded.
    "profileByUrn": "/identity/dash/profiles/{username}",
    "profileLookup": "/identity/dash/profiles?q=memberIdentity&memberIdentity={username}",
    "networkInfo": "/identity/profiles/{username}/networkinfo",
    "connect": "/growth/normInvitations",
    "invitations": "/relationships/invitationViews?q=receivedInvitation&start={start}&count={count}",
    "acceptInvitation": "/relationships/invitations/{id}",
    "connections": "/relationships/dash/connections?q=search&sortType=RECENTLY_ADDED&start={start}&count={count}",
    "conversations": "/messaging/conversations?keyVersion=LEGACY_INBOX&start={start}&count={count}",
    "conversationEvents": "/messaging/conversations/{conversationId}/events?start={start}&count={count}",
    "conversationLookup": "/messaging/conversations?q=participants&recipients=List({urn})",
    "createConversation": "/messaging/conversations",
    "sendMessage": "/messaging/conversations/{conversationId}/events",
}


def endpoint(name: str, **values) -> str:
    """Return the path for *name* with ``{placeholder}`` segments filled in.

    Values are percent-encoded, so URNs can be substituted safely.
    """
    path = ENDPOINTS[name]
    for key, value in values.items():
        path = path.replace("{" + key + "}", quote(str(value), safe=""))
    return path
