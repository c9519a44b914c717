"""Human-readable and JSON rendering of command results."""

import json
from typing import Any, Iterable, List

from pydantic import BaseModel

from voyager.models import (
    Connection,
    Conversation,
    Invitation,
    Message,
    NetworkInfo,
    Paging,
    Profile,
)


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json", exclude_none=True)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def format_json(value: Any) -> str:
    return json.dumps(_plain(value), indent=2, ensure_ascii=False)


def _count(n: int) -> str:
    return f"{n:,}"


def _timestamp(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M")


# ── profiles ─────────────────────────────────────────────────────

def format_profile(profile: Profile) -> str:
    lines = [f"{profile.name} (@{profile.username})"]
    if profile.headline:
        lines.append(profile.headline)
    if profile.location:
        lines.append(f"Location: {profile.location}")
    if profile.industry:
        lines.append(f"Industry: {profile.industry}")
    lines.append(profile.profile_url)
    if profile.summary:
        lines.extend(["", profile.summary])
    return "\n".join(lines)


def format_whoami(profile: Profile, network: NetworkInfo) -> str:
    return "\n".join([
        format_profile(profile),
        "",
        f"Followers:   {_count(network.followers_count)}",
        f"Connections: {_count(network.connections_count)}",
    ])


def format_connection(connection: Connection) -> str:
    line = f"{connection.name} (@{connection.username})"
    if connection.headline:
        line += f"\n  {connection.headline}"
    return line


def format_connections(connections: List[Connection], paging: Paging) -> str:
    if not connections:
        return "No connections found."
    blocks = [format_connection(c) for c in connections]
    blocks.append(_paging_line(paging, len(connections), "connections"))
    return "\n\n".join(blocks)


# ── invitations ──────────────────────────────────────────────────

def format_invitation(invitation: Invitation) -> str:
    inviter = invitation.inviter
    lines = [f"{inviter.name} (@{inviter.username})  [{invitation.invitation_id}]"]
    if inviter.headline:
        lines.append(f"  {inviter.headline}")
    if invitation.message:
        lines.append(f'  "{invitation.message}"')
    if invitation.shared_connections:
        lines.append(f"  {invitation.shared_connections} shared connections")
    if invitation.sent_at:
        lines.append(f"  Sent {_timestamp(invitation.sent_at)}")
    return "\n".join(lines)


def format_invitations(invitations: List[Invitation], total: int) -> str:
    if not invitations:
        return "No pending invitations"
    blocks = [f"Pending invitations ({total}):"]
    blocks.extend(format_invitation(i) for i in invitations)
    return "\n\n".join(blocks)


# ── messaging ────────────────────────────────────────────────────

def format_conversation(conversation: Conversation) -> str:
    names = ", ".join(p.name or p.username for p in conversation.participants)
    marker = "" if conversation.read else f" ({conversation.unread_count} unread)"
    lines = [f"{names}{marker}"]
    if conversation.last_activity_at:
        lines.append(f"  {_timestamp(conversation.last_activity_at)}")
    if conversation.last_message:
        lines.append(f"  {conversation.last_message}")
    lines.append(f"  id: {conversation.conversation_id}")
    return "\n".join(lines)


def format_conversations(conversations: List[Conversation], paging: Paging) -> str:
    if not conversations:
        return "No conversations found."
    blocks = [format_conversation(c) for c in conversations]
    blocks.append(_paging_line(paging, len(conversations), "conversations"))
    return "\n\n".join(blocks)


def format_message(message: Message) -> str:
    sender = message.sender.name or message.sender.username
    if message.created_at is None:
        return f"{sender}: {message.body}"
    return f"[{_timestamp(message.created_at)}] {sender}: {message.body}"


def format_messages(messages: Iterable[Message]) -> str:
    lines = [format_message(m) for m in messages]
    if not lines:
        return "No messages in this conversation."
    return "\n".join(lines)


def _paging_line(paging: Paging, shown: int, noun: str) -> str:
    first = paging.start + 1
    last = paging.start + shown
    return f"Showing {first}-{last} of {_count(max(paging.total, last))} {noun}"
