"""Tests for human-readable rendering."""

from datetime import datetime, timezone

from linkedin_cli.output import format_conversation, format_invitation, format_message
from voyager import Connection, Conversation, Invitation, Message

PEGGY = Connection(urn="urn:li:fsd_profile:ACoAAA1", username="peggyrayzis", first_name="Peggy", last_name="Rayzis")
WHEN = datetime(2023, 11, 14, 22, 13, tzinfo=timezone.utc)


class TestInvitation:
    def test_sent_line(self):
        inv = Invitation(invitation_id="INV1", urn="urn:li:fs_relInvitation:INV1", inviter=PEGGY, sent_at=WHEN)
        assert "Sent 2023-11-14 22:13" in format_invitation(inv)

    def test_no_sent_line_without_timestamp(self):
        inv = Invitation(invitation_id="INV1", urn="urn:li:fs_relInvitation:INV1", inviter=PEGGY)
        out = format_invitation(inv)
        assert "Sent" not in out
        assert "1970" not in out


class TestConversation:
    def test_no_timestamp_line(self):
        conv = Conversation(conversation_id="2-abc", participant=PEGGY, participants=[PEGGY], read=True)
        assert format_conversation(conv).splitlines() == ["Peggy Rayzis", "  id: 2-abc"]


class TestMessage:
    def test_with_timestamp(self):
        msg = Message(message_id="urn:li:fs_event:1", sender=PEGGY, body="Hi", created_at=WHEN)
        assert format_message(msg) == "[2023-11-14 22:13] Peggy Rayzis: Hi"

    def test_without_timestamp(self):
        msg = Message(message_id="urn:li:fs_event:1", sender=PEGGY, body="Hi")
        assert format_message(msg) == "Peggy Rayzis: Hi"
