from linkedin_cli.commands.base import ConnectOptions, OutputOptions, PageOptions
from linkedin_cli.commands.check import check
from linkedin_cli.commands.connect import connect
from linkedin_cli.commands.connections import connections
from linkedin_cli.commands.invites import accept_invite, list_invites
from linkedin_cli.commands.messages import list_conversations, read_conversation
from linkedin_cli.commands.profile import profile
from linkedin_cli.commands.send import send
from linkedin_cli.commands.whoami import whoami

__all__ = [
    "OutputOptions",
    "ConnectOptions",
    "PageOptions",
    "check",
    "whoami",
    "profile",
    "connect",
    "connections",
    "list_invites",
    "accept_invite",
    "list_conversations",
    "read_conversation",
    "send",
]
