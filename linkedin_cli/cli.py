"""
Command-line entry point.

    linkedin-cli whoami
    linkedin-cli profile peggyrayzis --json
    linkedin-cli connect https://www.linkedin.com/in/johndoe -m "Hi John"
    linkedin-cli send johndoe "Thanks for connecting"
    linkedin-cli invites list
    linkedin-cli messages read 2-ABC123
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import httpx

from voyager import LinkedInError, resolve_credentials

from linkedin_cli import config
from linkedin_cli.commands import (
    ConnectOptions,
    OutputOptions,
    PageOptions,
    accept_invite,
    check,
    connect,
    connections,
    list_conversations,
    list_invites,
    profile,
    read_conversation,
    send,
    whoami,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkedin-cli",
        description="LinkedIn from the terminal, via the Voyager API and your browser session.",
    )
    parser.add_argument("--li-at", help="li_at session cookie (default: $LINKEDIN_LI_AT)")
    parser.add_argument("--jsessionid", help="JSESSIONID cookie (default: $LINKEDIN_JSESSIONID)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("check", help="Validate the session")
    sub.add_parser("whoami", help="Show the logged-in member")

    p = sub.add_parser("profile", help="View a profile")
    p.add_argument("identifier", help="Username, profile URL or URN")

    p = sub.add_parser("connect", help="Send a connection request")
    p.add_argument("identifier", help="Username, profile URL or URN")
    p.add_argument("-m", "--message", help="Note to include with the request")

    p = sub.add_parser("send", help="Send a direct message")
    p.add_argument("recipient", help="Username, profile URL or URN")
    p.add_argument("message", help="Message text")

    p = sub.add_parser("connections", help="List recent connections")
    _add_paging(p)

    invites = sub.add_parser("invites", help="Pending invitations").add_subparsers(
        dest="action", required=True,
    )
    _add_paging(invites.add_parser("list", help="List pending invitations"))
    p = invites.add_parser("accept", help="Accept an invitation")
    p.add_argument("invitation_id", help="Invitation id or URN")

    messages = sub.add_parser("messages", help="Conversations").add_subparsers(
        dest="action", required=True,
    )
    _add_paging(messages.add_parser("list", help="List conversations"))
    p = messages.add_parser("read", help="Read a conversation")
    p.add_argument("conversation_id", help="Conversation id or URN")
    _add_paging(p)

    return parser


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start", type=int, default=0)
    parser.add_argument("--count", type=int, default=config.DEFAULT_PAGE_SIZE)


async def run(args: argparse.Namespace) -> str:
    credentials = resolve_credentials(
        args.li_at,
        args.jsessionid,
        env={
            "LINKEDIN_LI_AT": config.LINKEDIN_LI_AT,
            "LINKEDIN_JSESSIONID": config.LINKEDIN_JSESSIONID,
        },
    )
    out = OutputOptions(json=args.json)

    if args.command == "check":
        return await check(credentials, out)
    if args.command == "whoami":
        return await whoami(credentials, out)
    if args.command == "profile":
        return await profile(credentials, args.identifier, out)
    if args.command == "connect":
        return await connect(
            credentials, args.identifier, ConnectOptions(json=args.json, message=args.message),
        )
    if args.command == "send":
        return await send(credentials, args.recipient, args.message, out)

    page = PageOptions(json=args.json, start=getattr(args, "start", 0),
                       count=getattr(args, "count", config.DEFAULT_PAGE_SIZE))
    if args.command == "connections":
        return await connections(credentials, page)
    if args.command == "invites":
        if args.action == "accept":
            return await accept_invite(credentials, args.invitation_id, out)
        return await list_invites(credentials, page)
    if args.command == "messages":
        if args.action == "read":
            return await read_conversation(credentials, args.conversation_id, page)
        return await list_conversations(credentials, page)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        output = asyncio.run(run(args))
    except (LinkedInError, httpx.TransportError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
