"""
voyager — async client for LinkedIn's internal Voyager API.

Provides:
    Client            — cookie-authenticated HTTP client
    build_headers     — browser-like request headers for a session
    parse_identifier  — username / profile URL / URN classification
    parse_*           — normalization of Voyager responses into models

Typical usage:

    from voyager import Client, endpoint, parse_profile, resolve_credentials

    credentials = resolve_credentials()           # LINKEDIN_LI_AT / LINKEDIN_JSESSIONID
    client = Client(credentials)
    payload = await client.request_json(endpoint("profile", username="johndoe"))
    profile = parse_profile(payload)
"""

from .auth import Credentials, build_cookie_header, resolve_credentials
from .client import Client
from .endpoints import BASE_URL, ENDPOINTS, endpoint
from .headers import build_headers
from .identifiers import IdentifierKind, ParsedIdentifier, parse_identifier, require_identifier
from .models import (
    Connection,
    Conversation,
    Invitation,
    Message,
    NetworkInfo,
    Paging,
    Profile,
)
from .parser import (
    Shape,
    conversation_id_from_urn,
    detect_shape,
    extract_localized,
    extract_urn,
    parse_connection,
    parse_connections,
    parse_conversation,
    parse_conversation_lookup,
    parse_conversations,
    parse_created_conversation,
    parse_invitation,
    parse_invitations,
    parse_me,
    parse_message,
    parse_messages,
    parse_network_info,
    parse_profile,
    parse_profile_lookup,
    parse_sent_message,
)
from .resolver import resolve_profile_urn, resolve_recipient
from .exceptions import (
    CredentialsError,
    InputError,
    LinkedInError,
    LinkedInRequestError,
    ParseError,
    ProfileNotFoundError,
)

__all__ = [
    # Core
    "Client",
    "Credentials",
    "build_headers",
    "build_cookie_header",
    "resolve_credentials",
    "BASE_URL",
    "ENDPOINTS",
    "endpoint",
    # Identifiers
    "IdentifierKind",
    "ParsedIdentifier",
    "parse_identifier",
    "require_identifier",
    "resolve_profile_urn",
    "resolve_recipient",
    # Models
    "Profile",
    "Connection",
    "Invitation",
    "Conversation",
    "Message",
    "NetworkInfo",
    "Paging",
    # Parsing
    "Shape",
    "detect_shape",
    "extract_localized",
    "extract_urn",
    "parse_profile",
    "parse_me",
    "parse_profile_lookup",
    "parse_network_info",
    "parse_connection",
    "parse_connections",
    "parse_invitation",
    "parse_invitations",
    "parse_conversation",
    "parse_conversations",
    "parse_message",
    "parse_messages",
    "conversation_id_from_urn",
    "parse_conversation_lookup",
    "parse_created_conversation",
    "parse_sent_message",
    # Exceptions
    "LinkedInError",
    "LinkedInRequestError",
    "InputError",
    "CredentialsError",
    "ParseError",
    "ProfileNotFoundError",
]
