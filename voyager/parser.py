"""
Normalization of Voyager API responses.

LinkedIn answers the same question in two shapes:

    legacy       {"miniProfile": {"firstName": ..., "publicIdentifier": ...}}
    normalized   {"data": {"*miniProfile": "urn:li:fs_miniProfile:ABC"},
                  "included": [{"entityUrn": "urn:li:fs_miniProfile:ABC", ...}]}

In the normalized shape, keys prefixed with ``*`` hold URN references that
are resolved against the co-located ``included`` list. Every parse function
detects the shape, locates the entity and maps it onto one model from
``models.py``, so callers never see which shape came back.

All functions are pure: the same payload always yields an equal result.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .exceptions import ParseError
from .models import (
    Connection,
    Conversation,
    Invitation,
    Message,
    NetworkInfo,
    Paging,
    Profile,
    from_epoch_ms,
    profile_url_for,
)

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "*"
PREFERRED_LOCALE = "en_US"

# Tried in order; first non-empty wins.
URN_FIELDS = ("entityUrn", "dashEntityUrn", "objectUrn")

# Where a profile may live inside a profile-ish payload.
_PROFILE_KEYS = ("profile", "miniProfile")

# Where a connection element keeps the connected member.
_CONNECTION_PROFILE_KEYS = ("to~", "connectedMemberResolutionResult", "miniProfile", "connectedMember", "to")
_CONNECTION_URN_KEYS = ("to", "connectedMember")


class Shape(str, Enum):
    LEGACY = "legacy"
    NORMALIZED = "normalized"


# ── generic helpers ──────────────────────────────────────────────

def extract_localized(field: Any, locale: str = PREFERRED_LOCALE) -> str:
    """Return one string from a LinkedIn text field.

    Accepts plain strings, ``{"localized": {"en_US": ...}}`` structures and
    ``{"text": ...}`` view models. Without an exact locale match the first
    available entry is used.
    """
    if field is None:
        return ""
    if isinstance(field, str):
        return field
    if not isinstance(field, dict):
        return ""

    if isinstance(field.get("text"), str):
        return field["text"]

    localized = field.get("localized")
    if not isinstance(localized, dict) or not localized:
        return ""
    value = localized[locale] if locale in localized else next(iter(localized.values()))
    return value if isinstance(value, str) else ""


def extract_urn(entity: Any) -> str:
    """Canonical URN of *entity*, falling back through ``URN_FIELDS``."""
    if not isinstance(entity, dict):
        return ""
    for field in URN_FIELDS:
        value = entity.get(field)
        if isinstance(value, str) and value:
            return value
    return ""


def id_from_urn(urn: str) -> str:
    """``urn:li:fsd_invitation:INV123`` -> ``INV123``; non-URNs pass through."""
    if urn.startswith("urn:li:"):
        return urn.split(":")[-1]
    return urn


def find_included(included: Iterable[Any], urn: Any) -> Optional[Dict]:
    """First element of *included* identified by *urn*, or None."""
    if not isinstance(urn, str) or not urn:
        return None
    for item in included:
        if isinstance(item, dict) and any(item.get(f) == urn for f in URN_FIELDS):
            return item
    return None


def detect_shape(payload: Any) -> Optional[Shape]:
    if not isinstance(payload, dict):
        return None
    if isinstance(payload.get("data"), dict) or isinstance(payload.get("included"), list):
        return Shape.NORMALIZED
    return Shape.LEGACY


def _data(payload: Dict) -> Dict:
    data = payload.get("data")
    return data if isinstance(data, dict) else {}


def _included(payload: Any) -> List[Dict]:
    if not isinstance(payload, dict):
        return []
    included = payload.get("included")
    if not isinstance(included, list):
        return []
    return [item for item in included if isinstance(item, dict)]


def _unwrap(value: Any) -> Any:
    """Strip a Rest.li union wrapper such as
    ``{"com.linkedin.voyager.messaging.MessagingMember": {...}}``."""
    if isinstance(value, dict) and len(value) == 1:
        (key, inner), = value.items()
        if "." in key and isinstance(inner, dict):
            return inner
    return value


def _follow(entity: Any, key: str, included: List[Dict]) -> Any:
    """Value stored under *key*: inline, or resolved through a reference.

    Both ``"*key": "urn:..."`` and ``"key": "urn:..."`` count as references.
    Lists resolve element-wise, inline or not; unresolved entries are dropped.
    """
    if not isinstance(entity, dict):
        return None
    value = entity.get(key)
    if isinstance(value, dict):
        return _unwrap(value)

    ref = value if isinstance(value, list) else entity.get(REFERENCE_PREFIX + key, value)
    if isinstance(ref, str):
        return find_included(included, ref)
    if isinstance(ref, list):
        resolved = (find_included(included, r) if isinstance(r, str) else r for r in ref)
        return [_unwrap(item) for item in resolved if isinstance(item, dict)]
    return None


def _first_entity(entity: Any, keys: Iterable[str], included: List[Dict]) -> Optional[Dict]:
    for key in keys:
        found = _follow(entity, key, included)
        if isinstance(found, dict):
            return found
    return None


def _reference(entity: Any, key: str) -> str:
    """The URN a field points at, whichever way it is spelled."""
    if not isinstance(entity, dict):
        return ""
    for candidate in (entity.get(key), entity.get(REFERENCE_PREFIX + key)):
        if isinstance(candidate, str) and candidate:
            return candidate
    return ""


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _mini_profile_of(holder: Any, included: List[Dict]) -> Optional[Dict]:
    """Mini profile carried by a member / participant / inviter wrapper."""
    holder = _unwrap(holder)
    if not isinstance(holder, dict):
        return None
    mini = _follow(holder, "miniProfile", included)
    if isinstance(mini, dict):
        return mini
    if holder.get("publicIdentifier"):
        return holder
    return None


def _member(entity: Dict, urn: str = "") -> Connection:
    username = entity.get("publicIdentifier") or ""
    return Connection(
        urn=urn or extract_urn(entity),
        username=username,
        first_name=extract_localized(entity.get("firstName")),
        last_name=extract_localized(entity.get("lastName")),
        headline=extract_localized(entity.get("headline") or entity.get("occupation")),
        profile_url=profile_url_for(username),
    )


def _elements(payload: Any, concept: str) -> Tuple[List[Dict], List[Dict]]:
    """Element list of a collection response plus its ``included`` list."""
    shape = detect_shape(payload)
    if shape is None:
        raise ParseError(concept)

    included = _included(payload)
    elements = None
    if shape is Shape.NORMALIZED:
        elements = _follow(_data(payload), "elements", included)
    if elements is None:
        elements = payload.get("elements")
    if not isinstance(elements, list):
        raise ParseError(concept)

    logger.debug("Parsing %d %s element(s) from %s payload", len(elements), concept, shape.value)
    return [e for e in elements if isinstance(e, dict)], included


def parse_paging(payload: Any, default_total: int = 0) -> Paging:
    paging = None
    if isinstance(payload, dict):
        paging = payload.get("paging")
        if not isinstance(paging, dict):
            paging = _data(payload).get("paging")
    if not isinstance(paging, dict):
        return Paging(start=0, count=default_total, total=default_total)
    return Paging(
        start=_int(paging.get("start")),
        count=_int(paging.get("count")),
        total=_int(paging.get("total")) or default_total,
    )


# ═════════════════════════════════════════════════════════════════
#  PROFILE
# ═════════════════════════════════════════════════════════════════

def _locate_profile(payload: Dict, shape: Shape) -> Tuple[Optional[Dict], str]:
    """Find the profile entity and the reference that pointed at it."""
    if shape is Shape.LEGACY:
        for key in _PROFILE_KEYS:
            if isinstance(payload.get(key), dict):
                return _unwrap(payload[key]), ""
        if payload.get("publicIdentifier"):
            return payload, ""
        return None, ""

    data = _data(payload)
    included = _included(payload)
    if data.get("publicIdentifier"):
        return data, ""

    for key in _PROFILE_KEYS:
        ref = _reference(data, key)
        found = _follow(data, key, included)
        if isinstance(found, dict):
            return found, ref

    elements = _follow(data, "elements", included)
    if elements and isinstance(elements[0], dict):
        return elements[0], _reference(data, "elements")

    # Positional fallback: first included entity that looks like a profile.
    for item in included:
        if item.get("publicIdentifier"):
            return item, ""
    return None, ""


def _parse_profile(payload: Any, concept: str) -> Profile:
    shape = detect_shape(payload)
    if shape is None:
        raise ParseError(concept)

    entity, ref = _locate_profile(payload, shape)
    if entity is None:
        raise ParseError(concept)
    logger.debug("Located %s in %s payload", concept, shape.value)

    included = _included(payload)
    mini = _follow(entity, "miniProfile", included)
    mini = mini if isinstance(mini, dict) else {}

    username = entity.get("publicIdentifier") or mini.get("publicIdentifier") or ""
    if not username:
        raise ParseError(concept)
    # Empty when neither the entity, its mini profile nor the reference has one.
    urn = extract_urn(entity) or extract_urn(mini) or ref

    def text(key: str) -> str:
        return extract_localized(entity.get(key)) or extract_localized(mini.get(key))

    return Profile(
        urn=urn,
        username=username,
        first_name=text("firstName"),
        last_name=text("lastName"),
        headline=text("headline") or text("occupation"),
        location=_location(entity, included),
        profile_url=profile_url_for(username),
        industry=text("industryName") or None,
        summary=text("summary") or None,
    )


def _location(profile: Dict, included: List[Dict]) -> str:
    for key in ("geoLocationName", "locationName"):
        name = extract_localized(profile.get(key))
        if name:
            return name

    geo_loc = _follow(profile, "geoLocation", included)
    geo = _follow(geo_loc, "geo", included)
    if isinstance(geo, dict):
        return extract_localized(
            geo.get("defaultLocalizedName") or geo.get("defaultLocalizedNameWithoutCountryName")
        )
    return ""


def parse_profile(payload: Any) -> Profile:
    """Normalize a profile response (profileView, dash profile, lookup)."""
    return _parse_profile(payload, "profile")


def parse_me(payload: Any) -> Profile:
    """Normalize a ``/me`` response into the logged-in member's profile."""
    return _parse_profile(payload, "current user profile")


def parse_profile_lookup(payload: Any) -> List[Connection]:
    """Members returned by a ``q=memberIdentity`` lookup, in response order."""
    elements, _ = _elements(payload, "profile lookup")
    return [_member(element) for element in elements]


def parse_network_info(payload: Any) -> NetworkInfo:
    shape = detect_shape(payload)
    if shape is None:
        raise ParseError("network info")

    source = _data(payload) if shape is Shape.NORMALIZED else payload
    if "followersCount" not in source and "connectionsCount" not in source:
        source = payload
    if "followersCount" not in source and "connectionsCount" not in source:
        raise ParseError("network info")

    return NetworkInfo(
        followers_count=_int(source.get("followersCount")),
        connections_count=_int(source.get("connectionsCount")),
    )


# ═════════════════════════════════════════════════════════════════
#  CONNECTIONS
# ═════════════════════════════════════════════════════════════════

def parse_connection(element: Any, included: Optional[List[Dict]] = None) -> Connection:
    included = included or []
    profile = _first_entity(element, _CONNECTION_PROFILE_KEYS, included)
    if profile is None:
        raise ParseError("connection")

    urn = next(
        (ref for ref in (_reference(element, k) for k in _CONNECTION_URN_KEYS) if ref),
        "",
    )
    return _member(profile, urn=urn)


def parse_connections(payload: Any) -> Tuple[List[Connection], Paging]:
    elements, included = _elements(payload, "connections")
    connections = [parse_connection(element, included) for element in elements]
    return connections, parse_paging(payload, len(connections))


# ═════════════════════════════════════════════════════════════════
#  INVITATIONS
# ═════════════════════════════════════════════════════════════════

def parse_invitation(element: Any, included: Optional[List[Dict]] = None) -> Invitation:
    included = included or []
    if not isinstance(element, dict):
        raise ParseError("invitation")

    # invitationViews wrap the invitation itself
    invitation = _follow(element, "invitation", included)
    if not isinstance(invitation, dict):
        invitation = element

    urn = extract_urn(invitation)
    inviter = (
        _mini_profile_of(_follow(invitation, "genericInviter", included), included)
        or _mini_profile_of(_follow(invitation, "fromMember", included), included)
    )
    if not urn or inviter is None:
        raise ParseError("invitation")

    shared = _follow(invitation, "sharedConnections", included) or _follow(
        element, "sharedConnections", included
    )
    message = invitation.get("message")

    return Invitation(
        invitation_id=id_from_urn(urn),
        urn=urn,
        shared_secret=invitation.get("sharedSecret") or "",
        type=invitation.get("invitationType") or "",
        inviter=_member(inviter),
        message=message if isinstance(message, str) else None,
        shared_connections=_int(shared.get("count")) if isinstance(shared, dict) else 0,
        sent_at=from_epoch_ms(invitation.get("sentTime")),
    )


def parse_invitations(payload: Any) -> Tuple[List[Invitation], Paging]:
    elements, included = _elements(payload, "invitations")
    invitations = [parse_invitation(element, included) for element in elements]
    return invitations, parse_paging(payload, len(invitations))


# ═════════════════════════════════════════════════════════════════
#  MESSAGING
# ═════════════════════════════════════════════════════════════════

def _message_event(event: Dict, included: List[Dict]) -> Dict:
    content = _follow(event, "eventContent", included)
    if not isinstance(content, dict):
        return {}
    message_event = _follow(content, "messageEvent", included)
    return message_event if isinstance(message_event, dict) else content


def _message_body(message_event: Dict) -> str:
    body = message_event.get("body")
    if isinstance(body, str) and body:
        return body
    return extract_localized(message_event.get("attributedBody"))


def parse_message(
    event: Any, conversation_id: str = "", included: Optional[List[Dict]] = None,
) -> Message:
    included = included or []
    if not isinstance(event, dict):
        raise ParseError("message")

    message_id = extract_urn(event)
    sender = _mini_profile_of(_follow(event, "from", included), included)
    if not message_id or sender is None:
        raise ParseError("message")

    message_event = _message_event(event, included)
    attachments = message_event.get("attachments")
    return Message(
        message_id=message_id,
        conversation_id=conversation_id,
        sender=_member(sender),
        body=_message_body(message_event),
        created_at=from_epoch_ms(event.get("createdAt")),
        attachments=attachments if isinstance(attachments, list) else [],
    )


def parse_messages(payload: Any, conversation_id: str = "") -> Tuple[List[Message], Paging]:
    elements, included = _elements(payload, "messages")
    messages = [parse_message(element, conversation_id, included) for element in elements]
    return messages, parse_paging(payload, len(messages))


def parse_conversation(element: Any, included: Optional[List[Dict]] = None) -> Conversation:
    included = included or []
    conversation_id = extract_urn(element)
    if not conversation_id:
        raise ParseError("conversation")

    participants = []
    for holder in _follow(element, "participants", included) or []:
        mini = _mini_profile_of(holder, included)
        if mini is None:
            raise ParseError("conversation")
        participants.append(_member(mini))
    if not participants:
        raise ParseError("conversation")

    events = _follow(element, "events", included) or []
    last_message = ""
    if events and isinstance(events[0], dict):
        last_message = _message_body(_message_event(events[0], included))

    return Conversation(
        conversation_id=conversation_id,
        participant=participants[0],
        participants=participants,
        last_message=last_message,
        last_activity_at=from_epoch_ms(element.get("lastActivityAt")),
        unread_count=_int(element.get("unreadCount")),
        total_event_count=_int(element.get("totalEventCount")),
        read=bool(element.get("read")),
        group_chat=bool(element.get("groupChat")),
    )


def parse_conversations(payload: Any) -> Tuple[List[Conversation], Paging]:
    elements, included = _elements(payload, "conversations")
    conversations = [parse_conversation(element, included) for element in elements]
    return conversations, parse_paging(payload, len(conversations))


def conversation_id_from_urn(urn: str) -> str:
    """Everything after the entity type, so compound ids stay whole.

    ``urn:li:msg_conversation:(urn:li:fsd_profile:X,2-abc)`` -> ``(urn:li:fsd_profile:X,2-abc)``
    """
    if not urn.startswith("urn:li:"):
        return urn
    _, _, conversation_id = urn[len("urn:li:"):].partition(":")
    return conversation_id or urn


def parse_conversation_lookup(payload: Any) -> Optional[str]:
    """Id of the first conversation with a recipient, or None if there is none yet."""
    elements, _ = _elements(payload, "conversation lookup")
    if not elements:
        return None
    urn = extract_urn(elements[0])
    if not urn:
        raise ParseError("conversation")
    return conversation_id_from_urn(urn)


def _created_value(payload: Any) -> Dict:
    if not isinstance(payload, dict):
        return {}
    value = payload.get("value")
    if not isinstance(value, dict):
        value = _data(payload).get("value")
    return value if isinstance(value, dict) else {}


def parse_created_conversation(payload: Any) -> str:
    """Conversation id from a create-conversation response."""
    urn = extract_urn(_created_value(payload))
    if not urn:
        raise ParseError("conversation")
    return conversation_id_from_urn(urn)


def parse_sent_message(payload: Any) -> Optional[str]:
    """URN of the event created by a send, when LinkedIn reports one."""
    return extract_urn(_created_value(payload)) or None
