"""
Pydantic models for normalized LinkedIn entities.

Fields are snake_case in Python and serialize with camelCase aliases, so
JSON output reads ``profile.firstName`` / ``networkInfo.followersCount``.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LINKEDIN_PROFILE_BASE_URL = "https://www.linkedin.com/in/"


def profile_url_for(username: str) -> str:
    return f"{LINKEDIN_PROFILE_BASE_URL}{username}"


def from_epoch_ms(value: Any) -> Optional[datetime]:
    """LinkedIn timestamps are epoch milliseconds; missing or zero ones map to None."""
    try:
        millis = int(value or 0)
    except (TypeError, ValueError):
        return None
    if not millis:
        return None
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


class VoyagerModel(BaseModel):
    """Base for all normalized records: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)

    def to_json(self, **kwargs) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, **kwargs)


class Connection(VoyagerModel):
    """A member as seen from connections, messages and invitations."""
    urn: str = ""
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    headline: str = ""
    profile_url: str = LINKEDIN_PROFILE_BASE_URL

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Profile(VoyagerModel):
    """Full normalized profile. ``username`` is always set; ``urn`` may be empty."""
    urn: str = ""
    username: str
    first_name: str = ""
    last_name: str = ""
    headline: str = ""
    location: str = ""
    profile_url: str
    industry: Optional[str] = None
    summary: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return f"<Profile {self.username} | {self.name} | {self.headline}>"


class NetworkInfo(VoyagerModel):
    followers_count: int = 0
    connections_count: int = 0


class Invitation(VoyagerModel):
    invitation_id: str
    urn: str
    shared_secret: str = ""
    type: str = ""
    inviter: Connection
    message: Optional[str] = None
    shared_connections: int = 0
    sent_at: Optional[datetime] = None


class Message(VoyagerModel):
    message_id: str
    conversation_id: str = ""
    sender: Connection
    body: str = ""
    created_at: Optional[datetime] = None
    attachments: List[Any] = Field(default_factory=list)


class Conversation(VoyagerModel):
    conversation_id: str
    participant: Connection
    participants: List[Connection] = Field(default_factory=list)
    last_message: str = ""
    last_activity_at: Optional[datetime] = None
    unread_count: int = 0
    total_event_count: int = 0
    read: bool = False
    group_chat: bool = False


class Paging(VoyagerModel):
    """Paging block of a single list response page."""
    start: int = 0
    count: int = 0
    total: int = 0
