"""Activity event records and their payloads."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union


class ActivityEventArea(str, Enum):
    """The part of the system an activity event concerns."""

    AUTH = "auth"
    ADMIN = "admin"
    SUBMISSION = "submission"
    TAG = "tag"
    GAME = "game"


class ActivityEventOperation(str, Enum):
    """The kind of operation an activity event records."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    RESTORE = "restore"


@dataclass(frozen=True)
class SubmissionEventData:
    """Payload of a submission event."""

    action: Optional[str] = None
    submission_id: Optional[int] = None
    comment_id: Optional[int] = None
    file_id: Optional[int] = None


@dataclass(frozen=True)
class AuthEventData:
    """Payload of an authentication event."""

    operation: str
    session_id: Optional[int] = None
    client_id: Optional[str] = None
    target_user_id: Optional[int] = None


@dataclass(frozen=True)
class GameEventData:
    """Payload of a game event."""

    game_uuid: str
    operation: str
    secondary_game_uuid: Optional[str] = None


@dataclass(frozen=True)
class TagEventData:
    """Payload of a tag event."""

    tag_id: int


EventData = Union[SubmissionEventData, AuthEventData, GameEventData, TagEventData]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ActivityEvent:
    """A single user activity; an id of -1 means it has not been stored yet."""

    user_id: int
    area: ActivityEventArea
    operation: ActivityEventOperation
    data: Optional[EventData]
    id: int = -1
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        """Return the event as a JSON-ready mapping."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat(),
            "area": ActivityEventArea(self.area).value,
            "operation": ActivityEventOperation(self.operation).value,
            "data": None if self.data is None else asdict(self.data),
        }