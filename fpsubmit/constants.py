"""Identifiers, submission actions, resource keys and statuses shared by the service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

VALIDATOR_ID = 810112564787675166
SYSTEM_ID = 844246603102945333
USER_IN_AUDIT_SUBMISSION_MAX_FILESIZE = 500000000

ACTION_COMMENT = "comment"
ACTION_APPROVE = "approve"
ACTION_REQUEST_CHANGES = "request-changes"
ACTION_MARK_ADDED = "mark-added"
ACTION_UPLOAD = "upload-file"
ACTION_VERIFY = "verify"
ACTION_ASSIGN_TESTING = "assign-testing"
ACTION_UNASSIGN_TESTING = "unassign-testing"
ACTION_ASSIGN_VERIFICATION = "assign-verification"
ACTION_UNASSIGN_VERIFICATION = "unassign-verification"
ACTION_SYSTEM = "system"
ACTION_REJECT = "reject"
ACTION_AUDITION_UPLOAD = "audition-upload"
ACTION_AUDITION_SUBSCRIBE = "audition-subscribe"

SUBMISSION_LEVEL_AUDITION = "audition"
SUBMISSION_LEVEL_TRIAL = "trial"
SUBMISSION_LEVEL_STAFF = "staff"

RESOURCE_KEY_SUBMISSION_ID = "submission-id"
RESOURCE_KEY_SUBMISSION_IDS = "submission-ids"
RESOURCE_KEY_FILE_ID = "file-id"
RESOURCE_KEY_FILE_IDS = "file-ids"
RESOURCE_KEY_COMMENT_ID = "comment-id"
RESOURCE_KEY_CURATION_IMAGE_ID = "curation-image-id"
RESOURCE_KEY_FLASHFREEZE_ROOT_FILE_ID = "flashfreeze-root-file-id"
RESOURCE_KEY_USER_ID = "user-id"
RESOURCE_KEY_TEMP_NAME = "temp-name"
RESOURCE_KEY_TAG_ID = "tag-id"
RESOURCE_KEY_GAME_ID = "game-id"
RESOURCE_KEY_GAME_REVISION = "revision-date"
RESOURCE_KEY_GAME_DATA_DATE = "game-data-date"
RESOURCE_KEY_REASON = "reason"
RESOURCE_KEY_HASH = "hash"
RESOURCE_KEY_SESSION_ID = "session-id"
RESOURCE_KEY_CLIENT_APP_ID = "client-app-id"
RESOURCE_KEY_RECOMMENDATION_OP = "recommendation-op"

NOTIFICATION_DEFAULT = "notification"
NOTIFICATION_CURATION_FEED = "curation-feed"

REQUEST_WEB = "web"
REQUEST_JSON = "json"
REQUEST_DATA = "data"

SUBMISSION_STATUS_RECEIVED = "received"
SUBMISSION_STATUS_FAILED = "failed"
SUBMISSION_STATUS_COPYING = "copying"
SUBMISSION_STATUS_VALIDATING = "validating"
SUBMISSION_STATUS_FINALIZING = "finalizing"
SUBMISSION_STATUS_SUCCESS = "success"


@dataclass(frozen=True)
class PublicResponse:
    """A response body carrying an optional message and an HTTP status."""

    msg: Optional[str]
    status: int

    def to_dict(self) -> dict[str, Any]:
        """Return the response as a JSON-ready mapping."""
        return {"message": self.msg, "status": self.status}


def get_allowed_actions() -> list[str]:
    """Actions a user may perform on a submission through a comment."""
    return [
        ACTION_COMMENT,
        ACTION_APPROVE,
        ACTION_REQUEST_CHANGES,
        ACTION_MARK_ADDED,
        ACTION_UPLOAD,
        ACTION_VERIFY,
        ACTION_ASSIGN_TESTING,
        ACTION_UNASSIGN_TESTING,
        ACTION_ASSIGN_VERIFICATION,
        ACTION_UNASSIGN_VERIFICATION,
        ACTION_REJECT,
    ]


def get_actions_with_mandatory_message() -> list[str]:
    """Actions that must be accompanied by a message."""
    return [ACTION_COMMENT, ACTION_REQUEST_CHANGES, ACTION_REJECT]


def get_actions_with_notification() -> list[str]:
    """Actions that trigger a notification."""
    return [
        ACTION_COMMENT,
        ACTION_APPROVE,
        ACTION_REQUEST_CHANGES,
        ACTION_MARK_ADDED,
        ACTION_UPLOAD,
        ACTION_REJECT,
    ]


def get_valid_delete_reasons() -> list[str]:
    """Reasons accepted when deleting a game."""
    return ["Duplicate", "Owner Request", "Still On Sale", "Blacklisted Content"]


def get_valid_restore_reasons() -> list[str]:
    """Reasons accepted when restoring a deleted game."""
    return ["Wrong Delete Reason", "Taken Off Sale", "Removed From Blacklist"]