"""Builders for the activity events the service records."""

from __future__ import annotations

from typing import Optional

from fpsubmit.activityevents import (
    ActivityEvent,
    ActivityEventArea,
    ActivityEventOperation,
    AuthEventData,
    EventData,
    GameEventData,
    SubmissionEventData,
    TagEventData,
)

_Area = ActivityEventArea
_Op = ActivityEventOperation


def _event(
    user_id: int, area: ActivityEventArea, operation: ActivityEventOperation, data: EventData
) -> ActivityEvent:
    return ActivityEvent(user_id=user_id, area=area, operation=operation, data=data)


def _game(user_id: int, operation: ActivityEventOperation, game_uuid: str, name: str) -> ActivityEvent:
    return _event(user_id, _Area.GAME, operation, GameEventData(game_uuid=game_uuid, operation=name))


def build_submission_created_event(user_id: int, submission_id: int) -> ActivityEvent:
    """Event for a newly created submission."""
    return _event(user_id, _Area.SUBMISSION, _Op.CREATE, SubmissionEventData(submission_id=submission_id))


def build_submission_comment_event(
    user_id: int, submission_id: int, comment_id: int, action: str, file_id: Optional[int]
) -> ActivityEvent:
    """Event for any comment received on a submission."""
    return _event(
        user_id,
        _Area.SUBMISSION,
        _Op.UPDATE,
        SubmissionEventData(
            action=action, submission_id=submission_id, comment_id=comment_id, file_id=file_id
        ),
    )


def build_submission_download_event(user_id: int, submission_id: int, file_id: int) -> ActivityEvent:
    """Event for a submission file download."""
    return _event(
        user_id,
        _Area.SUBMISSION,
        _Op.READ,
        SubmissionEventData(submission_id=submission_id, file_id=file_id),
    )


def build_submission_delete_event(
    user_id: int, submission_id: int, comment_id: Optional[int], file_id: Optional[int]
) -> ActivityEvent:
    """Event for deleting a submission, one of its comments or one of its files."""
    return _event(
        user_id,
        _Area.SUBMISSION,
        _Op.DELETE,
        SubmissionEventData(submission_id=submission_id, comment_id=comment_id, file_id=file_id),
    )


def build_submission_freeze_event(user_id: int, submission_id: int, to_freeze: bool) -> ActivityEvent:
    """Event for manually freezing or unfreezing a submission."""
    action = "freeze" if to_freeze else "unfreeze"
    return _event(
        user_id,
        _Area.SUBMISSION,
        _Op.UPDATE,
        SubmissionEventData(action=action, submission_id=submission_id),
    )


def build_auth_login_event(user_id: int) -> ActivityEvent:
    """Event for a user logging in."""
    return _event(user_id, _Area.AUTH, _Op.CREATE, AuthEventData(operation="login"))


def build_auth_logout_event(user_id: int) -> ActivityEvent:
    """Event for a user logging out."""
    return _event(user_id, _Area.AUTH, _Op.DELETE, AuthEventData(operation="logout"))


def build_game_logo_update_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for a game logo change."""
    return _game(user_id, _Op.UPDATE, game_uuid, "logo-update")


def build_game_screenshot_update_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for a game screenshot change."""
    return _game(user_id, _Op.UPDATE, game_uuid, "screenshot-update")


def build_game_delete_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for deleting a game."""
    return _game(user_id, _Op.DELETE, game_uuid, "delete")


def build_game_restore_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for restoring a deleted game."""
    return _game(user_id, _Op.RESTORE, game_uuid, "restore")


def build_game_freeze_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for freezing a game."""
    return _game(user_id, _Op.UPDATE, game_uuid, "freeze")


def build_game_unfreeze_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for unfreezing a game."""
    return _game(user_id, _Op.UPDATE, game_uuid, "unfreeze")


def build_auth_revoke_session_event(user_id: int, session_id: int) -> ActivityEvent:
    """Event for revoking a session."""
    return _event(
        user_id,
        _Area.AUTH,
        _Op.DELETE,
        AuthEventData(operation="revoke-session", session_id=session_id),
    )


def build_auth_set_client_secret_event(user_id: int, client_id: str) -> ActivityEvent:
    """Event for setting a client application's secret."""
    return _event(
        user_id,
        _Area.AUTH,
        _Op.UPDATE,
        AuthEventData(operation="set-client-secret", client_id=client_id),
    )


def build_tag_update_event(user_id: int, tag_id: int) -> ActivityEvent:
    """Event for updating a tag."""
    return _event(user_id, _Area.TAG, _Op.UPDATE, TagEventData(tag_id=tag_id))


def build_game_save_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for saving a game's metadata."""
    return _game(user_id, _Op.UPDATE, game_uuid, "save")


def build_game_save_data_event(user_id: int, game_uuid: str) -> ActivityEvent:
    """Event for saving a game's data entry."""
    return _game(user_id, _Op.UPDATE, game_uuid, "save-data")


def build_auth_device_event(user_id: int, client_id: str, approved: bool) -> ActivityEvent:
    """Event for approving or denying a device authorisation."""
    operation = "device-approve" if approved else "device-deny"
    return _event(
        user_id,
        _Area.AUTH,
        _Op.UPDATE,
        AuthEventData(operation=operation, client_id=client_id),
    )


def build_auth_new_token_event(user_id: int, client_id: str) -> ActivityEvent:
    """Event for issuing a new token to a client."""
    return _event(
        user_id,
        _Area.AUTH,
        _Op.CREATE,
        AuthEventData(operation="new-token", client_id=client_id),
    )


def build_auth_delete_user_sessions_event(user_id: int, target_id: int) -> ActivityEvent:
    """Event for deleting all sessions of another user."""
    return _event(
        user_id,
        _Area.AUTH,
        _Op.DELETE,
        AuthEventData(operation="delete-user-sessions", target_user_id=target_id),
    )


def build_game_redirect_event(user_id: int, from_game_uuid: str, to_game_uuid: str) -> ActivityEvent:
    """Event for redirecting one game to another."""
    return _event(
        user_id,
        _Area.GAME,
        _Op.CREATE,
        GameEventData(
            game_uuid=from_game_uuid, operation="redirect", secondary_game_uuid=to_game_uuid
        ),
    )