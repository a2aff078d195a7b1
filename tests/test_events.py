import pytest

from fpsubmit import events
from fpsubmit.activityevents import (
    ActivityEventArea,
    ActivityEventOperation,
    AuthEventData,
    GameEventData,
    SubmissionEventData,
    TagEventData,
)

USER = 42
GAME = "game-uuid-1"


def test_submission_created():
    event = events.build_submission_created_event(USER, 11)
    assert event.id == -1
    assert event.user_id == USER
    assert event.area is ActivityEventArea.SUBMISSION
    assert event.operation is ActivityEventOperation.CREATE
    assert event.data == SubmissionEventData(submission_id=11)


def test_submission_comment():
    event = events.build_submission_comment_event(USER, 11, 12, "approve", 13)
    assert event.operation is ActivityEventOperation.UPDATE
    assert event.data == SubmissionEventData(
        action="approve", submission_id=11, comment_id=12, file_id=13
    )


def test_submission_comment_without_file():
    event = events.build_submission_comment_event(USER, 11, 12, "comment", None)
    assert event.data.file_id is None
    assert event.data.action == "comment"


def test_submission_download():
    event = events.build_submission_download_event(USER, 11, 13)
    assert event.operation is ActivityEventOperation.READ
    assert event.data == SubmissionEventData(submission_id=11, file_id=13)


def test_submission_delete():
    event = events.build_submission_delete_event(USER, 11, None, 13)
    assert event.operation is ActivityEventOperation.DELETE
    assert event.data == SubmissionEventData(submission_id=11, comment_id=None, file_id=13)


@pytest.mark.parametrize("to_freeze, action", [(True, "freeze"), (False, "unfreeze")])
def test_submission_freeze(to_freeze, action):
    event = events.build_submission_freeze_event(USER, 11, to_freeze)
    assert event.operation is ActivityEventOperation.UPDATE
    assert event.data == SubmissionEventData(action=action, submission_id=11)


@pytest.mark.parametrize(
    "builder, operation, name",
    [
        (events.build_auth_login_event, ActivityEventOperation.CREATE, "login"),
        (events.build_auth_logout_event, ActivityEventOperation.DELETE, "logout"),
    ],
)
def test_login_logout(builder, operation, name):
    event = builder(USER)
    assert event.area is ActivityEventArea.AUTH
    assert event.operation is operation
    assert event.data == AuthEventData(operation=name)


@pytest.mark.parametrize(
    "builder, operation, name",
    [
        (events.build_game_logo_update_event, ActivityEventOperation.UPDATE, "logo-update"),
        (events.build_game_screenshot_update_event, ActivityEventOperation.UPDATE, "screenshot-update"),
        (events.build_game_delete_event, ActivityEventOperation.DELETE, "delete"),
        (events.build_game_restore_event, ActivityEventOperation.RESTORE, "restore"),
        (events.build_game_freeze_event, ActivityEventOperation.UPDATE, "freeze"),
        (events.build_game_unfreeze_event, ActivityEventOperation.UPDATE, "unfreeze"),
        (events.build_game_save_event, ActivityEventOperation.UPDATE, "save"),
        (events.build_game_save_data_event, ActivityEventOperation.UPDATE, "save-data"),
    ],
)
def test_game_events(builder, operation, name):
    event = builder(USER, GAME)
    assert event.area is ActivityEventArea.GAME
    assert event.operation is operation
    assert event.data == GameEventData(game_uuid=GAME, operation=name)


def test_revoke_session():
    event = events.build_auth_revoke_session_event(USER, 77)
    assert event.operation is ActivityEventOperation.DELETE
    assert event.data == AuthEventData(operation="revoke-session", session_id=77)


def test_set_client_secret():
    event = events.build_auth_set_client_secret_event(USER, "flashpoint-launcher")
    assert event.operation is ActivityEventOperation.UPDATE
    assert event.data == AuthEventData(
        operation="set-client-secret", client_id="flashpoint-launcher"
    )


def test_tag_update():
    event = events.build_tag_update_event(USER, 5)
    assert event.area is ActivityEventArea.TAG
    assert event.operation is ActivityEventOperation.UPDATE
    assert event.data == TagEventData(tag_id=5)


@pytest.mark.parametrize("approved, name", [(True, "device-approve"), (False, "device-deny")])
def test_device_event(approved, name):
    event = events.build_auth_device_event(USER, "planka", approved)
    assert event.operation is ActivityEventOperation.UPDATE
    assert event.data == AuthEventData(operation=name, client_id="planka")


def test_new_token():
    event = events.build_auth_new_token_event(USER, "planka")
    assert event.operation is ActivityEventOperation.CREATE
    assert event.data == AuthEventData(operation="new-token", client_id="planka")


def test_delete_user_sessions():
    event = events.build_auth_delete_user_sessions_event(USER, 99)
    assert event.operation is ActivityEventOperation.DELETE
    assert event.data == AuthEventData(operation="delete-user-sessions", target_user_id=99)


def test_game_redirect():
    event = events.build_game_redirect_event(USER, "from-uuid", "to-uuid")
    assert event.area is ActivityEventArea.GAME
    assert event.operation is ActivityEventOperation.CREATE
    assert event.data == GameEventData(
        game_uuid="from-uuid", operation="redirect", secondary_game_uuid="to-uuid"
    )


def test_redirect_serialises():
    payload = events.build_game_redirect_event(USER, "a", "b").to_dict()
    assert payload["data"]["secondary_game_uuid"] == "b"
    assert payload["area"] == "game"
    assert payload["operation"] == "create"