# fpsubmit

Core building blocks for a game submission and curation service.

- **Activity events** (`fpsubmit.activityevents`): the `ActivityEvent`
  dataclass, the `ActivityEventArea` and `ActivityEventOperation` enums, and
  the payload classes `SubmissionEventData`, `AuthEventData`, `GameEventData`
  and `TagEventData`. A new event has an `id` of `-1` and a `created_at` set
  to the current UTC time; `ActivityEvent.to_dict()` returns a JSON-ready
  mapping.
- **Event builders** (`fpsubmit.events`): one function per kind of event,
  such as `build_submission_created_event`, `build_submission_comment_event`,
  `build_auth_login_event`, `build_game_delete_event`,
  `build_tag_update_event` and `build_game_redirect_event`.
- **Constants** (`fpsubmit.constants`): submission actions, submission
  levels and statuses, resource keys, notification and request kinds, the
  `PublicResponse` dataclass, and functions returning action and reason lists
  (`get_allowed_actions`, `get_actions_with_mandatory_message`,
  `get_actions_with_notification`, `get_valid_delete_reasons`,
  `get_valid_restore_reasons`).
- **Roles** (`fpsubmit.roles`): role names, role groups (`staff_roles`,
  `decider_roles`, ...) and permission checks such as `has_any_role`,
  `is_staff`, `is_decider`, `is_in_audit` and `is_god_or_superuser`.
- **Errors** (`fpsubmit.errors`): `PublicError` (a message and HTTP status
  that may be shown to clients, with `to_dict()`), `DatabaseError` (wraps an
  underlying exception and chains it as its cause), and shared error message
  strings.
- **Configuration** (`fpsubmit.config`): `get_config()` builds a frozen
  `Config` from environment variables, raising `ConfigError` for any variable
  that is missing or invalid. The helpers `env_string`, `env_int`, `env_bool`
  and `env_json_list` read single variables.

## Installation

```
pip install .
```

## Examples

Building an activity event and turning it into a JSON-ready dict:

```python
from fpsubmit.events import build_submission_comment_event

event = build_submission_comment_event(
    user_id=42, submission_id=7, comment_id=99, action="approve", file_id=None
)
print(event.to_dict())
```

Checking permissions:

```python
from fpsubmit.roles import is_staff, is_decider, is_in_audit

roles = ["Tester"]
assert is_staff(roles)
assert is_decider(roles)
assert not is_in_audit(roles)
```

Loading configuration. Every function in `fpsubmit.config` takes an optional
mapping of variables; the process environment is used when none is given:

```python
from fpsubmit.config import ConfigError, env_bool, get_config

assert env_bool("IS_DEV", {"IS_DEV": "True"}) is True

try:
    config = get_config()
except ConfigError as exc:
    print(f"configuration problem: {exc}")
```

Rules for variables:

- Every variable is required; an empty value counts as not set.
- Integer variables must be decimal and fit in a signed 64-bit integer.
- Boolean variables must be exactly `True` or `False`.
- List variables such as `DO_NOT_UNFREEZE_GAME_LIST` hold a JSON array of
  strings; `null` gives an empty list.

## What this package does not do

It holds the data types, checks and settings a submission service is built
on, but no service itself: there is no HTTP server or command to run, no
database storage of events or submissions, and no chat-bot integration for
looking up user roles.

## Running the tests

```
pip install .[test]
pytest
```