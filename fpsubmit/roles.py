"""Role names and the permission checks built on them."""

from __future__ import annotations

from collections.abc import Iterable

ROLE_ADMINISTRATOR = "Administrator"
ROLE_MODERATOR = "Moderator"
ROLE_CURATOR = "Curator"
ROLE_HACKER = "Hacker"
ROLE_TESTER = "Tester"
ROLE_ARCHIVIST = "Archivist"
ROLE_MECHANIC = "Mechanic"
ROLE_HUNTER = "Hunter"
ROLE_TRIAL_CURATOR = "Trial Curator"
ROLE_TRIAL_EDITOR = "Trial Editor"
ROLE_THE_BLUE = "The Blue"
ROLE_THE_D = "The D"

SUPERUSER_UID = 689080719460663414


def staff_roles() -> list[str]:
    """Roles that make a user staff."""
    return [
        ROLE_ADMINISTRATOR,
        ROLE_MODERATOR,
        ROLE_CURATOR,
        ROLE_HACKER,
        ROLE_TESTER,
        ROLE_ARCHIVIST,
        ROLE_MECHANIC,
        ROLE_HUNTER,
        ROLE_THE_BLUE,
        ROLE_THE_D,
    ]


def trial_curator_roles() -> list[str]:
    """Roles that make a user a trial curator."""
    return [ROLE_TRIAL_CURATOR]


def trial_editor_roles() -> list[str]:
    """Roles that make a user a trial editor."""
    return [ROLE_TRIAL_EDITOR]


def deleter_roles() -> list[str]:
    """Roles allowed to soft-delete things."""
    return [ROLE_ADMINISTRATOR, ROLE_MODERATOR]


def freezer_roles() -> list[str]:
    """Roles allowed to freeze things."""
    return [ROLE_ADMINISTRATOR, ROLE_MODERATOR]


def decider_roles() -> list[str]:
    """Roles allowed to decide the state of submissions."""
    return [ROLE_CURATOR, ROLE_TESTER, ROLE_MODERATOR, ROLE_ADMINISTRATOR]


def adder_roles() -> list[str]:
    """Roles allowed to mark submissions as added."""
    return [ROLE_MODERATOR, ROLE_ADMINISTRATOR]


def god_roles() -> list[str]:
    """Roles with unrestricted powers."""
    return [ROLE_THE_D]


def has_any_role(has: Iterable[str], needs: Iterable[str]) -> bool:
    """Return True if any role in ``has`` is among ``needs``."""
    needed = set(needs)
    return any(role in needed for role in has)


def is_in_audit(roles: Iterable[str]) -> bool:
    """Users in audit may submit one curation and interact only with it."""
    roles = list(roles)
    return not (is_staff(roles) or is_trial_curator(roles))


def is_staff(roles: Iterable[str]) -> bool:
    """Staff may access and interact with all submissions, to a degree."""
    return has_any_role(roles, staff_roles())


def is_trial_curator(roles: Iterable[str]) -> bool:
    """Trial curators may submit and see only their own submissions."""
    return has_any_role(roles, trial_curator_roles())


def is_trial_editor(roles: Iterable[str]) -> bool:
    """Return True for trial editors."""
    return has_any_role(roles, trial_editor_roles())


def is_deleter(roles: Iterable[str]) -> bool:
    """Deleters may soft-delete things."""
    return has_any_role(roles, deleter_roles())


def is_freezer(roles: Iterable[str]) -> bool:
    """Freezers may freeze things."""
    return has_any_role(roles, freezer_roles())


def is_decider(roles: Iterable[str]) -> bool:
    """Deciders may approve, request changes, accept or reject submissions."""
    return has_any_role(roles, decider_roles())


def is_adder(roles: Iterable[str]) -> bool:
    """Adders may mark submissions as added."""
    return has_any_role(roles, adder_roles())


def is_god(roles: Iterable[str]) -> bool:
    """Return True for users with unrestricted powers."""
    return has_any_role(roles, god_roles())


def is_god_or_superuser(roles: Iterable[str], uid: int) -> bool:
    """Return True for god roles or the designated superuser account."""
    return is_god(roles) or uid == SUPERUSER_UID