import pytest

from fpsubmit import roles


def test_has_any_role_matches():
    assert roles.has_any_role(["Curator", "Hunter"], ["Hunter"]) is True


def test_has_any_role_no_match_and_empty():
    assert roles.has_any_role(["Curator"], ["Moderator"]) is False
    assert roles.has_any_role([], ["Moderator"]) is False
    assert roles.has_any_role(["Moderator"], []) is False


@pytest.mark.parametrize("role", roles.staff_roles())
def test_every_staff_role_is_staff_and_not_in_audit(role):
    assert roles.is_staff([role]) is True
    assert roles.is_in_audit([role]) is False


def test_trial_curator_is_not_in_audit_nor_staff():
    assert roles.is_trial_curator(["Trial Curator"]) is True
    assert roles.is_staff(["Trial Curator"]) is False
    assert roles.is_in_audit(["Trial Curator"]) is False


def test_no_roles_means_audit():
    assert roles.is_in_audit([]) is True
    assert roles.is_in_audit(["Trial Editor"]) is True


def test_trial_editor():
    assert roles.is_trial_editor(["Trial Editor"]) is True
    assert roles.is_trial_editor(["Trial Curator"]) is False


def test_deleter_and_freezer():
    assert roles.is_deleter(["Moderator"]) is True
    assert roles.is_deleter(["Curator"]) is False
    assert roles.is_freezer(["Administrator"]) is True
    assert roles.is_freezer(["Tester"]) is False


def test_decider_and_adder():
    assert roles.is_decider(["Tester"]) is True
    assert roles.is_decider(["Hacker"]) is False
    assert roles.is_adder(["Moderator"]) is True
    assert roles.is_adder(["Curator"]) is False


def test_god():
    assert roles.is_god(["The D"]) is True
    assert roles.is_god(["Administrator"]) is False


def test_god_or_superuser():
    assert roles.is_god_or_superuser([], 689080719460663414) is True
    assert roles.is_god_or_superuser(["The D"], 1) is True
    assert roles.is_god_or_superuser(["Administrator"], 1) is False


def test_role_lists_are_subsets_of_staff():
    staff = set(roles.staff_roles())
    for group in (roles.deleter_roles(), roles.freezer_roles(), roles.decider_roles(),
                  roles.adder_roles(), roles.god_roles()):
        assert set(group) <= staff
    assert not set(roles.trial_curator_roles()) & staff


def test_checks_accept_generators():
    assert roles.is_in_audit(r for r in ["Curator"]) is False