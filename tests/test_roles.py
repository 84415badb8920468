"""
Tests for the role hierarchy and the privilege policy.
"""
import pytest

from apps.authentication.roles import (
    Action,
    POLICY,
    Role,
    has_privilege,
    is_platform_role,
    role_level,
)


class TestRoleLevels:
    """Roles form a strictly increasing hierarchy."""

    def test_levels_increase_towards_platform_owner(self):
        assert role_level(Role.PROFESSIONAL) == role_level(Role.RECEPTION)
        assert role_level(Role.RECEPTION) < role_level(Role.ADMIN)
        assert role_level(Role.ADMIN) < role_level(Role.PLATFORM_ASSISTANT)
        assert role_level(Role.PLATFORM_ASSISTANT) < role_level(Role.PLATFORM_OWNER)

    def test_unknown_role_has_level_zero(self):
        assert role_level('janitor') == 0

    def test_platform_roles(self):
        assert is_platform_role(Role.PLATFORM_OWNER)
        assert is_platform_role(Role.PLATFORM_ASSISTANT)
        assert not is_platform_role(Role.ADMIN)


class TestPolicy:
    """has_privilege follows the minimum-level table."""

    def test_every_action_has_a_policy_entry(self):
        assert set(POLICY) == set(Action)

    @pytest.mark.parametrize('role', [Role.PROFESSIONAL, Role.RECEPTION])
    def test_front_desk_can_book_and_checkout(self, role):
        assert has_privilege(role, Action.BOOK_APPOINTMENT)
        assert has_privilege(role, Action.CHECKOUT_APPOINTMENT)
        assert has_privilege(role, Action.OPEN_TICKET)

    @pytest.mark.parametrize('role', [Role.PROFESSIONAL, Role.RECEPTION])
    def test_front_desk_cannot_administer_salon(self, role):
        assert not has_privilege(role, Action.MANAGE_CATALOG)
        assert not has_privilege(role, Action.VIEW_FINANCE)
        assert not has_privilege(role, Action.MANAGE_USERS)

    def test_admin_stays_inside_the_salon(self):
        assert has_privilege(Role.ADMIN, Action.VIEW_FINANCE)
        assert has_privilege(Role.ADMIN, Action.VIEW_WAITING_LIST)
        assert not has_privilege(Role.ADMIN, Action.VIEW_ALL_TENANTS)
        assert not has_privilege(Role.ADMIN, Action.UPDATE_LICENSE)

    def test_only_owner_creates_platform_assistants(self):
        assert has_privilege(Role.PLATFORM_ASSISTANT, Action.ANSWER_TICKET)
        assert not has_privilege(Role.PLATFORM_ASSISTANT, Action.CREATE_PLATFORM_ASSISTANT)
        assert has_privilege(Role.PLATFORM_OWNER, Action.CREATE_PLATFORM_ASSISTANT)

    def test_unknown_values_are_denied(self):
        assert not has_privilege('janitor', Action.VIEW_SCHEDULE)
        assert not has_privilege(Role.PLATFORM_OWNER, 'launch_rockets')
