"""
Account roles and the central privilege policy.

Roles form a closed enumeration with strictly increasing privilege:
professional = reception < admin < platform_assistant < platform_owner.
Every authorization decision goes through ``has_privilege``.
"""
from django.db import models


class Role(models.TextChoices):
    PROFESSIONAL = 'professional', 'Professional'
    RECEPTION = 'reception', 'Reception'
    ADMIN = 'admin', 'Salon Admin'
    PLATFORM_ASSISTANT = 'platform_assistant', 'Platform Assistant'
    PLATFORM_OWNER = 'platform_owner', 'Platform Owner'


ROLE_LEVELS = {
    Role.PROFESSIONAL: 1,
    Role.RECEPTION: 1,
    Role.ADMIN: 2,
    Role.PLATFORM_ASSISTANT: 3,
    Role.PLATFORM_OWNER: 4,
}

PLATFORM_ROLES = frozenset({Role.PLATFORM_ASSISTANT.value, Role.PLATFORM_OWNER.value})
TENANT_ROLES = frozenset({Role.PROFESSIONAL.value, Role.RECEPTION.value, Role.ADMIN.value})


class Action(models.TextChoices):
    # Tenant day-to-day
    VIEW_SCHEDULE = 'view_schedule'
    BOOK_APPOINTMENT = 'book_appointment'
    CHECKOUT_APPOINTMENT = 'checkout_appointment'
    VIEW_CLIENTS = 'view_clients'
    OPEN_TICKET = 'open_ticket'

    # Tenant administration
    MANAGE_CATALOG = 'manage_catalog'
    MANAGE_USERS = 'manage_users'
    UPDATE_SALON = 'update_salon'
    VIEW_FINANCE = 'view_finance'
    RECORD_TRANSACTION = 'record_transaction'
    VIEW_WAITING_LIST = 'view_waiting_list'

    # Platform
    VIEW_ALL_TENANTS = 'view_all_tenants'
    UPDATE_LICENSE = 'update_license'
    CREATE_TENANT = 'create_tenant'
    ANSWER_TICKET = 'answer_ticket'
    SEND_BULK_EMAIL = 'send_bulk_email'
    CREATE_PLATFORM_ASSISTANT = 'create_platform_assistant'


# Minimum role level required for each action
POLICY = {
    Action.VIEW_SCHEDULE: 1,
    Action.BOOK_APPOINTMENT: 1,
    Action.CHECKOUT_APPOINTMENT: 1,
    Action.VIEW_CLIENTS: 1,
    Action.OPEN_TICKET: 1,
    Action.MANAGE_CATALOG: 2,
    Action.MANAGE_USERS: 2,
    Action.UPDATE_SALON: 2,
    Action.VIEW_FINANCE: 2,
    Action.RECORD_TRANSACTION: 2,
    Action.VIEW_WAITING_LIST: 2,
    Action.VIEW_ALL_TENANTS: 3,
    Action.UPDATE_LICENSE: 3,
    Action.CREATE_TENANT: 3,
    Action.ANSWER_TICKET: 3,
    Action.SEND_BULK_EMAIL: 3,
    Action.CREATE_PLATFORM_ASSISTANT: 4,
}


def role_level(role) -> int:
    """Return the privilege level of a role, 0 for unknown values."""
    try:
        return ROLE_LEVELS[Role(role)]
    except ValueError:
        return 0


def is_platform_role(role) -> bool:
    return role in PLATFORM_ROLES


def has_privilege(role, action) -> bool:
    """
    Check whether ``role`` may perform ``action``.

    Unknown roles and unknown actions are always denied.
    """
    try:
        required = POLICY[Action(action)]
    except ValueError:
        return False
    return role_level(role) >= required
