"""
Custom permissions for the salon API
"""
from rest_framework import permissions

from apps.authentication.roles import has_privilege


class HasPrivilege(permissions.BasePermission):
    """
    Grant access when the account's role satisfies the policy for ``action``.

    Build concrete permissions with ``HasPrivilege.for_action(Action.X)``.
    """
    action = None
    code = 'forbidden'
    message = "Your role does not allow this action"

    def has_permission(self, request, view):
        account = request.user
        return bool(
            account and
            account.is_authenticated and
            has_privilege(account.role, self.action)
        )

    @classmethod
    def for_action(cls, action):
        return type(
            f'HasPrivilege_{action}',
            (cls,),
            {'action': action, 'message': f"Your role does not allow '{action}'"}
        )

