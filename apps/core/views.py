"""
Base views for tenant-scoped resources
"""
from rest_framework import viewsets

from apps.core.permissions import HasPrivilege
from apps.core.tenancy import current_tenant_id


class TenantScopedViewSet(viewsets.ModelViewSet):
    """
    ModelViewSet whose queryset always comes from a tenant-scoped repository.

    Subclasses set ``repository_class`` plus the privilege needed to read
    (``read_action``) and to write (``write_action``). ``destroy_action``
    overrides the write privilege for deletes and ``action_privileges`` maps
    extra viewset actions to their own privilege.
    """
    repository_class = None
    read_action = None
    write_action = None
    destroy_action = None
    action_privileges = {}

    def get_repository(self):
        return self.repository_class(current_tenant_id(self.request))

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return self.repository_class.model.objects.none()
        return self.get_repository().all()

    def get_permissions(self):
        if self.action in self.action_privileges:
            required = self.action_privileges[self.action]
        elif self.action in ('list', 'retrieve'):
            required = self.read_action
        elif self.action == 'destroy' and self.destroy_action:
            required = self.destroy_action
        else:
            required = self.write_action
        return [HasPrivilege.for_action(required)()]

    def perform_create(self, serializer):
        serializer.save(salon_id=current_tenant_id(self.request))
