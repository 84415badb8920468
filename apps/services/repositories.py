from apps.core.repositories import TenantScopedRepository

from .models import Service


class ServiceRepository(TenantScopedRepository):
    model = Service
    not_found_message = 'Service not found.'

    def active(self):
        return self.scoped().filter(is_active=True)
