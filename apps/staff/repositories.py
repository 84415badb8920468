from apps.core.repositories import TenantScopedRepository

from .models import Professional


class ProfessionalRepository(TenantScopedRepository):
    model = Professional
    not_found_message = 'Professional not found.'

    def active(self):
        return self.scoped().filter(is_active=True)
