from apps.core.repositories import TenantScopedRepository

from .models import Client


class ClientRepository(TenantScopedRepository):
    model = Client
    not_found_message = 'Client not found.'

    def by_loyalty_id(self, loyalty_id):
        if not loyalty_id:
            return None
        return self.scoped().filter(loyalty_id=loyalty_id).first()

    def by_phone(self, phone):
        if not phone:
            return None
        return self.scoped().filter(phone=phone).order_by('created_at').first()
