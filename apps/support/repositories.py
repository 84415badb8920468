from apps.core.repositories import TenantScopedRepository

from .models import Ticket


class TicketRepository(TenantScopedRepository):
    model = Ticket
    not_found_message = 'Ticket not found.'

    def scoped(self):
        return super().scoped().select_related('opened_by')
