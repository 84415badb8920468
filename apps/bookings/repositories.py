from apps.core.repositories import TenantScopedRepository
from apps.core.utils.constants import APPOINTMENT_STATUS_CANCELLED

from .models import Appointment


class AppointmentRepository(TenantScopedRepository):
    model = Appointment
    not_found_message = 'Appointment not found.'

    def scoped(self):
        return super().scoped().select_related('client', 'service', 'professional')

    def on_day(self, day):
        return self.scoped().filter(date=day)

    def active_on_day(self, day):
        """Non-cancelled appointments for the day."""
        return self.on_day(day).exclude(status=APPOINTMENT_STATUS_CANCELLED)

    def active_for_professional(self, professional_id, day, exclude_id=None):
        queryset = self.active_on_day(day).filter(professional_id=professional_id)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset
