"""
Booking flows.

- book_public: online booking by a client (no conflict pre-validation)
- schedule: staff-facing booking with overlap validation
- update / cancel: reschedule, notes and cancellation
- checkout: completes an appointment and records the income
"""
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.core.exceptions import Conflict, ValidationFailed
from apps.core.messages import SCHEDULING
from apps.core.utils.constants import (
    APPOINTMENT_SOURCE_INTERNAL,
    APPOINTMENT_SOURCE_PUBLIC,
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_SCHEDULED,
    DEFAULT_SERVICE_DURATION_MINUTES,
    DEFAULT_SERVICE_PRICE,
    TRANSACTION_TYPE_INCOME,
)
from apps.bookings.repositories import AppointmentRepository
from apps.clients.models import Client
from apps.clients.repositories import ClientRepository
from apps.finance.repositories import TransactionRepository
from apps.notifications.services.email_service import EmailNotificationService
from apps.schedules.services.availability import SlotAllocator
from apps.schedules.utils.time_utils import CrossesMidnight, compute_end_time, parse_time, to_minutes
from apps.services.repositories import ServiceRepository
from apps.staff.repositories import ProfessionalRepository

logger = logging.getLogger(__name__)

CHECKOUT_CATEGORY = 'Services'


@dataclass
class ClientData:
    """Client details submitted with an online booking."""
    name: str
    phone: str = ''
    email: str = ''
    loyalty_id: str = ''


class BookingService:
    """
    Booking operations for one salon.

    Build it with ``BookingService.for_tenant(salon_id)`` or inject the
    repositories and notifier directly.
    """

    def __init__(self, appointments, clients, services, professionals, transactions, notifier=EmailNotificationService):
        self.appointments = appointments
        self.clients = clients
        self.services = services
        self.professionals = professionals
        self.transactions = transactions
        self.notifier = notifier
        self.allocator = SlotAllocator(appointments, professionals)

    @classmethod
    def for_tenant(cls, tenant_id, notifier=EmailNotificationService):
        return cls(
            appointments=AppointmentRepository(tenant_id),
            clients=ClientRepository(tenant_id),
            services=ServiceRepository(tenant_id),
            professionals=ProfessionalRepository(tenant_id),
            transactions=TransactionRepository(tenant_id),
            notifier=notifier,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _service_terms(self, service_id):
        """
        Return (service, duration, price). Unknown services fall back to
        60 minutes at price 0.
        """
        service = self.services.find(service_id)
        if service is None:
            if service_id:
                logger.warning(
                    f"Service {service_id} not found for salon {self.services.tenant_id}; "
                    f"using {DEFAULT_SERVICE_DURATION_MINUTES} min at price {DEFAULT_SERVICE_PRICE}"
                )
            return None, DEFAULT_SERVICE_DURATION_MINUTES, Decimal(DEFAULT_SERVICE_PRICE)
        return service, service.duration_minutes, service.price

    def _professional(self, professional_id):
        if not professional_id:
            return None
        return self.professionals.get(professional_id)

    @staticmethod
    def _times(start_time, duration):
        try:
            start = parse_time(start_time)
            return start, compute_end_time(start, duration)
        except CrossesMidnight:
            raise ValidationFailed(SCHEDULING['crosses_midnight'])
        except ValueError as e:
            raise ValidationFailed(f"Invalid start time: {e}")

    def upsert_client(self, data: ClientData):
        """
        Find the booking client inside this salon: by loyalty id, then by
        phone. Otherwise create a new one.
        """
        client = self.clients.by_loyalty_id(data.loyalty_id) or self.clients.by_phone(data.phone)
        if client is not None:
            return client

        fields = {'name': data.name, 'phone': data.phone, 'email': data.email}
        # A loyalty id already held in another salon is not reused here
        if data.loyalty_id and not Client.objects.filter(loyalty_id=data.loyalty_id).exists():
            fields['loyalty_id'] = data.loyalty_id
        return self.clients.create(**fields)

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    def book_public(
        self,
        client_data: ClientData,
        service_id: Optional[UUID],
        day: date,
        start_time,
        professional_id: Optional[UUID] = None,
        notes: str = '',
    ):
        """
        Online booking. Client upsert and appointment creation commit or
        roll back together; the confirmation email goes out after commit.
        """
        service, duration, price = self._service_terms(service_id)
        professional = self._professional(professional_id)
        start, end = self._times(start_time, duration)

        try:
            with transaction.atomic():
                client = self.upsert_client(client_data)
                appointment = self.appointments.create(
                    client=client,
                    service=service,
                    professional=professional,
                    date=day,
                    start_time=start,
                    end_time=end,
                    price=price,
                    notes=notes,
                    source=APPOINTMENT_SOURCE_PUBLIC,
                )
                transaction.on_commit(lambda: self.notifier.send_booking_confirmation(appointment))
        except IntegrityError as e:
            logger.warning(f"Public booking rolled back for salon {self.appointments.tenant_id}: {e}")
            raise Conflict("This booking could not be saved because it conflicts with existing data. Please try again.")

        logger.info(f"Public booking {appointment.id} for client {client.loyalty_id} on {day} at {start}")
        return appointment

    def schedule(
        self,
        client_id: UUID,
        service_id: Optional[UUID],
        day: date,
        start_time,
        professional_id: Optional[UUID] = None,
        notes: str = '',
    ):
        """Staff-facing booking with conflict validation."""
        client = self.clients.get(client_id)
        service, duration, price = self._service_terms(service_id)
        professional = self._professional(professional_id)
        start, end = self._times(start_time, duration)

        if professional is not None:
            self.allocator.check_conflict(professional.id, day, start, end)

        appointment = self.appointments.create(
            client=client,
            service=service,
            professional=professional,
            date=day,
            start_time=start,
            end_time=end,
            price=price,
            notes=notes,
            source=APPOINTMENT_SOURCE_INTERNAL,
        )
        logger.info(f"Scheduled appointment {appointment.id} on {day} at {start}")
        return appointment

    def update(self, appointment_id, **changes):
        """
        Reschedule or edit an appointment.

        Accepted keys: date, start_time, professional_id, service_id, notes,
        status (scheduled or cancelled only).
        """
        appointment = self.appointments.get(appointment_id)
        if appointment.status == APPOINTMENT_STATUS_COMPLETED:
            raise Conflict("Completed appointments cannot be changed.")

        status = changes.get('status')
        if status is not None and status not in (APPOINTMENT_STATUS_SCHEDULED, APPOINTMENT_STATUS_CANCELLED):
            raise ValidationFailed("Appointments are completed through checkout.")
        if status == APPOINTMENT_STATUS_CANCELLED:
            self._ensure_cancellable(appointment)

        fields = {}
        if 'service_id' in changes:
            service, duration, price = self._service_terms(changes['service_id'])
            fields.update(service=service, price=price)
        else:
            duration = self._duration_of(appointment)

        if 'professional_id' in changes:
            fields['professional'] = self._professional(changes['professional_id'])
        if 'notes' in changes:
            fields['notes'] = changes['notes']
        if status is not None:
            fields['status'] = status

        day = changes.get('date', appointment.date)
        start_time = changes.get('start_time', appointment.start_time)
        start, end = self._times(start_time, duration)
        fields.update(date=day, start_time=start, end_time=end)

        professional = fields.get('professional', appointment.professional)
        final_status = fields.get('status', appointment.status)
        if professional is not None and final_status != APPOINTMENT_STATUS_CANCELLED:
            self.allocator.check_conflict(professional.id, day, start, end, exclude_id=appointment.id)

        return self.appointments.update(appointment, **fields)

    @staticmethod
    def _duration_of(appointment) -> int:
        return to_minutes(appointment.end_time) - to_minutes(appointment.start_time)

    @staticmethod
    def _ensure_cancellable(appointment):
        if appointment.status != APPOINTMENT_STATUS_SCHEDULED:
            raise Conflict(f"Only scheduled appointments can be cancelled (status is {appointment.status}).")

    def cancel(self, appointment_id):
        appointment = self.appointments.get(appointment_id)
        self._ensure_cancellable(appointment)
        self.appointments.update(appointment, status=APPOINTMENT_STATUS_CANCELLED)
        logger.info(f"Cancelled appointment {appointment.id}")
        return appointment

    @transaction.atomic
    def checkout(self, appointment_id, payment_method: str = 'cash', amount=None):
        """
        Complete a scheduled appointment and append the income transaction.

        Args:
            amount: charged amount, defaults to the appointment's price snapshot

        Returns:
            (appointment, transaction)
        """
        appointment = self.appointments.get(appointment_id)
        if appointment.status != APPOINTMENT_STATUS_SCHEDULED:
            raise Conflict(f"Only scheduled appointments can be checked out (status is {appointment.status}).")

        self.appointments.update(appointment, status=APPOINTMENT_STATUS_COMPLETED)

        service_name = appointment.service.name if appointment.service else 'Service'
        entry = self.transactions.create(
            description=f"{service_name} - {appointment.client.name}",
            amount=amount if amount is not None else appointment.price,
            type=TRANSACTION_TYPE_INCOME,
            category=CHECKOUT_CATEGORY,
            payment_method=payment_method,
            date=timezone.localdate(),
            appointment=appointment,
        )
        logger.info(f"Checked out appointment {appointment.id}: {entry.amount} via {payment_method}")
        return appointment, entry
