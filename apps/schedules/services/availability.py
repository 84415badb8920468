"""
Slot allocation for a salon.

Provides:
- The hourly slot catalog with availability per day
- Professionals free at an exact start time
- Overlap validation for a professional's appointments

All reads go through tenant-scoped repositories, so an allocator only ever
sees one salon's data.
"""
import logging
from dataclasses import dataclass
from datetime import date, time
from typing import List, Optional
from uuid import UUID

from apps.core.exceptions import Conflict
from apps.core.messages import SCHEDULING
from apps.core.utils.constants import SLOT_CATALOG
from apps.schedules.utils.time_utils import format_time, intervals_conflict, parse_time

logger = logging.getLogger(__name__)


@dataclass
class SlotAvailability:
    """A catalog slot with its booking load."""
    time: str
    booked: int
    capacity: int

    @property
    def is_available(self) -> bool:
        return self.booked < self.capacity


class SlotAllocator:
    """
    Availability and conflict checks for one salon.

    Example usage:
        allocator = SlotAllocator(
            appointments=AppointmentRepository(salon_id),
            professionals=ProfessionalRepository(salon_id),
        )
        allocator.available_slots(date(2024, 12, 10))
    """

    def __init__(self, appointments, professionals, catalog: Optional[List[str]] = None):
        """
        Args:
            appointments: AppointmentRepository bound to the salon
            professionals: ProfessionalRepository bound to the salon
            catalog: slot start times, defaults to SLOT_CATALOG
        """
        self.appointments = appointments
        self.professionals = professionals
        self.catalog = list(catalog if catalog is not None else SLOT_CATALOG)

    def slot_load(self, day: date) -> List[SlotAvailability]:
        """Booking load for every catalog slot on ``day``."""
        capacity = self.professionals.active().count()
        starts = [
            format_time(start)
            for start in self.appointments.active_on_day(day).values_list('start_time', flat=True)
        ]
        return [
            SlotAvailability(time=slot, booked=starts.count(slot), capacity=capacity)
            for slot in self.catalog
        ]

    def available_slots(self, day: date) -> List[str]:
        """
        Catalog slots with fewer appointments starting at them than active
        professionals. With no active professionals nothing is available.
        """
        return [slot.time for slot in self.slot_load(day) if slot.is_available]

    def available_professionals(self, day: date, start_time) -> list:
        """
        Active professionals without a non-cancelled appointment starting
        exactly at ``start_time`` on ``day``.

        Only exact start times are compared; an appointment that started
        earlier and is still running does not exclude the professional.
        """
        start_time = parse_time(start_time)
        busy = set(
            self.appointments.active_on_day(day)
            .filter(start_time=start_time, professional__isnull=False)
            .values_list('professional_id', flat=True)
        )
        return [
            professional
            for professional in self.professionals.active()
            if professional.id not in busy
        ]

    def check_conflict(
        self,
        professional_id: UUID,
        day: date,
        start: time,
        end: time,
        exclude_id: Optional[UUID] = None
    ) -> None:
        """
        Raise Conflict when [start, end) overlaps one of the professional's
        non-cancelled appointments on ``day``.

        Args:
            exclude_id: appointment to ignore (the one being rescheduled)
        """
        start, end = parse_time(start), parse_time(end)
        existing = self.appointments.active_for_professional(professional_id, day, exclude_id=exclude_id)

        for appointment in existing:
            if intervals_conflict(start, end, appointment.start_time, appointment.end_time):
                name = appointment.professional.name if appointment.professional else 'The professional'
                logger.info(
                    f"Booking conflict for professional {professional_id} on {day}: "
                    f"{format_time(start)}-{format_time(end)} overlaps appointment {appointment.id}"
                )
                raise Conflict(
                    SCHEDULING['professional_busy'].format(
                        professional=name,
                        start=format_time(appointment.start_time),
                        end=format_time(appointment.end_time),
                    ),
                    conflicting_appointment=str(appointment.id)
                )
