"""
Tests for slot availability, professional availability and conflict checks.
"""
from datetime import time

import pytest

from apps.bookings.repositories import AppointmentRepository
from apps.clients.models import Client
from apps.core.exceptions import Conflict
from apps.core.utils.constants import SLOT_CATALOG
from apps.schedules.services.availability import SlotAllocator
from apps.staff.models import Professional
from apps.staff.repositories import ProfessionalRepository


@pytest.fixture
def allocator(salon):
    return SlotAllocator(
        appointments=AppointmentRepository(salon.id),
        professionals=ProfessionalRepository(salon.id),
    )


@pytest.mark.django_db
class TestAvailableSlots:

    def test_catalog_is_hourly_from_nine_to_seven(self):
        assert SLOT_CATALOG[0] == '09:00'
        assert SLOT_CATALOG[-1] == '19:00'
        assert len(SLOT_CATALOG) == 11

    def test_empty_day_with_staff_is_fully_available(self, allocator, professionals, tomorrow):
        assert allocator.available_slots(tomorrow) == SLOT_CATALOG

    def test_no_active_staff_means_no_slots(self, allocator, salon, tomorrow):
        Professional.objects.create(salon=salon, name='On leave', is_active=False)
        assert allocator.available_slots(tomorrow) == []

    def test_full_slot_is_removed(self, allocator, professionals, make_appointment, tomorrow):
        make_appointment(tomorrow, time(10, 0), time(10, 30), professionals[0])
        make_appointment(tomorrow, time(10, 0), time(10, 30), professionals[1])

        slots = allocator.available_slots(tomorrow)

        assert '10:00' not in slots
        assert '09:00' in slots
        assert '11:00' in slots

    def test_partially_booked_slot_stays_available(self, allocator, professionals, make_appointment, tomorrow):
        make_appointment(tomorrow, time(10, 0), time(10, 30), professionals[0])
        assert '10:00' in allocator.available_slots(tomorrow)

    def test_cancelled_appointments_free_the_slot(self, allocator, professionals, make_appointment, tomorrow):
        make_appointment(tomorrow, time(10, 0), time(10, 30), professionals[0])
        make_appointment(tomorrow, time(10, 0), time(10, 30), professionals[1], status='cancelled')
        assert '10:00' in allocator.available_slots(tomorrow)

    def test_other_salons_do_not_count(self, allocator, professionals, other_salon, tomorrow):
        stranger = Client.objects.create(salon=other_salon, name='Stranger')
        repo = AppointmentRepository(other_salon.id)
        for _ in range(3):
            repo.create(client=stranger, date=tomorrow, start_time=time(10, 0), end_time=time(11, 0))

        assert '10:00' in allocator.available_slots(tomorrow)

    def test_slot_load_reports_capacity(self, allocator, professionals, make_appointment, tomorrow):
        make_appointment(tomorrow, time(9, 0), time(9, 30), professionals[0])
        load = {slot.time: slot for slot in allocator.slot_load(tomorrow)}
        assert load['09:00'].booked == 1
        assert load['09:00'].capacity == 2
        assert load['09:00'].is_available


@pytest.mark.django_db
class TestAvailableProfessionals:
    """Professional availability compares exact start times only."""

    def test_booked_professional_is_excluded_at_that_start(self, allocator, professionals, make_appointment, tomorrow):
        carla, diego = professionals
        make_appointment(tomorrow, time(14, 0), time(15, 0), carla)

        available = allocator.available_professionals(tomorrow, '14:00')

        assert [p.id for p in available] == [diego.id]

    def test_booked_professional_is_included_at_other_start(self, allocator, professionals, make_appointment, tomorrow):
        carla, _ = professionals
        make_appointment(tomorrow, time(14, 0), time(15, 0), carla)

        available = allocator.available_professionals(tomorrow, '14:30')

        assert carla.id in [p.id for p in available]

    def test_inactive_professionals_are_never_offered(self, allocator, professionals, salon, tomorrow):
        hidden = Professional.objects.create(salon=salon, name='Former', is_active=False)
        available = allocator.available_professionals(tomorrow, '10:00')
        assert hidden.id not in [p.id for p in available]


@pytest.mark.django_db
class TestCheckConflict:
    """Existing appointment for Carla is [10:00, 10:30)."""

    @pytest.fixture
    def booked(self, professionals, make_appointment, tomorrow):
        return make_appointment(tomorrow, time(10, 0), time(10, 30), professionals[0])

    def test_overlapping_start_conflicts(self, allocator, professionals, booked, tomorrow):
        with pytest.raises(Conflict) as excinfo:
            allocator.check_conflict(professionals[0].id, tomorrow, time(10, 15), time(10, 45))
        assert excinfo.value.extra['conflicting_appointment'] == str(booked.id)

    def test_back_to_back_is_accepted(self, allocator, professionals, booked, tomorrow):
        allocator.check_conflict(professionals[0].id, tomorrow, time(10, 30), time(11, 0))

    def test_other_professional_is_free(self, allocator, professionals, booked, tomorrow):
        allocator.check_conflict(professionals[1].id, tomorrow, time(10, 0), time(10, 30))

    def test_excluded_appointment_is_ignored(self, allocator, professionals, booked, tomorrow):
        allocator.check_conflict(professionals[0].id, tomorrow, time(10, 0), time(10, 30), exclude_id=booked.id)

    def test_cancelled_appointments_do_not_conflict(self, allocator, professionals, booked, tomorrow):
        AppointmentRepository(booked.salon_id).update(booked, status='cancelled')
        allocator.check_conflict(professionals[0].id, tomorrow, time(10, 0), time(10, 30))
