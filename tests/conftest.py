"""
Shared fixtures: a licensed salon with staff, catalogue and clients, plus
platform accounts and an API client that can act as any account.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.authentication.models import Account
from apps.authentication.roles import Role
from apps.bookings.repositories import AppointmentRepository
from apps.clients.models import Client
from apps.salons.services import create_salon
from apps.services.models import Service
from apps.staff.models import Professional
from apps.subscriptions.subscription_service import create_trial_license, issue_license

PASSWORD = 'correct-horse-42'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def as_account(api_client):
    """Return a helper that authenticates ``api_client`` as an account."""
    def _as(account, act_as_salon=None):
        headers = {'HTTP_X_ACCOUNT_ID': str(account.id)}
        if act_as_salon is not None:
            headers['HTTP_X_ACT_AS_SALON'] = str(act_as_salon.id)
        api_client.credentials(**headers)
        return api_client
    return _as


@pytest.fixture
def salon(db):
    salon = create_salon('Studio Bella', phone='555-0100', email='hello@bella.test')
    create_trial_license(salon)
    return salon


@pytest.fixture
def license(salon):
    return salon.license


@pytest.fixture
def other_salon(db):
    salon = create_salon('Corte Norte')
    issue_license(salon, 'standard_month')
    return salon


@pytest.fixture
def admin(salon):
    return Account.objects.create_user(
        email='admin@bella.test', password=PASSWORD, name='Ana Admin', role=Role.ADMIN, salon=salon
    )


@pytest.fixture
def reception(salon):
    return Account.objects.create_user(
        email='desk@bella.test', password=PASSWORD, name='Rita Reception', role=Role.RECEPTION, salon=salon
    )


@pytest.fixture
def platform_owner(db, settings):
    return Account.objects.create_superuser(
        email=settings.PLATFORM_OWNER_EMAIL, password=PASSWORD, name='Olga Owner'
    )


@pytest.fixture
def platform_assistant(platform_owner):
    return Account.objects.create_user(
        email='assistant@platform.test',
        password=PASSWORD,
        name='Paul Assistant',
        role=Role.PLATFORM_ASSISTANT,
        created_by=platform_owner,
    )


@pytest.fixture
def professionals(salon):
    return [
        Professional.objects.create(salon=salon, name='Carla', specialty='Color'),
        Professional.objects.create(salon=salon, name='Diego', specialty='Cuts'),
    ]


@pytest.fixture
def service(salon):
    return Service.objects.create(salon=salon, name='Haircut', price=Decimal('25.00'), duration_minutes=30)


@pytest.fixture
def client_record(salon):
    return Client.objects.create(salon=salon, name='Maria Lopez', phone='555-1234', email='maria@mail.test')


@pytest.fixture
def tomorrow():
    return timezone.localdate() + timedelta(days=1)


@pytest.fixture
def make_appointment(salon, client_record):
    """Create an appointment directly through the salon's repository."""
    def _make(day, start, end, professional=None, status='scheduled', service=None, price=Decimal('0')):
        return AppointmentRepository(salon.id).create(
            client=client_record,
            service=service,
            professional=professional,
            date=day,
            start_time=start,
            end_time=end,
            status=status,
            price=price,
        )
    return _make
