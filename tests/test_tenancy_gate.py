"""
Tests for the tenancy and license gate.

The unit tests drive TenancyGate with in-memory collaborators and a fixed
clock; the API tests go through the middleware end to end.
"""
import uuid
from datetime import datetime, timedelta, timezone as dt_timezone
from types import SimpleNamespace

import pytest
from django.test import RequestFactory

from apps.authentication.roles import Role
from apps.authentication.services.tenancy_gate import TenancyGate
from apps.authentication.services.token_service import token_service
from apps.core.exceptions import (
    Forbidden,
    LicenseExpired,
    LicenseInactive,
    NoLicense,
    NotFound,
    Unauthenticated,
)
from apps.subscriptions.models import License

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=dt_timezone.utc)
MASTER_KEY = 'master-secret'
OWNER_EMAIL = 'owner@platform.test'


class FakeAccounts:
    def __init__(self, *accounts, salons=()):
        self.accounts = {str(account.id): account for account in accounts}
        self.salons = {str(salon_id) for salon_id in salons}

    def by_id(self, account_id):
        return self.accounts.get(str(account_id))

    def by_email(self, email):
        return next((a for a in self.accounts.values() if a.email == email), None)

    def salon_exists(self, salon_id):
        return str(salon_id) in self.salons


class FakeLicenses:
    def __init__(self, *licenses):
        self.licenses = {str(license.salon_id): license for license in licenses}
        self.writes = 0

    def for_salon(self, salon_id):
        return self.licenses.get(str(salon_id))

    def mark_expired(self, license):
        if license.status != 'active':
            return False
        license.status = 'expired'
        self.writes += 1
        return True


def make_account(role, salon_id=None, email=None, is_active=True):
    return SimpleNamespace(
        id=uuid.uuid4(),
        role=role,
        salon_id=salon_id,
        email=email or f'{role}@example.test',
        is_active=is_active,
    )


def make_license(salon_id, status='active', valid_until=NOW + timedelta(days=5)):
    return License(salon_id=salon_id, key='LIC-TEST', plan='gold_month', status=status, valid_until=valid_until)


def build_gate(accounts, licenses):
    return TenancyGate(
        accounts=accounts,
        licenses=licenses,
        master_key=MASTER_KEY,
        owner_email=OWNER_EMAIL,
        clock=lambda: NOW,
        public_paths=['/api/v1/public/', '/api/v1/auth/login/'],
        exempt_read_paths=['/api/v1/billing/', '/api/v1/auth/me/'],
    )


@pytest.fixture
def rf():
    return RequestFactory()


class TestPublicPaths:

    def test_public_prefix_is_not_gated(self):
        gate = build_gate(FakeAccounts(), FakeLicenses())
        assert gate.is_public('/api/v1/public/salons/')
        assert gate.is_public('/api/v1/auth/login/')

    def test_non_api_paths_are_not_gated(self):
        gate = build_gate(FakeAccounts(), FakeLicenses())
        assert gate.is_public('/admin/login/')

    def test_tenant_paths_are_gated(self):
        gate = build_gate(FakeAccounts(), FakeLicenses())
        assert not gate.is_public('/api/v1/appointments/')


class TestIdentity:

    def test_missing_headers_are_unauthenticated(self, rf):
        gate = build_gate(FakeAccounts(), FakeLicenses())
        with pytest.raises(Unauthenticated):
            gate.evaluate(rf.get('/api/v1/appointments/'))

    def test_unknown_account_reference_is_unauthenticated(self, rf):
        gate = build_gate(FakeAccounts(), FakeLicenses())
        request = rf.get('/api/v1/appointments/', HTTP_X_ACCOUNT_ID=str(uuid.uuid4()))
        with pytest.raises(Unauthenticated):
            gate.evaluate(request)

    def test_inactive_account_is_unauthenticated(self, rf):
        salon_id = uuid.uuid4()
        account = make_account(Role.ADMIN, salon_id, is_active=False)
        gate = build_gate(FakeAccounts(account), FakeLicenses(make_license(salon_id)))
        request = rf.get('/api/v1/appointments/', HTTP_X_ACCOUNT_ID=str(account.id))
        with pytest.raises(Unauthenticated):
            gate.evaluate(request)

    def test_master_key_resolves_platform_owner(self, rf):
        owner = make_account(Role.PLATFORM_OWNER, email=OWNER_EMAIL)
        gate = build_gate(FakeAccounts(owner), FakeLicenses())
        context = gate.evaluate(rf.get('/api/v1/platform/stats/', HTTP_X_MASTER_KEY=MASTER_KEY))
        assert context.account is owner
        assert context.tenant_id is None

    def test_wrong_master_key_is_unauthenticated(self, rf):
        owner = make_account(Role.PLATFORM_OWNER, email=OWNER_EMAIL)
        gate = build_gate(FakeAccounts(owner), FakeLicenses())
        with pytest.raises(Unauthenticated):
            gate.evaluate(rf.get('/api/v1/platform/stats/', HTTP_X_MASTER_KEY='guess'))

    def test_invalid_bearer_does_not_fall_back_to_account_header(self, rf):
        salon_id = uuid.uuid4()
        account = make_account(Role.ADMIN, salon_id)
        gate = build_gate(FakeAccounts(account), FakeLicenses(make_license(salon_id)))
        request = rf.get(
            '/api/v1/appointments/',
            HTTP_AUTHORIZATION='Bearer not-a-token',
            HTTP_X_ACCOUNT_ID=str(account.id),
        )
        with pytest.raises(Unauthenticated):
            gate.evaluate(request)

    def test_bearer_token_resolves_account(self, rf, settings):
        salon_id = uuid.uuid4()
        account = make_account(Role.RECEPTION, salon_id)
        gate = build_gate(FakeAccounts(account), FakeLicenses(make_license(salon_id)))
        token = token_service.issue(account)
        context = gate.evaluate(rf.get('/api/v1/appointments/', HTTP_AUTHORIZATION=f'Bearer {token}'))
        assert context.account is account
        assert context.tenant_id == salon_id


class TestPlatformRoles:
    """A platform role is never rejected on license grounds."""

    @pytest.mark.parametrize('status', ['suspended', 'expired'])
    def test_acting_as_salon_with_inactive_license(self, rf, status):
        salon_id = uuid.uuid4()
        owner = make_account(Role.PLATFORM_OWNER, email=OWNER_EMAIL)
        licenses = FakeLicenses(make_license(salon_id, status=status))
        gate = build_gate(FakeAccounts(owner, salons=[salon_id]), licenses)

        request = rf.get(
            '/api/v1/appointments/',
            HTTP_X_ACCOUNT_ID=str(owner.id),
            HTTP_X_ACT_AS_SALON=str(salon_id),
        )
        context = gate.evaluate(request)

        assert context.tenant_id == salon_id
        assert context.acting_as
        assert context.license_error is None

    def test_acting_as_salon_past_expiry_does_not_write(self, rf):
        salon_id = uuid.uuid4()
        assistant = make_account(Role.PLATFORM_ASSISTANT)
        licenses = FakeLicenses(make_license(salon_id, valid_until=NOW - timedelta(days=1)))
        gate = build_gate(FakeAccounts(assistant, salons=[salon_id]), licenses)

        request = rf.get(
            '/api/v1/appointments/',
            HTTP_X_ACCOUNT_ID=str(assistant.id),
            HTTP_X_ACT_AS_SALON=str(salon_id),
        )
        gate.evaluate(request)

        assert licenses.writes == 0

    def test_acting_as_unknown_salon_is_not_found(self, rf):
        owner = make_account(Role.PLATFORM_OWNER, email=OWNER_EMAIL)
        gate = build_gate(FakeAccounts(owner), FakeLicenses())
        request = rf.get(
            '/api/v1/appointments/',
            HTTP_X_ACCOUNT_ID=str(owner.id),
            HTTP_X_ACT_AS_SALON=str(uuid.uuid4()),
        )
        with pytest.raises(NotFound):
            gate.evaluate(request)


class TestTenantLicense:
    """A tenant role with an unusable license is rejected with the matching reason."""

    def _evaluate(self, rf, license, path='/api/v1/appointments/', method='get'):
        account = make_account(Role.ADMIN, license.salon_id if license else uuid.uuid4())
        licenses = FakeLicenses(license) if license else FakeLicenses()
        gate = build_gate(FakeAccounts(account), licenses)
        request = getattr(rf, method)(path, HTTP_X_ACCOUNT_ID=str(account.id))
        return gate, licenses, request

    def test_valid_license_passes(self, rf):
        license = make_license(uuid.uuid4())
        gate, _, request = self._evaluate(rf, license)
        context = gate.evaluate(request)
        assert context.license is license
        assert context.license_error is None

    def test_no_license(self, rf):
        gate, _, request = self._evaluate(rf, None)
        with pytest.raises(NoLicense):
            gate.evaluate(request)

    def test_suspended_license(self, rf):
        gate, _, request = self._evaluate(rf, make_license(uuid.uuid4(), status='suspended'))
        with pytest.raises(LicenseInactive) as excinfo:
            gate.evaluate(request)
        assert excinfo.value.extra['license_status'] == 'suspended'

    def test_expired_license(self, rf):
        gate, _, request = self._evaluate(rf, make_license(uuid.uuid4(), status='expired'))
        with pytest.raises(LicenseInactive) as excinfo:
            gate.evaluate(request)
        assert excinfo.value.extra['license_status'] == 'expired'

    def test_suspended_and_expired_have_different_messages(self, rf):
        messages = []
        for status in ('suspended', 'expired'):
            gate, _, request = self._evaluate(rf, make_license(uuid.uuid4(), status=status))
            with pytest.raises(LicenseInactive) as excinfo:
                gate.evaluate(request)
            messages.append(str(excinfo.value.detail))
        assert messages[0] != messages[1]

    def test_lazy_expiry_writes_once(self, rf):
        license = make_license(uuid.uuid4(), valid_until=NOW - timedelta(minutes=1))
        gate, licenses, request = self._evaluate(rf, license)

        with pytest.raises(LicenseExpired):
            gate.evaluate(request)
        assert licenses.writes == 1
        assert license.status == 'expired'

        with pytest.raises(LicenseInactive):
            gate.evaluate(request)
        assert licenses.writes == 1

    def test_exempt_read_path_records_license_error(self, rf):
        license = make_license(uuid.uuid4(), status='suspended')
        gate, _, request = self._evaluate(rf, license, path='/api/v1/billing/license/')
        context = gate.evaluate(request)
        assert isinstance(context.license_error, LicenseInactive)

    def test_exempt_path_still_rejects_writes(self, rf):
        license = make_license(uuid.uuid4(), status='suspended')
        gate, _, request = self._evaluate(rf, license, path='/api/v1/billing/license/', method='post')
        with pytest.raises(LicenseInactive):
            gate.evaluate(request)

    def test_tenant_role_without_salon_is_forbidden(self, rf):
        account = make_account(Role.RECEPTION, salon_id=None)
        gate = build_gate(FakeAccounts(account), FakeLicenses())
        with pytest.raises(Forbidden):
            gate.evaluate(rf.get('/api/v1/appointments/', HTTP_X_ACCOUNT_ID=str(account.id)))


@pytest.mark.django_db
class TestGateMiddleware:
    """Gate behaviour through the real middleware and database."""

    def test_unauthenticated_envelope(self, api_client):
        response = api_client.get('/api/v1/appointments/')
        assert response.status_code == 401
        body = response.json()
        assert body['error'] is True
        assert body['code'] == 'unauthenticated'

    def test_public_path_ignores_bad_credentials(self, api_client, salon):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')
        response = api_client.get('/api/v1/public/salons/')
        assert response.status_code == 200

    def test_lazy_expiry_persists_once(self, as_account, admin, license):
        License.objects.filter(pk=license.pk).update(valid_until=NOW - timedelta(days=1))
        client = as_account(admin)

        first = client.get('/api/v1/appointments/')
        assert first.status_code == 403
        assert first.json()['code'] == 'license_expired'

        license.refresh_from_db()
        assert license.status == 'expired'
        stamp = license.updated_at

        second = client.get('/api/v1/appointments/')
        assert second.status_code == 403
        assert second.json()['code'] == 'license_inactive'
        assert second.json()['license_status'] == 'expired'

        license.refresh_from_db()
        assert license.updated_at == stamp

    def test_suspended_license_can_still_read_billing(self, as_account, admin, license):
        License.objects.filter(pk=license.pk).update(status='suspended')
        response = as_account(admin).get('/api/v1/billing/license/')
        assert response.status_code == 200
        assert response.json()['license_error']['code'] == 'license_inactive'

    def test_owner_with_master_key_reads_suspended_salon(self, api_client, platform_owner, salon, license):
        License.objects.filter(pk=license.pk).update(status='suspended')
        api_client.credentials(HTTP_X_MASTER_KEY='test-master-key', HTTP_X_ACT_AS_SALON=str(salon.id))
        response = api_client.get('/api/v1/clients/')
        assert response.status_code == 200

    def test_platform_without_salon_on_tenant_endpoint(self, as_account, platform_owner):
        response = as_account(platform_owner).get('/api/v1/clients/')
        assert response.status_code == 400
        assert response.json()['code'] == 'validation_failed'
