"""
Tests for plans, license issuing, activation and platform administration.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.core import mail
from django.utils import timezone

from apps.authentication.models import Account
from apps.core.exceptions import ValidationFailed
from apps.finance.models import Transaction
from apps.salons.models import Salon
from apps.subscriptions import subscription_service
from apps.subscriptions.models import License

from .conftest import PASSWORD


class TestPlans:

    def test_tier_of_annual_plan(self):
        assert subscription_service.plan_tier('gold_year') == 'gold'

    def test_periods(self):
        assert subscription_service.plan_period('trial') == timedelta(days=14)
        assert subscription_service.plan_period('standard_month') == timedelta(days=30)
        assert subscription_service.plan_period('premium_year') == timedelta(days=365)

    def test_features_by_tier(self):
        standard = subscription_service.plan_features('standard_month')
        premium = subscription_service.plan_features('premium_year')
        assert standard['report_level'] < premium['report_level']
        assert not standard['has_waiting_list']
        assert premium['has_waiting_list']

    def test_unknown_plan(self):
        with pytest.raises(ValidationFailed):
            subscription_service.plan_features('platinum_month')


@pytest.mark.django_db
class TestActivation:

    def test_renewal_extends_from_current_expiry(self, license):
        previous_expiry = license.valid_until

        license = subscription_service.activate_subscription(license, 'gold_month')

        assert license.plan == 'gold_month'
        assert license.valid_until == previous_expiry + timedelta(days=30)
        assert license.report_level == 2

    def test_activation_after_expiry_starts_now(self, license):
        now = timezone.now()
        license.status = 'expired'
        license.valid_until = now - timedelta(days=10)
        license.save()

        license = subscription_service.activate_subscription(license, 'standard_month', now=now)

        assert license.status == 'active'
        assert license.valid_until == now + timedelta(days=30)

    def test_payment_is_recorded(self, license):
        subscription_service.activate_subscription(license, 'premium_month', amount=Decimal('49.90'), payment_method='card')
        entry = Transaction.objects.get(salon_id=license.salon_id, type='license_payment')
        assert entry.amount == Decimal('49.90')
        assert entry.payment_method == 'card'

    def test_no_payment_without_amount(self, license):
        subscription_service.activate_subscription(license, 'premium_month')
        assert not Transaction.objects.filter(type='license_payment').exists()


@pytest.mark.django_db
class TestUpdateLicense:

    def test_plan_change_applies_features(self, license):
        license = subscription_service.update_license(license, plan='standard_month')
        assert license.report_level == 1
        assert not license.has_waiting_list

    def test_explicit_feature_wins_over_plan(self, license):
        license = subscription_service.update_license(license, plan='standard_month', has_waiting_list=True)
        assert license.has_waiting_list

    def test_unknown_field_is_rejected(self, license):
        with pytest.raises(ValidationFailed):
            subscription_service.update_license(license, key='HACKED')

    def test_summary(self, license):
        summary = subscription_service.license_summary(license)
        assert summary['plan'] == 'trial'
        assert summary['is_expired'] is False


@pytest.mark.django_db
class TestPlatformEndpoints:

    def test_assistant_lists_salons(self, as_account, platform_assistant, salon, admin):
        response = as_account(platform_assistant).get('/api/v1/platform/salons/')
        assert response.status_code == 200
        row = response.json()[0]
        assert row['license']['plan'] == 'trial'
        assert row['admin']['email'] == admin.email

    def test_salon_admin_is_forbidden(self, as_account, admin):
        response = as_account(admin).get('/api/v1/platform/salons/')
        assert response.status_code == 403

    def test_create_salon_with_plan(self, as_account, platform_assistant):
        response = as_account(platform_assistant).post('/api/v1/platform/salons/', {
            'name': 'Barber Central',
            'plan': 'gold_year',
            'admin_name': 'Bruno',
            'admin_email': 'bruno@central.test',
            'admin_password': PASSWORD,
        }, format='json')

        assert response.status_code == 201
        salon = Salon.objects.get(name='Barber Central')
        assert salon.license.plan == 'gold_year'
        admin = Account.objects.get(email='bruno@central.test')
        assert admin.salon_id == salon.id
        assert admin.created_by_id == platform_assistant.id

    def test_suspend_salon(self, as_account, platform_assistant, salon, admin):
        response = as_account(platform_assistant).post(
            f'/api/v1/platform/salons/{salon.id}/status/', {'status': 'suspended'}, format='json'
        )
        assert response.status_code == 200

        blocked = as_account(admin).get('/api/v1/clients/')
        assert blocked.status_code == 403
        assert blocked.json()['license_status'] == 'suspended'

    def test_activate_records_payment(self, as_account, platform_owner, salon):
        response = as_account(platform_owner).post(
            f'/api/v1/platform/salons/{salon.id}/activate/',
            {'plan': 'premium_month', 'amount': '59.00', 'payment_method': 'transfer'},
            format='json',
        )
        assert response.status_code == 200
        assert response.json()['plan'] == 'premium_month'

        stats = as_account(platform_owner).get('/api/v1/platform/stats/').json()
        assert Decimal(str(stats['license_revenue'])) == Decimal('59.00')
        assert stats['salons_by_status']['active'] == 1

    def test_patch_license(self, as_account, platform_assistant, salon):
        response = as_account(platform_assistant).patch(
            f'/api/v1/platform/salons/{salon.id}/license/', {'booking_limit': 120}, format='json'
        )
        assert response.status_code == 200
        assert License.objects.get(salon=salon).booking_limit == 120

    def test_only_owner_adds_assistants(self, as_account, platform_owner, platform_assistant):
        payload = {'name': 'New Helper', 'email': 'helper@platform.test', 'password': PASSWORD}

        denied = as_account(platform_assistant).post('/api/v1/platform/assistants/', payload, format='json')
        assert denied.status_code == 403

        created = as_account(platform_owner).post('/api/v1/platform/assistants/', payload, format='json')
        assert created.status_code == 201
        assert created.json()['role'] == 'platform_assistant'

    def test_bulk_email_reaches_salon_admins(self, as_account, platform_owner, admin, reception):
        response = as_account(platform_owner).post('/api/v1/platform/bulk-email/', {
            'subject': 'Scheduled maintenance',
            'body': 'The system will be offline on Sunday night.',
        }, format='json')

        assert response.status_code == 200
        assert response.json()['delivered'] == 1
        assert [message.to for message in mail.outbox] == [[admin.email]]
