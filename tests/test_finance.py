"""
Tests for the ledger and the report levels unlocked by each plan.
"""
from datetime import time
from decimal import Decimal
from types import SimpleNamespace

import pytest
from django.utils import timezone

from apps.bookings.repositories import AppointmentRepository
from apps.core.exceptions import Forbidden, ValidationFailed
from apps.finance.models import Transaction
from apps.finance.repositories import TransactionRepository
from apps.finance.services.reports import ReportService
from apps.subscriptions.subscription_service import update_license


@pytest.fixture
def ledger(salon):
    today = timezone.localdate()
    repo = TransactionRepository(salon.id)
    repo.create(description='Haircut', amount=Decimal('25.00'), type='income', category='Services',
                payment_method='cash', date=today)
    repo.create(description='Color', amount=Decimal('60.00'), type='income', category='Services',
                payment_method='card', date=today)
    repo.create(description='Shampoo stock', amount=Decimal('15.00'), type='expense', category='Supplies',
                payment_method='cash', date=today)
    return repo


class TestReportGate:

    @pytest.mark.parametrize('kind, level', [
        ('daily_flow', 1),
        ('sales_by_service', 2),
        ('by_professional', 2),
        ('overview', 3),
    ])
    def test_minimum_level_is_enough(self, kind, level):
        ReportService.ensure_allowed(kind, SimpleNamespace(report_level=level))

    @pytest.mark.parametrize('kind, level', [
        ('sales_by_service', 1),
        ('by_professional', 1),
        ('overview', 2),
    ])
    def test_lower_level_is_forbidden(self, kind, level):
        with pytest.raises(Forbidden):
            ReportService.ensure_allowed(kind, SimpleNamespace(report_level=level))

    def test_unknown_report(self):
        with pytest.raises(ValidationFailed):
            ReportService.ensure_allowed('horoscope', None)


@pytest.mark.django_db
class TestReports:

    def test_daily_flow(self, salon, ledger):
        report = ReportService(ledger, AppointmentRepository(salon.id)).build('daily_flow')
        assert report['total_income'] == Decimal('85.00')
        assert report['total_expense'] == Decimal('15.00')
        assert report['rows'][0]['balance'] == Decimal('70.00')

    def test_overview_breakdowns(self, salon, ledger):
        report = ReportService(ledger, AppointmentRepository(salon.id)).build('overview')
        methods = {row['payment_method']: row['total'] for row in report['by_payment_method']}
        assert methods == {'card': Decimal('60.00'), 'cash': Decimal('25.00')}
        assert report['balance'] == Decimal('70.00')

    def test_sales_by_service_counts_completed_only(self, salon, service, professionals, make_appointment):
        today = timezone.localdate()
        make_appointment(today, time(9, 0), time(9, 30), professionals[0], status='completed',
                         service=service, price=Decimal('25.00'))
        make_appointment(today, time(10, 0), time(10, 30), professionals[0], status='scheduled',
                         service=service, price=Decimal('25.00'))

        report = ReportService(TransactionRepository(salon.id), AppointmentRepository(salon.id)).build('sales_by_service')

        assert report['rows'] == [{
            'service_id': service.id,
            'service': 'Haircut',
            'appointments': 1,
            'revenue': Decimal('25.00'),
        }]

    def test_other_salons_are_excluded(self, salon, other_salon, ledger):
        TransactionRepository(other_salon.id).create(description='Elsewhere', amount=Decimal('999'), type='income')
        report = ReportService(ledger, AppointmentRepository(salon.id)).build('daily_flow')
        assert report['total_income'] == Decimal('85.00')


@pytest.mark.django_db
class TestFinanceEndpoints:

    def test_admin_records_expense(self, as_account, admin):
        response = as_account(admin).post('/api/v1/finance/transactions/', {
            'description': 'Towels',
            'amount': '40.00',
            'type': 'expense',
            'category': 'Supplies',
            'payment_method': 'card',
        }, format='json')
        assert response.status_code == 201
        assert Transaction.objects.get(description='Towels').salon_id == admin.salon_id

    def test_license_payments_cannot_be_recorded_by_salons(self, as_account, admin):
        response = as_account(admin).post('/api/v1/finance/transactions/', {
            'description': 'Fake renewal',
            'amount': '10.00',
            'type': 'license_payment',
        }, format='json')
        assert response.status_code == 400

    def test_ledger_is_append_only(self, as_account, admin, ledger):
        entry = ledger.all().first()
        response = as_account(admin).delete(f'/api/v1/finance/transactions/{entry.id}/')
        assert response.status_code == 405

    def test_reception_cannot_see_finance(self, as_account, reception):
        response = as_account(reception).get('/api/v1/finance/transactions/')
        assert response.status_code == 403

    def test_standard_plan_gets_basic_reports_only(self, as_account, admin, license, ledger):
        update_license(license, plan='standard_month')
        client = as_account(admin)

        assert client.get('/api/v1/finance/reports/daily_flow/').status_code == 200

        denied = client.get('/api/v1/finance/reports/overview/')
        assert denied.status_code == 403
        assert denied.json()['required_level'] == 3
        assert denied.json()['report_level'] == 1

    def test_report_with_period(self, as_account, admin, ledger):
        today = timezone.localdate().isoformat()
        response = as_account(admin).get('/api/v1/finance/reports/overview/', {'start': today, 'end': today})
        assert response.status_code == 200
        assert response.json()['start'] == today
