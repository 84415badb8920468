"""
Financial reports.

Each report has a minimum license report level:
- daily_flow (1): income, expenses and balance per day
- sales_by_service (2): completed appointments and revenue per service
- by_professional (2): completed appointments and revenue per professional
- overview (3): totals plus breakdown by category and payment method
"""
import logging
from datetime import date, timedelta
from decimal import Decimal

from django.db.models import Count, Q, Sum
from django.utils import timezone

from apps.core.exceptions import Forbidden, ValidationFailed
from apps.core.messages import FEATURES
from apps.core.utils.constants import (
    APPOINTMENT_STATUS_COMPLETED,
    REPORT_LEVEL_BASIC,
    REPORT_LEVEL_EXTENDED,
    REPORT_LEVEL_FULL,
    TRANSACTION_TYPE_EXPENSE,
    TRANSACTION_TYPE_INCOME,
)

logger = logging.getLogger(__name__)

ZERO = Decimal('0')

REPORT_LEVELS = {
    'daily_flow': REPORT_LEVEL_BASIC,
    'sales_by_service': REPORT_LEVEL_EXTENDED,
    'by_professional': REPORT_LEVEL_EXTENDED,
    'overview': REPORT_LEVEL_FULL,
}

DEFAULT_PERIOD_DAYS = 30


class ReportService:
    """
    Builds reports from the salon's ledger and appointment book.

    Args:
        transactions: TransactionRepository bound to the salon
        appointments: AppointmentRepository bound to the salon
    """

    def __init__(self, transactions, appointments):
        self.transactions = transactions
        self.appointments = appointments

    @staticmethod
    def ensure_allowed(kind: str, license) -> None:
        """Raise unless the license's report level unlocks ``kind``."""
        if kind not in REPORT_LEVELS:
            raise ValidationFailed(f"Unknown report '{kind}'.", available=sorted(REPORT_LEVELS))
        level = license.report_level if license is not None else 0
        if level < REPORT_LEVELS[kind]:
            raise Forbidden(FEATURES['report_level'], required_level=REPORT_LEVELS[kind], report_level=level)

    @staticmethod
    def period(start: date = None, end: date = None):
        end = end or timezone.localdate()
        start = start or end - timedelta(days=DEFAULT_PERIOD_DAYS - 1)
        return start, end

    def build(self, kind: str, start: date = None, end: date = None) -> dict:
        start, end = self.period(start, end)
        rows = getattr(self, kind)(start, end)
        return {'report': kind, 'start': start, 'end': end, **rows}

    def daily_flow(self, start, end) -> dict:
        days = (
            self.transactions.between(start, end)
            .values('date')
            .annotate(
                income=Sum('amount', filter=Q(type=TRANSACTION_TYPE_INCOME)),
                expense=Sum('amount', filter=Q(type=TRANSACTION_TYPE_EXPENSE)),
            )
            .order_by('date')
        )
        rows = []
        for day in days:
            income = day['income'] or ZERO
            expense = day['expense'] or ZERO
            rows.append({'date': day['date'], 'income': income, 'expense': expense, 'balance': income - expense})
        return {
            'rows': rows,
            'total_income': sum((row['income'] for row in rows), ZERO),
            'total_expense': sum((row['expense'] for row in rows), ZERO),
        }

    def _completed(self, start, end):
        return self.appointments.scoped().filter(
            status=APPOINTMENT_STATUS_COMPLETED,
            date__gte=start,
            date__lte=end,
        )

    def sales_by_service(self, start, end) -> dict:
        rows = (
            self._completed(start, end)
            .values('service_id', 'service__name')
            .annotate(appointments=Count('id'), revenue=Sum('price'))
            .order_by('-revenue')
        )
        return {
            'rows': [
                {
                    'service_id': row['service_id'],
                    'service': row['service__name'] or 'Unknown service',
                    'appointments': row['appointments'],
                    'revenue': row['revenue'] or ZERO,
                }
                for row in rows
            ]
        }

    def by_professional(self, start, end) -> dict:
        rows = (
            self._completed(start, end)
            .values('professional_id', 'professional__name')
            .annotate(appointments=Count('id'), revenue=Sum('price'))
            .order_by('-revenue')
        )
        return {
            'rows': [
                {
                    'professional_id': row['professional_id'],
                    'professional': row['professional__name'] or 'Unassigned',
                    'appointments': row['appointments'],
                    'revenue': row['revenue'] or ZERO,
                }
                for row in rows
            ]
        }

    def overview(self, start, end) -> dict:
        entries = self.transactions.between(start, end)
        totals = entries.aggregate(
            income=Sum('amount', filter=Q(type=TRANSACTION_TYPE_INCOME)),
            expense=Sum('amount', filter=Q(type=TRANSACTION_TYPE_EXPENSE)),
        )
        income = totals['income'] or ZERO
        expense = totals['expense'] or ZERO

        by_category = entries.values('type', 'category').annotate(total=Sum('amount')).order_by('type', 'category')
        by_method = (
            entries.filter(type=TRANSACTION_TYPE_INCOME)
            .values('payment_method')
            .annotate(total=Sum('amount'))
            .order_by('payment_method')
        )
        return {
            'income': income,
            'expense': expense,
            'balance': income - expense,
            'completed_appointments': self._completed(start, end).count(),
            'by_category': list(by_category),
            'by_payment_method': list(by_method),
        }
