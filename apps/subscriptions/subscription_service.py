"""
Licensing service layer.

This module provides high-level functions for:
- Mapping plans to their feature set and billing period
- Issuing trial and paid licenses
- Activating (renewing) subscriptions
- Administrative license updates
- License summaries for billing screens and login responses
"""
import logging
import uuid
from datetime import timedelta

from django.db import transaction
from django.db.models import Count, Sum
from django.utils import timezone

from apps.core.exceptions import ValidationFailed
from apps.core.utils.constants import (
    LICENSE_STATUSES,
    LICENSE_STATUS_ACTIVE,
    PLAN_TRIAL,
    LICENSE_PLANS,
    REPORT_LEVEL_BASIC,
    REPORT_LEVEL_EXTENDED,
    REPORT_LEVEL_FULL,
    TRIAL_PERIOD_DAYS,
    TRANSACTION_TYPE_LICENSE_PAYMENT,
    UNLIMITED_BOOKINGS,
)
from apps.finance.models import Transaction
from apps.salons.models import Salon
from apps.subscriptions.models import License

logger = logging.getLogger(__name__)


# Features unlocked by each plan tier (monthly and annual variants share a tier)
PLAN_FEATURES = {
    'trial': {
        'booking_limit': UNLIMITED_BOOKINGS,
        'has_waiting_list': True,
        'report_level': REPORT_LEVEL_FULL,
    },
    'standard': {
        'booking_limit': 50,
        'has_waiting_list': False,
        'report_level': REPORT_LEVEL_BASIC,
    },
    'gold': {
        'booking_limit': 70,
        'has_waiting_list': False,
        'report_level': REPORT_LEVEL_EXTENDED,
    },
    'premium': {
        'booking_limit': UNLIMITED_BOOKINGS,
        'has_waiting_list': True,
        'report_level': REPORT_LEVEL_FULL,
    },
}

PLAN_CODES = frozenset(code for code, _ in LICENSE_PLANS)
STATUS_CODES = frozenset(code for code, _ in LICENSE_STATUSES)

UPDATABLE_LICENSE_FIELDS = (
    'plan', 'status', 'valid_until', 'booking_limit', 'has_waiting_list', 'report_level',
)


def validate_plan(plan: str) -> str:
    if plan not in PLAN_CODES:
        raise ValidationFailed(f"Unknown plan '{plan}'.")
    return plan


def plan_tier(plan: str) -> str:
    """'gold_year' -> 'gold'"""
    return validate_plan(plan).split('_')[0]


def plan_features(plan: str) -> dict:
    return dict(PLAN_FEATURES[plan_tier(plan)])


def plan_period(plan: str) -> timedelta:
    """Length of one billing period for the plan."""
    validate_plan(plan)
    if plan == PLAN_TRIAL:
        return timedelta(days=TRIAL_PERIOD_DAYS)
    if plan.endswith('_year'):
        return timedelta(days=365)
    return timedelta(days=30)


def generate_license_key(plan: str) -> str:
    prefix = 'TRIAL' if plan == PLAN_TRIAL else 'LIC'
    while True:
        key = f"{prefix}-{uuid.uuid4().hex[:12].upper()}"
        if not License.objects.filter(key=key).exists():
            return key


def issue_license(salon, plan: str, months: int = None, now=None) -> License:
    """
    Create the license for a new salon.

    Args:
        salon: Salon instance without a license
        plan: plan code, e.g. 'trial' or 'gold_month'
        months: optional override of the validity in 30-day months
        now: reference time (defaults to timezone.now())

    Returns:
        License instance
    """
    now = now or timezone.now()
    period = timedelta(days=30 * months) if months else plan_period(plan)

    license = License.objects.create(
        salon=salon,
        key=generate_license_key(plan),
        plan=plan,
        status=LICENSE_STATUS_ACTIVE,
        valid_until=now + period,
        **plan_features(plan)
    )
    logger.info(f"Issued {plan} license {license.key} for salon {salon.id}, valid until {license.valid_until}")
    return license


def create_trial_license(salon, now=None) -> License:
    """Trial: active, 14 days, unlimited bookings, every feature."""
    return issue_license(salon, PLAN_TRIAL, now=now)


@transaction.atomic
def activate_subscription(license: License, plan: str, amount=None, payment_method='', now=None) -> License:
    """
    Activate (or renew) a paid plan.

    Validity is extended by one plan period starting from whichever is later:
    now, or the current expiry. When ``amount`` is given a license_payment
    transaction is appended to the salon's ledger.
    """
    now = now or timezone.now()
    period = plan_period(plan)
    start = max(now, license.valid_until)

    license.plan = plan
    license.status = LICENSE_STATUS_ACTIVE
    license.valid_until = start + period
    for name, value in plan_features(plan).items():
        setattr(license, name, value)
    license.save()

    if amount:
        Transaction.objects.create(
            salon_id=license.salon_id,
            description=f"License payment - {license.get_plan_display()}",
            amount=amount,
            type=TRANSACTION_TYPE_LICENSE_PAYMENT,
            category='License',
            payment_method=payment_method or 'other',
            date=now.date(),
        )

    logger.info(f"Activated {plan} for salon {license.salon_id} until {license.valid_until}")
    return license


@transaction.atomic
def update_license(license: License, **changes) -> License:
    """
    Administrative license update.

    Changing the plan re-applies that plan's features unless the caller sets
    the feature fields explicitly in the same update.
    """
    unknown = set(changes) - set(UPDATABLE_LICENSE_FIELDS)
    if unknown:
        raise ValidationFailed(f"Cannot update license fields: {', '.join(sorted(unknown))}")

    if 'plan' in changes:
        validate_plan(changes['plan'])
        for name, value in plan_features(changes['plan']).items():
            changes.setdefault(name, value)
    if 'status' in changes and changes['status'] not in STATUS_CODES:
        raise ValidationFailed(f"Unknown license status '{changes['status']}'.")

    old_status = license.status
    for name, value in changes.items():
        setattr(license, name, value)
    license.save()

    if old_status != license.status:
        logger.info(f"License {license.key} status {old_status} -> {license.status}")
    return license


def set_license_status(license: License, status: str) -> License:
    return update_license(license, status=status)


def license_summary(license: License, now=None) -> dict:
    """Serializable summary used by billing, login and platform listings."""
    if license is None:
        return None
    now = now or timezone.now()
    return {
        'key': license.key,
        'plan': license.plan,
        'plan_display': license.get_plan_display(),
        'status': license.status,
        'valid_until': license.valid_until,
        'days_remaining': max((license.valid_until - now).days, 0),
        'is_expired': license.is_past_due(now),
        'booking_limit': license.booking_limit,
        'has_waiting_list': license.has_waiting_list,
        'report_level': license.report_level,
    }


def platform_stats() -> dict:
    """Salon counts by license status plus total license revenue."""
    by_status = {code: 0 for code in STATUS_CODES}
    rows = License.objects.values('status').annotate(total=Count('id'))
    for row in rows:
        by_status[row['status']] = row['total']

    revenue = Transaction.objects.filter(
        type=TRANSACTION_TYPE_LICENSE_PAYMENT
    ).aggregate(total=Sum('amount'))['total'] or 0

    return {
        'salons_total': Salon.objects.count(),
        'salons_by_status': by_status,
        'license_revenue': revenue,
    }
