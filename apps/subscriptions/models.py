"""
License model.

Every salon holds exactly one license. The license decides whether the salon
may use tenant-scoped features and which optional features it unlocks:
- booking_limit: monthly booking quota (stored and reported)
- has_waiting_list: enables the waiting-list board
- report_level: depth of financial reports (1 basic, 2 extended, 3 full)
"""
from django.db import models
from django.utils import timezone

from apps.core.models import BaseModel
from apps.core.utils.constants import (
    LICENSE_PLANS,
    LICENSE_STATUSES,
    LICENSE_STATUS_ACTIVE,
    PLAN_TRIAL,
    REPORT_LEVEL_BASIC,
)


class License(BaseModel):
    """
    Salon license (one-to-one with Salon).
    """
    salon = models.OneToOneField(
        'salons.Salon',
        on_delete=models.CASCADE,
        related_name='license'
    )

    key = models.CharField(max_length=64, unique=True)
    plan = models.CharField(max_length=20, choices=LICENSE_PLANS, default=PLAN_TRIAL)
    status = models.CharField(
        max_length=20,
        choices=LICENSE_STATUSES,
        default=LICENSE_STATUS_ACTIVE,
        db_index=True
    )
    valid_until = models.DateTimeField(help_text='License expires after this moment')

    # Plan features
    booking_limit = models.PositiveIntegerField(default=50)
    has_waiting_list = models.BooleanField(default=False)
    report_level = models.PositiveSmallIntegerField(default=REPORT_LEVEL_BASIC)

    class Meta:
        db_table = 'licenses'
        verbose_name = 'License'
        verbose_name_plural = 'Licenses'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.salon} - {self.plan} ({self.status})"

    @property
    def is_active(self):
        return self.status == LICENSE_STATUS_ACTIVE

    def is_past_due(self, now=None):
        """True when the expiry moment has passed, regardless of stored status."""
        return (now or timezone.now()) > self.valid_until

    @property
    def days_remaining(self):
        delta = self.valid_until - timezone.now()
        return max(delta.days, 0)
