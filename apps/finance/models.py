"""
Financial ledger
"""
from django.db import models
from django.utils import timezone

from apps.core.models import TenantOwnedModel
from apps.core.utils.constants import PAYMENT_METHODS, TRANSACTION_TYPES, TRANSACTION_TYPE_INCOME


class Transaction(TenantOwnedModel):
    """
    Ledger entry. Append-only: entries are never edited or deleted through the API.
    """
    description = models.CharField(max_length=255)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    type = models.CharField(max_length=20, choices=TRANSACTION_TYPES, default=TRANSACTION_TYPE_INCOME)
    category = models.CharField(max_length=100, blank=True)
    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHODS, default='cash')
    date = models.DateField(default=timezone.localdate)

    appointment = models.ForeignKey(
        'bookings.Appointment',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions'
    )

    class Meta:
        db_table = 'transactions'
        verbose_name = 'Transaction'
        verbose_name_plural = 'Transactions'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['salon', 'date'], name='transaction_salon_date_idx'),
            models.Index(fields=['salon', 'type'], name='transaction_salon_type_idx'),
        ]

    def __str__(self):
        return f"{self.type} {self.amount} - {self.description}"
