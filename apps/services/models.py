"""
Service model
"""
from django.db import models
from apps.core.models import TenantOwnedModel
from apps.core.validators import validate_duration, validate_non_negative_decimal


class Service(TenantOwnedModel):
    """
    Service offered by a salon
    """
    name = models.CharField(max_length=255)

    # Pricing
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        validators=[validate_non_negative_decimal]
    )

    # Duration
    duration_minutes = models.PositiveIntegerField(default=60, validators=[validate_duration])

    # Status
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'services'
        verbose_name = 'Service'
        verbose_name_plural = 'Services'
        ordering = ['name']
        indexes = [
            models.Index(fields=['salon', 'is_active'], name='service_salon_active_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.duration_minutes} min)"
