"""
Staff models
"""
from django.db import models
from apps.core.models import TenantOwnedModel


class Professional(TenantOwnedModel):
    """
    Professional working at a salon. Only active professionals can be booked.
    """
    name = models.CharField(max_length=255)
    specialty = models.CharField(max_length=255, blank=True)
    color = models.CharField(max_length=20, blank=True, help_text='Calendar colour, e.g. #ff9900')

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'professionals'
        verbose_name = 'Professional'
        verbose_name_plural = 'Professionals'
        ordering = ['name']
        indexes = [
            models.Index(fields=['salon', 'is_active'], name='professional_salon_active_idx'),
        ]

    def __str__(self):
        return self.name
