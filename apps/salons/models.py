"""
Salon (tenant) model
"""
from django.db import models
from apps.core.models import BaseModel


class Salon(BaseModel):
    """
    A salon is the tenant every business record belongs to.

    Salons are never hard-deleted; deactivate them instead.
    """
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=80, unique=True)

    # Contact
    phone = models.CharField(max_length=30, blank=True)
    email = models.EmailField(blank=True)
    address = models.CharField(max_length=500, blank=True)

    # Receipt / invoicing details
    tax_id = models.CharField(max_length=50, blank=True, help_text='Tax identification number shown on receipts')
    logo = models.TextField(blank=True, help_text='Logo URL or data URI')
    receipt_footer = models.TextField(blank=True)

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'salons'
        verbose_name = 'Salon'
        verbose_name_plural = 'Salons'
        ordering = ['-created_at']

    def __str__(self):
        return self.name
