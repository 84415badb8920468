"""
Client model (the salon's customers)
"""
import random
import string

from django.db import models
from apps.core.models import TenantOwnedModel

LOYALTY_ID_PREFIX = 'XON-'
LOYALTY_ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_loyalty_id() -> str:
    """Return an unused loyalty id of the form XON-XXXXXX."""
    while True:
        candidate = LOYALTY_ID_PREFIX + ''.join(random.choices(LOYALTY_ID_ALPHABET, k=6))
        if not Client.objects.filter(loyalty_id=candidate).exists():
            return candidate


class Client(TenantOwnedModel):
    """
    Salon client. The loyalty id is unique across all salons.
    """
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=30, blank=True, db_index=True)
    email = models.EmailField(blank=True)
    loyalty_id = models.CharField(max_length=20, unique=True, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'clients'
        verbose_name = 'Client'
        verbose_name_plural = 'Clients'
        ordering = ['name']
        indexes = [
            models.Index(fields=['salon', 'phone'], name='client_salon_phone_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.loyalty_id})"

    def save(self, *args, **kwargs):
        if not self.loyalty_id:
            self.loyalty_id = generate_loyalty_id()
        super().save(*args, **kwargs)
