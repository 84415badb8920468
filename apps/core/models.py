"""
Core abstract models for inheritance
"""
import uuid
from django.db import models


class TimeStampedModel(models.Model):
    """
    Abstract base model with created_at and updated_at timestamps
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimeStampedModel):
    """
    Abstract base model with a UUID primary key and timestamps
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


class TenantOwnedModel(BaseModel):
    """
    Abstract base for every business record that belongs to a salon.

    Queries against subclasses go through a TenantScopedRepository so the
    salon filter is always applied.
    """
    salon = models.ForeignKey(
        'salons.Salon',
        on_delete=models.CASCADE,
        related_name='+'
    )

    class Meta:
        abstract = True
