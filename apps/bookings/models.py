"""
Appointment model
"""
from django.db import models
from apps.core.models import TenantOwnedModel
from apps.core.utils.constants import (
    APPOINTMENT_SOURCES,
    APPOINTMENT_SOURCE_INTERNAL,
    APPOINTMENT_STATUSES,
    APPOINTMENT_STATUS_SCHEDULED,
)


class Appointment(TenantOwnedModel):
    """
    Appointment of a client for a service, optionally with a professional.

    ``end_time`` is derived from the start time and the service duration.
    ``price`` is a snapshot of the service price at booking time.
    """
    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.CASCADE,
        related_name='appointments'
    )

    service = models.ForeignKey(
        'services.Service',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='appointments'
    )

    professional = models.ForeignKey(
        'staff.Professional',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='appointments'
    )

    # Timing
    date = models.DateField(db_index=True)
    start_time = models.TimeField()
    end_time = models.TimeField()

    status = models.CharField(
        max_length=20,
        choices=APPOINTMENT_STATUSES,
        default=APPOINTMENT_STATUS_SCHEDULED,
        db_index=True
    )

    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    notes = models.TextField(blank=True)
    source = models.CharField(max_length=20, choices=APPOINTMENT_SOURCES, default=APPOINTMENT_SOURCE_INTERNAL)

    class Meta:
        db_table = 'appointments'
        verbose_name = 'Appointment'
        verbose_name_plural = 'Appointments'
        ordering = ['date', 'start_time']
        indexes = [
            models.Index(fields=['salon', 'date'], name='appointment_salon_date_idx'),
            models.Index(fields=['salon', 'professional', 'date'], name='appointment_prof_date_idx'),
        ]

    def __str__(self):
        return f"{self.client.name} - {self.date} {self.start_time:%H:%M}"
