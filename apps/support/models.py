"""
Support ticket models: the channel between salons and platform staff.
"""
from django.conf import settings
from django.db import models

from apps.core.models import BaseModel, TenantOwnedModel
from apps.core.utils.constants import TICKET_PRIORITIES, TICKET_STATUSES, TICKET_STATUS_OPEN


class Ticket(TenantOwnedModel):
    """
    Support ticket opened by a salon user.
    """
    opened_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='opened_tickets'
    )
    subject = models.CharField(max_length=255)
    status = models.CharField(
        max_length=20,
        choices=TICKET_STATUSES,
        default=TICKET_STATUS_OPEN,
        db_index=True
    )
    priority = models.CharField(max_length=20, choices=TICKET_PRIORITIES, default='medium')

    class Meta:
        db_table = 'support_tickets'
        verbose_name = 'Ticket'
        verbose_name_plural = 'Tickets'
        ordering = ['-updated_at']

    def __str__(self):
        return f"[{self.status}] {self.subject}"


class TicketMessage(BaseModel):
    """
    A single message in a ticket thread.
    """
    ticket = models.ForeignKey(
        Ticket,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='ticket_messages'
    )
    author_role = models.CharField(max_length=30, help_text='Role of the author when the message was posted')
    content = models.TextField()
    is_read = models.BooleanField(default=False)

    class Meta:
        db_table = 'support_ticket_messages'
        verbose_name = 'Ticket Message'
        verbose_name_plural = 'Ticket Messages'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.author_role}: {self.content[:40]}"
