"""
Support ticket flows between salon users and platform staff.
"""
import logging

from django.db import transaction

from apps.authentication.roles import PLATFORM_ROLES, is_platform_role
from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.utils.constants import (
    TICKET_STATUSES,
    TICKET_STATUS_OPEN,
    TICKET_STATUS_PENDING,
)
from apps.notifications.services.email_service import EmailNotificationService
from .models import Ticket, TicketMessage
from .repositories import TicketRepository

logger = logging.getLogger(__name__)

TICKET_STATUS_CODES = frozenset(code for code, _ in TICKET_STATUSES)


def tickets_visible_to(account, tenant_id=None):
    """
    Platform staff see every ticket unless they act for one salon;
    salon users only see their own salon's tickets.
    """
    if is_platform_role(account.role) and tenant_id is None:
        return Ticket.objects.select_related('salon', 'opened_by')
    return TicketRepository(tenant_id).all().select_related('salon')


def get_ticket(account, tenant_id, ticket_id) -> Ticket:
    ticket = tickets_visible_to(account, tenant_id).filter(pk=ticket_id).first()
    if ticket is None:
        raise NotFound("Ticket not found.")
    return ticket


@transaction.atomic
def open_ticket(account, tenant_id, subject, content, priority='medium') -> Ticket:
    """Open a ticket for the salon in context with its first message."""
    ticket = TicketRepository(tenant_id).create(
        opened_by=account,
        subject=subject,
        priority=priority,
    )
    TicketMessage.objects.create(ticket=ticket, author=account, author_role=account.role, content=content)
    logger.info(f"{account.email} opened ticket {ticket.id} for salon {tenant_id}")
    return ticket


def post_message(ticket, author, content, notifier=EmailNotificationService) -> TicketMessage:
    """
    Append a message to the thread.

    A platform reply moves the ticket to pending and emails the opener; a
    salon message reopens it.
    """
    with transaction.atomic():
        message = TicketMessage.objects.create(
            ticket=ticket,
            author=author,
            author_role=author.role,
            content=content,
        )
        from_platform = is_platform_role(author.role)
        ticket.status = TICKET_STATUS_PENDING if from_platform else TICKET_STATUS_OPEN
        ticket.save(update_fields=['status', 'updated_at'])

        if from_platform:
            transaction.on_commit(lambda: notifier.send_ticket_reply(ticket, message))

    return message


def set_status(ticket, status) -> Ticket:
    if status not in TICKET_STATUS_CODES:
        raise ValidationFailed(f"Unknown ticket status '{status}'.", field='status')
    old_status = ticket.status
    ticket.status = status
    ticket.save(update_fields=['status', 'updated_at'])
    logger.info(f"Ticket {ticket.id} status {old_status} -> {status}")
    return ticket


def mark_read(ticket, reader) -> int:
    """Mark messages written by the other side as read. Returns how many changed."""
    messages = ticket.messages.filter(is_read=False)
    if is_platform_role(reader.role):
        messages = messages.exclude(author_role__in=list(PLATFORM_ROLES))
    else:
        messages = messages.filter(author_role__in=list(PLATFORM_ROLES))
    return messages.update(is_read=True)
