"""
Email notification service.
Handles all outgoing email (booking confirmations, support replies,
platform announcements) through Django's configured email backend.
"""
import logging
from typing import Any, Dict, Iterable, List

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.db import models
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.html import strip_tags

from apps.schedules.utils.time_utils import format_time

logger = logging.getLogger(__name__)


class NotificationType(models.TextChoices):
    BOOKING_CONFIRMATION = 'booking_confirmation', 'Booking confirmation'
    WELCOME = 'welcome', 'Salon welcome'
    TICKET_REPLY = 'ticket_reply', 'Support reply'
    ANNOUNCEMENT = 'announcement', 'Platform announcement'


class EmailNotificationService:
    """
    Service class for sending email notifications.

    Sending never raises: failures are logged and reported as False so a
    notification problem cannot undo the business operation that triggered it.
    """

    TEMPLATE_MAP = {
        NotificationType.BOOKING_CONFIRMATION: 'emails/booking_confirmation.html',
        NotificationType.WELCOME: 'emails/welcome.html',
        NotificationType.TICKET_REPLY: 'emails/ticket_reply.html',
        NotificationType.ANNOUNCEMENT: 'emails/announcement.html',
    }

    SUBJECT_MAP = {
        NotificationType.BOOKING_CONFIRMATION: 'Your appointment is booked - {salon_name}',
        NotificationType.WELCOME: 'Welcome, {salon_name}! Your trial has started',
        NotificationType.TICKET_REPLY: 'New reply on your support ticket: {ticket_subject}',
        NotificationType.ANNOUNCEMENT: '{subject}',
    }

    @classmethod
    def send_email(
        cls,
        recipient_email: str,
        recipient_name: str,
        notification_type: str,
        context: Dict[str, Any],
    ) -> bool:
        """
        Render and send one email.

        Args:
            recipient_email: Recipient's email address
            recipient_name: Recipient's name
            notification_type: NotificationType value
            context: Template context dictionary

        Returns:
            bool: True if the email was handed to the backend
        """
        if not recipient_email:
            logger.warning(f"Skipping notification {notification_type}: no recipient email")
            return False

        template_name = cls.TEMPLATE_MAP.get(notification_type)
        if not template_name:
            logger.error(f"No template found for notification type: {notification_type}")
            return False

        subject = cls.SUBJECT_MAP[notification_type].format(**{
            'salon_name': context.get('salon_name', ''),
            'ticket_subject': context.get('ticket_subject', ''),
            'subject': context.get('subject', ''),
        })

        try:
            html_content = render_to_string(template_name, {
                **context,
                'recipient_name': recipient_name,
                'current_year': timezone.now().year,
            })
            email = EmailMultiAlternatives(
                subject=subject,
                body=strip_tags(html_content),
                from_email=settings.DEFAULT_FROM_EMAIL,
                to=[recipient_email]
            )
            email.attach_alternative(html_content, "text/html")
            email.send(fail_silently=False)
        except Exception as e:
            logger.error(f"Failed to send email {notification_type} to {recipient_email}: {e}")
            return False

        logger.info(f"Email sent successfully: {notification_type} to {recipient_email}")
        return True

    @classmethod
    def send_booking_confirmation(cls, appointment) -> bool:
        """Confirmation for a client who booked online."""
        client = appointment.client
        return cls.send_email(
            recipient_email=client.email,
            recipient_name=client.name,
            notification_type=NotificationType.BOOKING_CONFIRMATION,
            context={
                'salon_name': appointment.salon.name,
                'service_name': appointment.service.name if appointment.service else '',
                'professional_name': appointment.professional.name if appointment.professional else '',
                'date': appointment.date,
                'start_time': format_time(appointment.start_time),
                'end_time': format_time(appointment.end_time),
                'price': appointment.price,
                'loyalty_id': client.loyalty_id,
            }
        )

    @classmethod
    def send_welcome(cls, account, salon, license) -> bool:
        """Sent to the admin of a newly registered salon."""
        return cls.send_email(
            recipient_email=account.email,
            recipient_name=account.display_name,
            notification_type=NotificationType.WELCOME,
            context={
                'salon_name': salon.name,
                'plan': license.get_plan_display(),
                'valid_until': license.valid_until,
            }
        )

    @classmethod
    def send_ticket_reply(cls, ticket, message) -> bool:
        opener = ticket.opened_by
        if opener is None:
            return False
        return cls.send_email(
            recipient_email=opener.email,
            recipient_name=opener.display_name,
            notification_type=NotificationType.TICKET_REPLY,
            context={
                'ticket_subject': ticket.subject,
                'ticket_status': ticket.get_status_display(),
                'content': message.content,
            }
        )

    @classmethod
    def send_announcement(cls, recipients: Iterable, subject: str, body: str) -> List[str]:
        """
        Send the same announcement to every account in ``recipients``.

        Returns:
            Emails that were sent successfully
        """
        delivered = []
        for account in recipients:
            sent = cls.send_email(
                recipient_email=account.email,
                recipient_name=account.display_name,
                notification_type=NotificationType.ANNOUNCEMENT,
                context={'subject': subject, 'body': body},
            )
            if sent:
                delivered.append(account.email)
        logger.info(f"Announcement '{subject}' delivered to {len(delivered)} recipients")
        return delivered
