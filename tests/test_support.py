"""
Tests for support tickets between salons and platform staff.
"""
import pytest
from django.core import mail

from apps.authentication.models import Account
from apps.support.models import Ticket, TicketMessage
from apps.support import services


@pytest.fixture
def ticket(admin, salon):
    return services.open_ticket(admin, salon.id, 'Cannot print receipts', 'The printer button does nothing.')


@pytest.mark.django_db
class TestTicketFlow:

    def test_open_ticket_with_first_message(self, ticket, admin):
        assert ticket.status == 'open'
        assert ticket.opened_by_id == admin.id
        message = ticket.messages.get()
        assert message.author_role == 'admin'

    def test_platform_reply_notifies_opener(self, ticket, platform_assistant, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            services.post_message(ticket, platform_assistant, 'Please update your browser.')

        ticket.refresh_from_db()
        assert ticket.status == 'pending'
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == [ticket.opened_by.email]

    def test_salon_follow_up_reopens(self, ticket, admin, platform_assistant):
        services.post_message(ticket, platform_assistant, 'Fixed?')
        services.post_message(ticket, admin, 'Still broken.')
        ticket.refresh_from_db()
        assert ticket.status == 'open'

    def test_mark_read_only_touches_the_other_side(self, ticket, admin, platform_assistant):
        services.post_message(ticket, platform_assistant, 'Looking into it.')

        assert services.mark_read(ticket, admin) == 1
        assert TicketMessage.objects.filter(ticket=ticket, is_read=False, author_role='admin').count() == 1

    def test_platform_sees_every_salon(self, ticket, other_salon, platform_assistant):
        other_admin = Account.objects.create_user(email='b@corte.test', role='admin', salon=other_salon)
        services.open_ticket(other_admin, other_salon.id, 'Billing question', 'When is my renewal?')

        assert services.tickets_visible_to(platform_assistant).count() == 2
        assert services.tickets_visible_to(other_admin, other_salon.id).count() == 1


@pytest.mark.django_db
class TestSupportEndpoints:

    def test_reception_opens_ticket(self, as_account, reception):
        response = as_account(reception).post('/api/v1/support/tickets/', {
            'subject': 'Slots look wrong',
            'content': 'Friday shows no availability.',
            'priority': 'high',
        }, format='json')

        assert response.status_code == 201
        assert response.json()['messages'][0]['content'] == 'Friday shows no availability.'
        assert Ticket.objects.get().priority == 'high'

    def test_salon_users_cannot_change_status(self, as_account, admin, ticket):
        response = as_account(admin).post(
            f'/api/v1/support/tickets/{ticket.id}/status/', {'status': 'closed'}, format='json'
        )
        assert response.status_code == 403

    def test_platform_replies_and_closes(self, as_account, platform_assistant, ticket):
        client = as_account(platform_assistant)

        listed = client.get('/api/v1/support/tickets/')
        assert [row['id'] for row in listed.json()] == [str(ticket.id)]

        reply = client.post(f'/api/v1/support/tickets/{ticket.id}/messages/', {'content': 'Done.'}, format='json')
        assert reply.status_code == 201
        assert reply.json()['author_role'] == 'platform_assistant'

        closed = client.post(f'/api/v1/support/tickets/{ticket.id}/status/', {'status': 'closed'}, format='json')
        assert closed.json()['status'] == 'closed'

    def test_tickets_of_other_salons_are_hidden(self, as_account, other_salon, ticket):
        stranger = Account.objects.create_user(email='c@corte.test', role='admin', salon=other_salon)
        response = as_account(stranger).get(f'/api/v1/support/tickets/{ticket.id}/')
        assert response.status_code == 404
