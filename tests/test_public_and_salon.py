"""
Tests for the public booking directory and the salon settings endpoint.
"""
from datetime import time

import pytest

from apps.clients.models import Client
from apps.services.models import Service


@pytest.mark.django_db
class TestPublicDirectory:
    """Anonymous endpoints used by the online booking page."""

    def test_only_licensed_salons_are_listed(self, api_client, salon, other_salon):
        other_salon.license.status = 'suspended'
        other_salon.license.save()

        response = api_client.get('/api/v1/public/salons/')

        assert response.status_code == 200
        assert [row['name'] for row in response.json()] == ['Studio Bella']

    def test_identity_headers_are_ignored(self, api_client, salon):
        api_client.credentials(HTTP_X_ACCOUNT_ID='not-an-account')
        assert api_client.get('/api/v1/public/salons/').status_code == 200

    def test_detail_lists_active_catalog(self, api_client, salon, service, professionals):
        Service.objects.create(salon=salon, name='Old perm', price=10, duration_minutes=60, is_active=False)

        data = api_client.get(f'/api/v1/public/salons/{salon.id}/').json()

        assert [s['name'] for s in data['services']] == ['Haircut']
        assert [p['name'] for p in data['professionals']] == ['Carla', 'Diego']

    def test_unknown_salon(self, api_client, db):
        response = api_client.get('/api/v1/public/salons/00000000-0000-0000-0000-000000000000/')
        assert response.status_code == 404
        assert response.json()['code'] == 'not_found'

    def test_search_services_across_salons(self, api_client, service, other_salon):
        Service.objects.create(salon=other_salon, name='Haircut deluxe', price=40, duration_minutes=45)

        data = api_client.get('/api/v1/public/search-services/', {'q': 'hair'}).json()

        assert {row['salon_name'] for row in data} == {'Studio Bella', 'Corte Norte'}
        assert api_client.get('/api/v1/public/search-services/').json() == []

    def test_slots_and_professionals(self, api_client, salon, professionals, make_appointment, tomorrow):
        make_appointment(tomorrow, time(10, 0), time(10, 30), professional=professionals[0])
        make_appointment(tomorrow, time(10, 0), time(10, 30), professional=professionals[1])

        slots = api_client.get(f'/api/v1/public/salons/{salon.id}/slots/', {'date': tomorrow.isoformat()}).json()
        assert '10:00' not in slots['slots']
        assert '11:00' in slots['slots']

        free = api_client.get(
            f'/api/v1/public/salons/{salon.id}/professionals/',
            {'date': tomorrow.isoformat(), 'time': '10:00'},
        ).json()
        assert free['professionals'] == []

    def test_client_lookup(self, api_client, client_record):
        response = api_client.get('/api/v1/public/client-lookup/', {'loyalty_id': client_record.loyalty_id.lower()})

        assert response.status_code == 200
        assert response.json()['phone'] == '555-1234'

    def test_client_lookup_requires_id(self, api_client, db):
        assert api_client.get('/api/v1/public/client-lookup/').status_code == 400
        assert api_client.get('/api/v1/public/client-lookup/', {'loyalty_id': 'XON-NOPE'}).status_code == 404


@pytest.mark.django_db
class TestSalonSettings:

    def test_admin_updates_settings(self, as_account, admin, salon):
        response = as_account(admin).patch('/api/v1/salon/me/', {'receipt_footer': 'Thanks!'}, format='json')

        assert response.status_code == 200
        salon.refresh_from_db()
        assert salon.receipt_footer == 'Thanks!'
        assert response.json()['license']['plan'] == 'trial'

    def test_reception_reads_but_cannot_write(self, as_account, reception):
        client = as_account(reception)
        assert client.get('/api/v1/salon/me/').status_code == 200
        response = client.patch('/api/v1/salon/me/', {'name': 'Hijacked'}, format='json')
        assert response.status_code == 403
        assert response.json()['code'] == 'forbidden'

    def test_platform_acts_as_salon(self, as_account, platform_owner, salon):
        response = as_account(platform_owner, act_as_salon=salon).get('/api/v1/salon/me/')
        assert response.json()['id'] == str(salon.id)

    def test_tenant_data_stays_in_its_salon(self, as_account, admin, other_salon, client_record):
        Client.objects.create(salon=other_salon, name='Elsewhere', phone='555-9999')

        data = as_account(admin).get('/api/v1/clients/').json()

        assert [row['name'] for row in data['results']] == ['Maria Lopez']
