"""
Availability views (staff-facing and public)
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.authentication.roles import Action
from apps.bookings.repositories import AppointmentRepository
from apps.core.permissions import HasPrivilege
from apps.core.tenancy import current_tenant_id
from apps.salons.services import get_public_salon
from apps.staff.repositories import ProfessionalRepository
from apps.staff.serializers import PublicProfessionalSerializer
from .serializers import (
    AvailableProfessionalsResponseSerializer,
    AvailableSlotsResponseSerializer,
    ProfessionalQuerySerializer,
    SlotLoadSerializer,
    SlotQuerySerializer,
)
from .services.availability import SlotAllocator
from .utils.time_utils import format_time

DATE_PARAM = OpenApiParameter('date', str, required=True, description='Day (YYYY-MM-DD)')
TIME_PARAM = OpenApiParameter('time', str, required=True, description='Start time (HH:MM)')


def _allocator(tenant_id) -> SlotAllocator:
    return SlotAllocator(
        appointments=AppointmentRepository(tenant_id),
        professionals=ProfessionalRepository(tenant_id),
    )


def _slots_payload(tenant_id, query_params, with_load=False):
    query = SlotQuerySerializer(data=query_params)
    query.is_valid(raise_exception=True)
    day = query.validated_data['date']

    allocator = _allocator(tenant_id)
    payload = {'date': day, 'slots': allocator.available_slots(day)}
    if with_load:
        payload['load'] = SlotLoadSerializer(allocator.slot_load(day), many=True).data
    return payload


def _professionals_payload(tenant_id, query_params):
    query = ProfessionalQuerySerializer(data=query_params)
    query.is_valid(raise_exception=True)
    day, start = query.validated_data['date'], query.validated_data['time']

    professionals = _allocator(tenant_id).available_professionals(day, start)
    return {
        'date': day,
        'time': format_time(start),
        'professionals': PublicProfessionalSerializer(professionals, many=True).data,
    }


@extend_schema(
    summary="Available slots",
    description="Hourly slots with fewer bookings than active professionals, plus the load per slot.",
    parameters=[DATE_PARAM],
    responses={200: AvailableSlotsResponseSerializer},
    tags=['Schedules']
)
@api_view(['GET'])
@permission_classes([HasPrivilege.for_action(Action.VIEW_SCHEDULE)])
def available_slots(request):
    return Response(_slots_payload(current_tenant_id(request), request.query_params, with_load=True))


@extend_schema(
    summary="Available professionals",
    description="Active professionals without an appointment starting exactly at the given time.",
    parameters=[DATE_PARAM, TIME_PARAM],
    responses={200: AvailableProfessionalsResponseSerializer},
    tags=['Schedules']
)
@api_view(['GET'])
@permission_classes([HasPrivilege.for_action(Action.VIEW_SCHEDULE)])
def available_professionals(request):
    return Response(_professionals_payload(current_tenant_id(request), request.query_params))


@extend_schema(
    summary="Public available slots",
    parameters=[DATE_PARAM],
    responses={200: AvailableSlotsResponseSerializer},
    tags=['Public']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_available_slots(request, salon_id):
    salon = get_public_salon(salon_id)
    return Response(_slots_payload(salon.id, request.query_params))


@extend_schema(
    summary="Public available professionals",
    parameters=[DATE_PARAM, TIME_PARAM],
    responses={200: AvailableProfessionalsResponseSerializer},
    tags=['Public']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_available_professionals(request, salon_id):
    salon = get_public_salon(salon_id)
    return Response(_professionals_payload(salon.id, request.query_params))
