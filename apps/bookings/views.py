"""
Appointment views
"""
import logging

from django.utils import timezone
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import action, api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.authentication.roles import Action
from apps.core.exceptions import Forbidden, ValidationFailed
from apps.core.messages import FEATURES
from apps.core.serializers import ErrorResponseSerializer
from apps.core.tenancy import current_license, current_tenant_id
from apps.core.utils.constants import (
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_SCHEDULED,
)
from apps.core.views import TenantScopedViewSet
from apps.finance.serializers import TransactionSerializer
from apps.salons.services import get_public_salon
from .repositories import AppointmentRepository
from .serializers import (
    AppointmentCreateSerializer,
    AppointmentSerializer,
    AppointmentUpdateSerializer,
    CheckoutResponseSerializer,
    CheckoutSerializer,
    PublicBookingSerializer,
    WaitingListSerializer,
)
from .services.booking_service import BookingService, ClientData

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        summary="List appointments",
        parameters=[
            OpenApiParameter('date', str, description='Only appointments on this day (YYYY-MM-DD)'),
            OpenApiParameter('status', str, description='Filter by status'),
        ],
        tags=['Appointments']
    ),
    retrieve=extend_schema(summary="Get appointment", tags=['Appointments']),
)
class AppointmentViewSet(TenantScopedViewSet):
    """
    Staff-facing appointment book.

    Appointments are never deleted: cancel them instead. Completion only
    happens through checkout.
    """
    repository_class = AppointmentRepository
    serializer_class = AppointmentSerializer
    read_action = Action.VIEW_SCHEDULE
    write_action = Action.BOOK_APPOINTMENT
    action_privileges = {
        'checkout': Action.CHECKOUT_APPOINTMENT,
        'waiting_list': Action.VIEW_WAITING_LIST,
    }
    http_method_names = ['get', 'post', 'put', 'patch', 'head', 'options']
    filterset_fields = ['status', 'professional', 'date']
    ordering_fields = ['date', 'start_time', 'created_at']
    ordering = ['date', 'start_time']

    def get_booking_service(self):
        return BookingService.for_tenant(current_tenant_id(self.request))

    @extend_schema(
        summary="Book appointment",
        description="Books a client. When a professional is given, overlapping appointments are rejected with 409.",
        request=AppointmentCreateSerializer,
        responses={
            201: AppointmentSerializer,
            404: OpenApiResponse(description="Client or professional not found"),
            409: OpenApiResponse(description="Professional already booked"),
        },
        tags=['Appointments']
    )
    def create(self, request, *args, **kwargs):
        serializer = AppointmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        appointment = self.get_booking_service().schedule(
            client_id=data['client_id'],
            service_id=data.get('service_id'),
            day=data['date'],
            start_time=data['start_time'],
            professional_id=data.get('professional_id'),
            notes=data.get('notes', ''),
        )
        return Response(AppointmentSerializer(appointment).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Update appointment",
        description="Reschedule, reassign, edit notes or cancel. Conflicts are re-validated.",
        request=AppointmentUpdateSerializer,
        responses={200: AppointmentSerializer, 409: OpenApiResponse(description="Professional already booked")},
        tags=['Appointments']
    )
    def update(self, request, *args, **kwargs):
        serializer = AppointmentUpdateSerializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)

        appointment = self.get_booking_service().update(kwargs['pk'], **serializer.validated_data)
        return Response(AppointmentSerializer(appointment).data)

    @extend_schema(
        summary="Partially update appointment",
        request=AppointmentUpdateSerializer,
        responses={200: AppointmentSerializer},
        tags=['Appointments']
    )
    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    @extend_schema(
        summary="Cancel appointment",
        request=None,
        responses={200: AppointmentSerializer, 409: OpenApiResponse(description="Not scheduled")},
        tags=['Appointments']
    )
    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        appointment = self.get_booking_service().cancel(pk)
        return Response(AppointmentSerializer(appointment).data)

    @extend_schema(
        summary="Checkout appointment",
        description="Marks a scheduled appointment completed and records the income in the ledger.",
        request=CheckoutSerializer,
        responses={200: CheckoutResponseSerializer, 409: OpenApiResponse(description="Not scheduled")},
        tags=['Appointments']
    )
    @action(detail=True, methods=['post'])
    def checkout(self, request, pk=None):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        appointment, entry = self.get_booking_service().checkout(
            pk,
            payment_method=serializer.validated_data['payment_method'],
            amount=serializer.validated_data.get('amount'),
        )
        return Response({
            'appointment': AppointmentSerializer(appointment).data,
            'transaction': TransactionSerializer(entry).data,
        })

    @extend_schema(
        summary="Waiting list",
        description="Today's appointments grouped into waiting, completed and cancelled. Requires a plan with the waiting list.",
        responses={200: WaitingListSerializer, 403: OpenApiResponse(description="Plan without waiting list")},
        tags=['Appointments']
    )
    @action(detail=False, methods=['get'], url_path='waiting-list')
    def waiting_list(self, request):
        license = current_license(request)
        if license is None or not license.has_waiting_list:
            raise Forbidden(FEATURES['waiting_list'])

        today = timezone.localdate()
        appointments = list(self.get_repository().on_day(today).order_by('start_time'))
        grouped = {
            'waiting': APPOINTMENT_STATUS_SCHEDULED,
            'completed': APPOINTMENT_STATUS_COMPLETED,
            'cancelled': APPOINTMENT_STATUS_CANCELLED,
        }
        payload = {'date': today}
        for key, stage in grouped.items():
            payload[key] = AppointmentSerializer(
                [appointment for appointment in appointments if appointment.status == stage],
                many=True
            ).data
        return Response(payload)


@extend_schema(
    summary="Book online",
    description=(
        "Public booking. The client is matched by loyalty id, then by phone, "
        "within the salon; otherwise a new client is created."
    ),
    request=PublicBookingSerializer,
    responses={
        201: AppointmentSerializer,
        404: OpenApiResponse(description="Salon not found or not bookable"),
        409: OpenApiResponse(response=ErrorResponseSerializer, description="Booking could not be saved"),
    },
    tags=['Public']
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_book_appointment(request):
    """Online booking for a salon with a valid license"""
    serializer = PublicBookingSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    if data['date'] < timezone.localdate():
        raise ValidationFailed("Cannot book a date in the past.")

    salon = get_public_salon(data['salon_id'])
    appointment = BookingService.for_tenant(salon.id).book_public(
        client_data=ClientData(**data['client_data']),
        service_id=data.get('service_id'),
        day=data['date'],
        start_time=data['start_time'],
        professional_id=data.get('professional_id'),
        notes=data.get('notes', ''),
    )
    return Response(AppointmentSerializer(appointment).data, status=status.HTTP_201_CREATED)
