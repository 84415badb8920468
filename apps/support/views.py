"""
Support ticket views.

Salon users open tickets and follow up on them; platform staff see every
ticket, reply and move tickets through their statuses.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.authentication.roles import Action, is_platform_role
from apps.core.permissions import HasPrivilege
from apps.core.tenancy import current_tenant_id
from . import services
from .serializers import (
    TicketCreateSerializer,
    TicketDetailSerializer,
    TicketMessageCreateSerializer,
    TicketMessageSerializer,
    TicketSerializer,
    TicketStatusSerializer,
)


def _visible_tenant(request):
    """Tenant filter for ticket reads. None means every salon (platform only)."""
    if is_platform_role(request.user.role):
        return getattr(request, 'tenant_id', None)
    return current_tenant_id(request)


@extend_schema(
    methods=['GET'],
    summary="List tickets",
    parameters=[OpenApiParameter('status', str, description='Filter by ticket status')],
    responses={200: TicketSerializer(many=True)},
    tags=['Support']
)
@extend_schema(
    methods=['POST'],
    summary="Open ticket",
    request=TicketCreateSerializer,
    responses={201: TicketDetailSerializer},
    tags=['Support']
)
@api_view(['GET', 'POST'])
@permission_classes([HasPrivilege.for_action(Action.OPEN_TICKET)])
def tickets(request):
    if request.method == 'GET':
        queryset = services.tickets_visible_to(request.user, _visible_tenant(request))
        ticket_status = request.query_params.get('status')
        if ticket_status:
            queryset = queryset.filter(status=ticket_status)
        return Response(TicketSerializer(queryset.order_by('-updated_at'), many=True).data)

    serializer = TicketCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    ticket = services.open_ticket(request.user, current_tenant_id(request), **serializer.validated_data)
    return Response(TicketDetailSerializer(ticket).data, status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Get ticket with its messages",
    description="Messages from the other side are marked as read.",
    responses={200: TicketDetailSerializer, 404: OpenApiResponse(description="Ticket not found")},
    tags=['Support']
)
@api_view(['GET'])
@permission_classes([HasPrivilege.for_action(Action.OPEN_TICKET)])
def ticket_detail(request, ticket_id):
    ticket = services.get_ticket(request.user, _visible_tenant(request), ticket_id)
    services.mark_read(ticket, request.user)
    return Response(TicketDetailSerializer(ticket).data)


@extend_schema(
    summary="Post a message on a ticket",
    request=TicketMessageCreateSerializer,
    responses={201: TicketMessageSerializer},
    tags=['Support']
)
@api_view(['POST'])
@permission_classes([HasPrivilege.for_action(Action.OPEN_TICKET)])
def ticket_messages(request, ticket_id):
    ticket = services.get_ticket(request.user, _visible_tenant(request), ticket_id)
    serializer = TicketMessageCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    message = services.post_message(ticket, request.user, serializer.validated_data['content'])
    return Response(TicketMessageSerializer(message).data, status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Change ticket status",
    request=TicketStatusSerializer,
    responses={200: TicketSerializer, 403: OpenApiResponse(description="Platform staff only")},
    tags=['Support']
)
@api_view(['POST'])
@permission_classes([HasPrivilege.for_action(Action.ANSWER_TICKET)])
def ticket_status(request, ticket_id):
    ticket = services.get_ticket(request.user, _visible_tenant(request), ticket_id)
    serializer = TicketStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    ticket = services.set_status(ticket, serializer.validated_data['status'])
    return Response(TicketSerializer(ticket).data)
