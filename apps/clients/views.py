"""
Client views
"""
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter, OpenApiResponse
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.authentication.roles import Action
from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.views import TenantScopedViewSet
from .models import Client
from .repositories import ClientRepository
from .serializers import ClientLookupSerializer, ClientSerializer


@extend_schema_view(
    list=extend_schema(summary="List clients", tags=['Clients']),
    retrieve=extend_schema(summary="Get client", tags=['Clients']),
    create=extend_schema(summary="Register client", tags=['Clients']),
    update=extend_schema(summary="Update client", tags=['Clients']),
    partial_update=extend_schema(summary="Partially update client", tags=['Clients']),
    destroy=extend_schema(summary="Delete client", tags=['Clients']),
)
class ClientViewSet(TenantScopedViewSet):
    """Salon clients"""
    repository_class = ClientRepository
    serializer_class = ClientSerializer
    read_action = Action.VIEW_CLIENTS
    write_action = Action.BOOK_APPOINTMENT
    destroy_action = Action.MANAGE_CATALOG
    search_fields = ['name', 'phone', 'email', 'loyalty_id']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']


@extend_schema(
    summary="Look up a client by loyalty id",
    description="Public lookup used by the booking page to pre-fill client details.",
    parameters=[OpenApiParameter('loyalty_id', str, required=True, description='e.g. XON-AB12CD')],
    responses={
        200: ClientLookupSerializer,
        404: OpenApiResponse(description="Unknown loyalty id"),
    },
    tags=['Public']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def client_lookup(request):
    """Global lookup by loyalty id"""
    loyalty_id = request.query_params.get('loyalty_id', '').strip().upper()
    if not loyalty_id:
        raise ValidationFailed("loyalty_id is required.")

    client = Client.objects.filter(loyalty_id=loyalty_id).first()
    if client is None:
        raise NotFound("No client with this loyalty id.")
    return Response(ClientLookupSerializer(client).data)
