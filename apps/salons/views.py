"""
Salon views: settings for the salon in context and the public directory
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.authentication.roles import Action, has_privilege
from apps.core.exceptions import Forbidden, NotFound
from apps.core.tenancy import current_tenant_id
from apps.services.models import Service
from apps.services.repositories import ServiceRepository
from apps.services.serializers import PublicServiceSerializer
from apps.staff.repositories import ProfessionalRepository
from apps.subscriptions.subscription_service import license_summary
from .models import Salon
from .serializers import PublicSalonDetailSerializer, PublicSalonSerializer, SalonSettingsSerializer
from .services import get_public_salon, public_salons

SEARCH_LIMIT = 50


def _settings_payload(salon, request):
    context = request.gate
    data = SalonSettingsSerializer(salon).data
    data['license'] = license_summary(context.license) if context.license else None
    if context.license_error is not None:
        data['license_error'] = {
            'code': context.license_error.default_code,
            'message': str(context.license_error.detail),
        }
    return data


@extend_schema(
    methods=['GET'],
    summary="Get salon settings",
    description="Readable even when the license is inactive so the salon can see why.",
    responses={200: SalonSettingsSerializer},
    tags=['Salon']
)
@extend_schema(
    methods=['PUT', 'PATCH'],
    summary="Update salon settings",
    request=SalonSettingsSerializer,
    responses={200: SalonSettingsSerializer, 403: OpenApiResponse(description="Admins only")},
    tags=['Salon']
)
@api_view(['GET', 'PUT', 'PATCH'])
def salon_settings(request):
    """Settings of the salon the request acts on"""
    try:
        salon = Salon.objects.get(pk=current_tenant_id(request))
    except Salon.DoesNotExist:
        raise NotFound("Salon not found.")

    if request.method == 'GET':
        return Response(_settings_payload(salon, request))

    if not has_privilege(request.user.role, Action.UPDATE_SALON):
        raise Forbidden("Only salon admins can change salon settings.")

    serializer = SalonSettingsSerializer(salon, data=request.data, partial=request.method == 'PATCH')
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(_settings_payload(salon, request))


@extend_schema(
    summary="Public salon directory",
    description="Salons with an active, unexpired license.",
    parameters=[OpenApiParameter('q', str, description='Filter by name')],
    responses={200: PublicSalonSerializer(many=True)},
    tags=['Public']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_salon_list(request):
    salons = public_salons().order_by('name')
    term = request.query_params.get('q', '').strip()
    if term:
        salons = salons.filter(name__icontains=term)
    return Response(PublicSalonSerializer(salons, many=True).data)


@extend_schema(
    summary="Public salon detail",
    description="Salon card with active services and professionals.",
    responses={200: PublicSalonDetailSerializer, 404: OpenApiResponse(description="Salon not found")},
    tags=['Public']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_salon_detail(request, salon_id):
    salon = get_public_salon(salon_id)
    serializer = PublicSalonDetailSerializer(salon, context={
        'services': ServiceRepository(salon.id).active().order_by('name'),
        'professionals': ProfessionalRepository(salon.id).active().order_by('name'),
    })
    return Response(serializer.data)


@extend_schema(
    summary="Search services across salons",
    parameters=[OpenApiParameter('q', str, required=True, description='Service name contains')],
    responses={200: PublicServiceSerializer(many=True)},
    tags=['Public']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_search_services(request):
    term = request.query_params.get('q', '').strip()
    if not term:
        return Response([])
    services = (
        Service.objects.filter(
            is_active=True,
            name__icontains=term,
            salon__in=public_salons(),
        )
        .select_related('salon')
        .order_by('name')[:SEARCH_LIMIT]
    )
    return Response(PublicServiceSerializer(services, many=True).data)
