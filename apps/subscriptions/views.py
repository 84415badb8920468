"""
Licensing API views.

Provides endpoints for:
- The license of the salon in context (billing)
- Platform administration: salon listing and provisioning, license
  updates and activations, statistics, platform assistants and
  announcements
"""
import logging

from django.db.models import Prefetch
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.authentication.models import Account
from apps.authentication.roles import Action, Role, has_privilege
from apps.authentication.serializers import AccountSerializer, PlatformAssistantCreateSerializer
from apps.authentication.services import account_service
from apps.core.exceptions import Forbidden, NotFound
from apps.core.permissions import HasPrivilege
from apps.core.tenancy import current_license, current_tenant_id
from apps.notifications.services.email_service import EmailNotificationService
from apps.salons.models import Salon
from . import subscription_service
from .models import License
from .serializers import (
    BulkEmailSerializer,
    LicenseSerializer,
    LicenseStatusSerializer,
    LicenseUpdateSerializer,
    PlatformSalonSerializer,
    SalonProvisionSerializer,
    SubscriptionActivationSerializer,
)

logger = logging.getLogger(__name__)


def _salon_queryset():
    return Salon.objects.select_related('license').prefetch_related(
        Prefetch('accounts', queryset=Account.objects.filter(role=Role.ADMIN))
    ).order_by('-created_at')


def _license_for(salon_id) -> License:
    license = License.objects.select_related('salon').filter(salon_id=salon_id).first()
    if license is None:
        raise NotFound("Salon or license not found.")
    return license


# Billing

@extend_schema(
    summary="License of the current salon",
    description=(
        "Plan, status, expiry and unlocked features. Stays readable while the "
        "license is suspended or expired; `license_error` then explains why "
        "the rest of the API is blocked."
    ),
    responses={200: OpenApiResponse(description="License summary")},
    tags=['Billing']
)
@api_view(['GET'])
def current_license_view(request):
    current_tenant_id(request)
    license = current_license(request)
    if license is None:
        raise NotFound("This salon has no license.")

    data = subscription_service.license_summary(license)
    error = request.gate.license_error
    data['license_error'] = None if error is None else {
        'code': error.default_code,
        'message': str(error.detail),
    }
    return Response(data)


# Platform

@extend_schema(
    methods=['GET'],
    summary="List salons",
    parameters=[
        OpenApiParameter('status', str, description='Filter by license status'),
        OpenApiParameter('q', str, description='Filter by salon name'),
    ],
    responses={200: PlatformSalonSerializer(many=True)},
    tags=['Platform']
)
@extend_schema(
    methods=['POST'],
    summary="Create salon",
    description="Creates a salon with a license of the chosen plan and its admin account.",
    request=SalonProvisionSerializer,
    responses={201: PlatformSalonSerializer, 400: OpenApiResponse(description="Validation errors")},
    tags=['Platform']
)
@api_view(['GET', 'POST'])
@permission_classes([HasPrivilege.for_action(Action.VIEW_ALL_TENANTS)])
def platform_salons(request):
    if request.method == 'GET':
        salons = _salon_queryset()
        license_status = request.query_params.get('status')
        if license_status:
            salons = salons.filter(license__status=license_status)
        query = request.query_params.get('q', '').strip()
        if query:
            salons = salons.filter(name__icontains=query)
        return Response(PlatformSalonSerializer(salons, many=True).data)

    if not has_privilege(request.user.role, Action.CREATE_TENANT):
        raise Forbidden("Your role does not allow creating salons.")
    serializer = SalonProvisionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    _, salon, _ = account_service.provision_salon(
        created_by=request.user,
        salon_name=data['name'],
        plan=data['plan'],
        admin_name=data['admin_name'],
        admin_email=data['admin_email'],
        admin_password=data['admin_password'],
        months=data.get('months'),
        phone=data['phone'],
        address=data['address'],
    )
    salon = _salon_queryset().get(pk=salon.pk)
    return Response(PlatformSalonSerializer(salon).data, status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Update salon license",
    description="Changing the plan re-applies its features unless they are set explicitly.",
    request=LicenseUpdateSerializer,
    responses={200: LicenseSerializer, 404: OpenApiResponse(description="Salon not found")},
    tags=['Platform']
)
@api_view(['PATCH'])
@permission_classes([HasPrivilege.for_action(Action.UPDATE_LICENSE)])
def platform_license(request, salon_id):
    license = _license_for(salon_id)
    serializer = LicenseUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    license = subscription_service.update_license(license, **serializer.validated_data)
    logger.info(f"{request.user.email} updated license of salon {salon_id}")
    return Response(LicenseSerializer(license).data)


@extend_schema(
    summary="Suspend or reactivate a salon",
    request=LicenseStatusSerializer,
    responses={200: LicenseSerializer},
    tags=['Platform']
)
@api_view(['POST'])
@permission_classes([HasPrivilege.for_action(Action.UPDATE_LICENSE)])
def platform_license_status(request, salon_id):
    license = _license_for(salon_id)
    serializer = LicenseStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    license = subscription_service.set_license_status(license, serializer.validated_data['status'])
    return Response(LicenseSerializer(license).data)


@extend_schema(
    summary="Activate or renew a paid plan",
    description="Extends validity by one plan period and records the payment when an amount is given.",
    request=SubscriptionActivationSerializer,
    responses={200: LicenseSerializer},
    tags=['Platform']
)
@api_view(['POST'])
@permission_classes([HasPrivilege.for_action(Action.UPDATE_LICENSE)])
def platform_activate(request, salon_id):
    license = _license_for(salon_id)
    serializer = SubscriptionActivationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    license = subscription_service.activate_subscription(
        license,
        serializer.validated_data['plan'],
        amount=serializer.validated_data.get('amount'),
        payment_method=serializer.validated_data['payment_method'],
    )
    return Response(LicenseSerializer(license).data)


@extend_schema(
    summary="Platform statistics",
    responses={200: OpenApiResponse(description="Salon counts by license status and license revenue")},
    tags=['Platform']
)
@api_view(['GET'])
@permission_classes([HasPrivilege.for_action(Action.VIEW_ALL_TENANTS)])
def platform_stats(request):
    return Response(subscription_service.platform_stats())


@extend_schema(
    methods=['GET'],
    summary="List platform staff",
    responses={200: AccountSerializer(many=True)},
    tags=['Platform']
)
@extend_schema(
    methods=['POST'],
    summary="Add platform assistant",
    request=PlatformAssistantCreateSerializer,
    responses={201: AccountSerializer, 403: OpenApiResponse(description="Platform owner only")},
    tags=['Platform']
)
@api_view(['GET', 'POST'])
@permission_classes([HasPrivilege.for_action(Action.CREATE_PLATFORM_ASSISTANT)])
def platform_assistants(request):
    if request.method == 'GET':
        accounts = Account.objects.filter(
            role__in=[Role.PLATFORM_ASSISTANT, Role.PLATFORM_OWNER]
        ).order_by('name')
        return Response(AccountSerializer(accounts, many=True).data)

    serializer = PlatformAssistantCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    account = account_service.create_platform_assistant(request.user, **serializer.validated_data)
    return Response(AccountSerializer(account).data, status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Email all salon admins",
    request=BulkEmailSerializer,
    responses={200: OpenApiResponse(description="Number of recipients reached")},
    tags=['Platform']
)
@api_view(['POST'])
@permission_classes([HasPrivilege.for_action(Action.SEND_BULK_EMAIL)])
def platform_bulk_email(request):
    serializer = BulkEmailSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    recipients = Account.objects.filter(role=Role.ADMIN, is_active=True, salon__isnull=False)
    if data.get('license_status'):
        recipients = recipients.filter(salon__license__status=data['license_status'])

    delivered = EmailNotificationService.send_announcement(recipients, data['subject'], data['body'])
    return Response({'recipients': recipients.count(), 'delivered': len(delivered)})
