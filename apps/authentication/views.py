"""
Authentication views
"""
from datetime import datetime

from django.db import connection
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from apps.core.permissions import HasPrivilege
from apps.core.serializers import ErrorResponseSerializer
from apps.core.tenancy import current_tenant_id
from .models import Account
from .roles import Action
from .serializers import (
    AccountCreateSerializer,
    AccountSerializer,
    HealthCheckSerializer,
    LoginSerializer,
    SalonRegistrationSerializer,
    SessionSerializer,
)
from .services import account_service


@extend_schema(
    summary="Login with email/password",
    description="Returns the account, a bearer token and the salon with its license summary.",
    request=LoginSerializer,
    responses={
        200: SessionSerializer,
        401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials")
    },
    tags=['Authentication - Public']
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password"""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    account = account_service.login(
        serializer.validated_data['email'],
        serializer.validated_data['password']
    )
    return Response(account_service.session_payload(account))


@extend_schema(
    summary="Register salon",
    description="Creates the salon, a 14-day trial license and the admin account in one step.",
    request=SalonRegistrationSerializer,
    responses={
        201: SessionSerializer,
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation errors or email already used")
    },
    tags=['Authentication - Public']
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_salon(request):
    """Register a new salon with its admin"""
    serializer = SalonRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    account, _, _ = account_service.register_salon(
        salon_name=data['salon_name'],
        admin_name=data['name'],
        email=data['email'],
        password=data['password'],
        phone=data['phone'],
        address=data['address'],
    )
    return Response(account_service.session_payload(account), status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Get current account",
    description="Readable even when the salon license is inactive; ``license_error`` then explains why.",
    responses={
        200: SessionSerializer,
        401: OpenApiResponse(description="Unauthorized")
    },
    tags=['Authentication']
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_account(request):
    """
    Get current authenticated account
    """
    payload = account_service.session_payload(request.user, include_token=False)
    context = request.gate
    if context.acting_as:
        payload['acting_as_salon'] = str(context.tenant_id)
    if context.license_error is not None:
        payload['license_error'] = {
            'code': context.license_error.default_code,
            'message': str(context.license_error.detail),
        }
    return Response(payload)


@extend_schema(
    summary="Health check",
    description="Check API health status including database connectivity",
    responses={200: HealthCheckSerializer},
    tags=['System']
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return Response({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'database': db_status,
    })


@extend_schema(
    methods=['GET'],
    summary="List salon users",
    responses={200: AccountSerializer(many=True)},
    tags=['Users']
)
@extend_schema(
    methods=['POST'],
    summary="Create salon user",
    request=AccountCreateSerializer,
    responses={201: AccountSerializer, 400: OpenApiResponse(description="Validation errors")},
    tags=['Users']
)
@api_view(['GET', 'POST'])
@permission_classes([HasPrivilege.for_action(Action.MANAGE_USERS)])
def users(request):
    """Accounts of the salon in context"""
    salon_id = current_tenant_id(request)

    if request.method == 'GET':
        accounts = Account.objects.filter(salon_id=salon_id).order_by('name')
        return Response(AccountSerializer(accounts, many=True).data)

    serializer = AccountCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    account = account_service.create_tenant_account(
        creator=request.user,
        salon_id=salon_id,
        **serializer.validated_data
    )
    return Response(AccountSerializer(account).data, status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Delete salon user",
    responses={204: None, 400: OpenApiResponse(description="Cannot delete yourself"), 404: OpenApiResponse(description="Not found")},
    tags=['Users']
)
@api_view(['DELETE'])
@permission_classes([HasPrivilege.for_action(Action.MANAGE_USERS)])
def user_detail(request, account_id):
    account_service.delete_tenant_account(request.user, current_tenant_id(request), account_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
