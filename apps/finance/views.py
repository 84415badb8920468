"""
Finance views: append-only ledger and gated reports
"""
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter, OpenApiResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.authentication.roles import Action
from apps.bookings.repositories import AppointmentRepository
from apps.core.permissions import HasPrivilege
from apps.core.tenancy import current_license, current_tenant_id
from apps.core.views import TenantScopedViewSet
from .repositories import TransactionRepository
from .serializers import ReportQuerySerializer, TransactionSerializer
from .services.reports import ReportService


@extend_schema_view(
    list=extend_schema(summary="List transactions", tags=['Finance']),
    retrieve=extend_schema(summary="Get transaction", tags=['Finance']),
    create=extend_schema(summary="Record transaction", tags=['Finance']),
)
class TransactionViewSet(TenantScopedViewSet):
    """Ledger entries. No update or delete."""
    repository_class = TransactionRepository
    serializer_class = TransactionSerializer
    read_action = Action.VIEW_FINANCE
    write_action = Action.RECORD_TRANSACTION
    http_method_names = ['get', 'post', 'head', 'options']
    filterset_fields = ['type', 'category', 'payment_method', 'date']
    search_fields = ['description', 'category']
    ordering_fields = ['date', 'amount', 'created_at']
    ordering = ['-date', '-created_at']


@extend_schema(
    summary="Financial report",
    description=(
        "Reports by license level: daily_flow (basic), sales_by_service and "
        "by_professional (extended), overview (full). Defaults to the last 30 days."
    ),
    parameters=[
        OpenApiParameter('start', str, description='First day (YYYY-MM-DD)'),
        OpenApiParameter('end', str, description='Last day (YYYY-MM-DD)'),
    ],
    responses={200: OpenApiResponse(description="Report rows"), 403: OpenApiResponse(description="Plan too low")},
    tags=['Finance']
)
@api_view(['GET'])
@permission_classes([HasPrivilege.for_action(Action.VIEW_FINANCE)])
def report(request, kind):
    tenant_id = current_tenant_id(request)
    ReportService.ensure_allowed(kind, current_license(request))

    query = ReportQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    reports = ReportService(TransactionRepository(tenant_id), AppointmentRepository(tenant_id))
    return Response(reports.build(kind, query.validated_data.get('start'), query.validated_data.get('end')))
