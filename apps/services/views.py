"""
Service views
"""
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authentication.roles import Action
from apps.core.views import TenantScopedViewSet
from .repositories import ServiceRepository
from .serializers import ServiceSerializer


@extend_schema_view(
    list=extend_schema(summary="List services", tags=['Services']),
    retrieve=extend_schema(summary="Get service details", tags=['Services']),
    create=extend_schema(summary="Create service", tags=['Services']),
    update=extend_schema(summary="Update service", tags=['Services']),
    partial_update=extend_schema(summary="Partially update service", tags=['Services']),
    destroy=extend_schema(summary="Delete service", tags=['Services']),
)
class ServiceViewSet(TenantScopedViewSet):
    """Salon service catalog"""
    repository_class = ServiceRepository
    serializer_class = ServiceSerializer
    read_action = Action.VIEW_SCHEDULE
    write_action = Action.MANAGE_CATALOG
    filterset_fields = ['is_active']
    search_fields = ['name']
    ordering_fields = ['name', 'price', 'duration_minutes', 'created_at']
    ordering = ['name']
