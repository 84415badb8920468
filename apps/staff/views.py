"""
Staff views
"""
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authentication.roles import Action
from apps.core.views import TenantScopedViewSet
from .repositories import ProfessionalRepository
from .serializers import ProfessionalSerializer


@extend_schema_view(
    list=extend_schema(summary="List professionals", tags=['Staff']),
    retrieve=extend_schema(summary="Get professional", tags=['Staff']),
    create=extend_schema(summary="Add professional", tags=['Staff']),
    update=extend_schema(summary="Update professional", tags=['Staff']),
    partial_update=extend_schema(summary="Partially update professional", tags=['Staff']),
    destroy=extend_schema(summary="Remove professional", tags=['Staff']),
)
class ProfessionalViewSet(TenantScopedViewSet):
    """Salon professionals"""
    repository_class = ProfessionalRepository
    serializer_class = ProfessionalSerializer
    read_action = Action.VIEW_SCHEDULE
    write_action = Action.MANAGE_CATALOG
    filterset_fields = ['is_active']
    search_fields = ['name', 'specialty']
    ordering = ['name']
