"""
Helpers for reading the tenant context attached by the tenancy gate
"""
from apps.core.exceptions import ValidationFailed
from apps.core.messages import SCHEDULING


def current_tenant_id(request):
    """
    Salon id the request acts on.

    Platform accounts get one only when they send ``X-Act-As-Salon``.
    """
    tenant_id = getattr(request, 'tenant_id', None)
    if tenant_id is None:
        raise ValidationFailed(SCHEDULING['select_salon'])
    return tenant_id


def current_license(request):
    """License of the salon in context, or None."""
    context = getattr(request, 'gate', None)
    return context.license if context is not None else None
