"""
Tenancy gate middleware
"""
import logging

from django.http import JsonResponse

from apps.core.exceptions import ApiError, build_error_payload
from .services.tenancy_gate import TenancyGate

logger = logging.getLogger(__name__)


def gate_error_response(exc: ApiError) -> JsonResponse:
    """Render a gate rejection with the API error envelope."""
    payload = build_error_payload(
        exc.default_code,
        str(exc.detail),
        exc.status_code,
        **exc.extra
    )
    return JsonResponse(payload, status=exc.status_code)


class TenancyGateMiddleware:
    """
    Runs the tenancy gate for every non-public API request.

    On success the resolved context is attached as ``request.gate`` and the
    account and salon id as ``request.account`` / ``request.tenant_id``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        gate = TenancyGate.from_settings()

        if not gate.is_public(request.path_info):
            try:
                context = gate.evaluate(request)
            except ApiError as exc:
                logger.info(f"Gate rejected {request.method} {request.path_info}: {exc.default_code}")
                return gate_error_response(exc)

            request.gate = context
            request.account = context.account
            request.tenant_id = context.tenant_id
            request.user = context.account

        return self.get_response(request)
