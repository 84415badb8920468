"""
DRF authentication backed by the tenancy gate
"""
from rest_framework import authentication


class TenancyGateAuthentication(authentication.BaseAuthentication):
    """
    Hands the account resolved by ``TenancyGateMiddleware`` to DRF.

    ``request.auth`` is the GateContext.
    """

    def authenticate(self, request):
        context = getattr(request._request, 'gate', None)
        if context is None:
            return None
        return (context.account, context)

    def authenticate_header(self, request):
        # Keeps 401 (instead of 403) for unauthenticated responses
        return 'Bearer'
