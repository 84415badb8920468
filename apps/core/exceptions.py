"""
Custom exceptions and exception handler

Every error leaving the API uses one envelope:
    {"error": true, "code": <kind>, "message": <text>, "status_code": <n>, ...}
so the client can branch on ``code`` (e.g. renew vs. contact support).
"""
from rest_framework.views import exception_handler
from rest_framework.exceptions import APIException
from rest_framework import status


class ApiError(APIException):
    """
    Base class for the application's error taxonomy.

    ``extra`` carries additional machine-readable fields that are merged into
    the response envelope.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request failed.'
    default_code = 'error'

    def __init__(self, detail=None, code=None, **extra):
        super().__init__(detail=detail, code=code)
        self.extra = extra


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication credentials were not provided or are invalid.'
    default_code = 'unauthenticated'


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'forbidden'


class NoLicense(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'This salon has no license.'
    default_code = 'no_license'


class LicenseInactive(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'This salon license is not active.'
    default_code = 'license_inactive'


class LicenseExpired(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'This salon license expired.'
    default_code = 'license_expired'


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource conflict.'
    default_code = 'conflict'


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'validation_failed'


LICENSE_ERRORS = (NoLicense, LicenseInactive, LicenseExpired)

# DRF built-in codes mapped onto our taxonomy
CODE_ALIASES = {
    'not_authenticated': 'unauthenticated',
    'authentication_failed': 'unauthenticated',
    'permission_denied': 'forbidden',
    'invalid': 'validation_failed',
    'parse_error': 'validation_failed',
    'required': 'validation_failed',
}


def build_error_payload(code, message, status_code, **extra):
    """Build the error envelope shared by the exception handler and middleware."""
    payload = {
        'error': True,
        'code': code,
        'message': message,
        'status_code': status_code,
    }
    payload.update(extra)
    return payload


def _resolve_code(exc):
    if isinstance(exc, ApiError):
        return exc.default_code
    codes = exc.get_codes() if hasattr(exc, 'get_codes') else None
    if not isinstance(codes, str):
        return 'validation_failed'
    return CODE_ALIASES.get(codes, codes)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that normalises every error to the envelope
    """
    response = exception_handler(exc, context)

    if response is not None:
        data = response.data
        extra = getattr(exc, 'extra', {}) or {}

        if isinstance(data, dict) and 'detail' in data:
            message = str(data['detail'])
        else:
            message = 'Invalid input.'
            # Field errors from serializers
            extra = {**extra, 'errors': data}

        response.data = build_error_payload(
            _resolve_code(exc),
            message,
            response.status_code,
            **extra
        )

    return response
