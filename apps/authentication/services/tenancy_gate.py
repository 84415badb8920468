"""
Tenancy & license gate.

Runs before every gated API request and decides, in order:
1. whether the path is public (gate skipped entirely)
2. who is calling (bearer token, account reference or master key)
3. which salon the request acts on
4. whether that salon's license allows the request

The only write performed here is the lazy active -> expired transition of
a license whose expiry moment has passed.
"""
import hmac
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone

from apps.core.exceptions import (
    ApiError,
    Forbidden,
    LicenseExpired,
    LicenseInactive,
    LICENSE_ERRORS,
    NoLicense,
    NotFound,
    Unauthenticated,
)
from apps.core.messages import LICENSE
from apps.core.utils.constants import LICENSE_STATUS_ACTIVE, LICENSE_STATUS_EXPIRED
from apps.salons.models import Salon
from apps.subscriptions.models import License

from ..models import Account
from ..roles import is_platform_role
from .token_service import token_service

logger = logging.getLogger(__name__)

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')


@dataclass
class GateContext:
    """What the gate resolved for the current request."""
    account: Any
    tenant_id: Optional[uuid.UUID] = None
    license: Optional[License] = None
    license_error: Optional[ApiError] = None
    acting_as: bool = False

    @property
    def is_platform(self):
        return is_platform_role(self.account.role)


def _parse_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


class AccountDirectory:
    """Account and salon lookups used by the gate."""

    def by_id(self, account_id):
        account_id = _parse_uuid(account_id)
        if account_id is None:
            return None
        return Account.objects.select_related('salon').filter(pk=account_id).first()

    def by_email(self, email):
        if not email:
            return None
        return Account.objects.select_related('salon').filter(email__iexact=email).first()

    def salon_exists(self, salon_id) -> bool:
        try:
            return Salon.objects.filter(pk=salon_id).exists()
        except (ValueError, DjangoValidationError):
            return False


class LicenseStore:
    """License reads plus the conditional expiry write."""

    def for_salon(self, salon_id):
        return License.objects.filter(salon_id=salon_id).first()

    def mark_expired(self, license) -> bool:
        """
        Transition an active license to expired.

        Returns True only when this call changed the row.
        """
        updated = License.objects.filter(
            pk=license.pk,
            status=LICENSE_STATUS_ACTIVE
        ).update(status=LICENSE_STATUS_EXPIRED, updated_at=timezone.now())
        license.status = LICENSE_STATUS_EXPIRED
        return updated > 0


class TenancyGate:
    """
    Authenticates the caller, resolves the tenant and enforces the license.

    Collaborators are injected so the gate can be exercised with fakes and a
    fixed clock.
    """

    def __init__(
        self,
        accounts: AccountDirectory,
        licenses: LicenseStore,
        master_key: str = '',
        owner_email: str = '',
        clock: Callable = timezone.now,
        public_paths: Iterable[str] = (),
        exempt_read_paths: Iterable[str] = (),
    ):
        self.accounts = accounts
        self.licenses = licenses
        self.master_key = master_key or ''
        self.owner_email = owner_email or ''
        self.clock = clock
        self.public_paths = tuple(public_paths)
        self.exempt_read_paths = tuple(exempt_read_paths)

    @classmethod
    def from_settings(cls):
        return cls(
            accounts=AccountDirectory(),
            licenses=LicenseStore(),
            master_key=settings.PLATFORM_MASTER_KEY,
            owner_email=settings.PLATFORM_OWNER_EMAIL,
            public_paths=settings.TENANCY_GATE_PUBLIC_PATHS,
            exempt_read_paths=settings.LICENSE_EXEMPT_READ_PATHS,
        )

    # ------------------------------------------------------------------
    # Path rules
    # ------------------------------------------------------------------

    def is_public(self, path: str) -> bool:
        if not path.startswith('/api/'):
            return True
        return path.startswith(self.public_paths)

    def is_license_exempt(self, request) -> bool:
        return request.method in SAFE_METHODS and request.path_info.startswith(self.exempt_read_paths)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def resolve_account(self, request):
        """
        Resolve the calling account from the request headers.

        Raises:
            Unauthenticated: no header resolves to an active account
        """
        headers = request.headers
        account = None

        auth_header = headers.get('Authorization')
        if auth_header:
            payload = token_service.validate_bearer_token(auth_header)
            if payload:
                account = self.accounts.by_id(token_service.extract_account_id(payload))
        elif headers.get('X-Account-ID'):
            account = self.accounts.by_id(headers.get('X-Account-ID'))
        elif headers.get('X-Master-Key'):
            if self.master_key and hmac.compare_digest(headers.get('X-Master-Key'), self.master_key):
                account = self.accounts.by_email(self.owner_email)
            else:
                logger.warning("Rejected request with invalid master key")

        if account is None or not account.is_active:
            raise Unauthenticated(
                LICENSE['unauthenticated']['message'],
                next_steps=LICENSE['unauthenticated']['next_steps']
            )
        return account

    # ------------------------------------------------------------------
    # License
    # ------------------------------------------------------------------

    def check_license(self, license):
        """
        Raise the license failure for ``license``, if any.

        An active license past its expiry moment is transitioned to expired
        before the failure is raised.
        """
        if license is None:
            raise NoLicense(
                LICENSE['no_license']['message'],
                next_steps=LICENSE['no_license']['next_steps']
            )

        if license.status != LICENSE_STATUS_ACTIVE:
            reason = 'suspended' if license.status != LICENSE_STATUS_EXPIRED else 'expired'
            raise LicenseInactive(
                LICENSE[reason]['message'],
                license_status=license.status,
                next_steps=LICENSE[reason]['next_steps']
            )

        if license.is_past_due(self.clock()):
            if self.licenses.mark_expired(license):
                logger.warning(f"License {license.key} for salon {license.salon_id} expired")
            raise LicenseExpired(
                LICENSE['expired_today']['message'],
                license_status=LICENSE_STATUS_EXPIRED,
                next_steps=LICENSE['expired_today']['next_steps']
            )

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def evaluate(self, request) -> GateContext:
        """
        Run the gate for a non-public request.

        Returns:
            GateContext for downstream handlers

        Raises:
            ApiError subclass describing the rejection
        """
        account = self.resolve_account(request)

        if is_platform_role(account.role):
            return self._platform_context(account, request)

        if account.salon_id is None:
            raise Forbidden("This account is not linked to a salon.")

        context = GateContext(account=account, tenant_id=account.salon_id)
        context.license = self.licenses.for_salon(account.salon_id)

        try:
            self.check_license(context.license)
        except LICENSE_ERRORS as exc:
            if not self.is_license_exempt(request):
                raise
            context.license_error = exc

        return context

    def _platform_context(self, account, request) -> GateContext:
        # Platform staff are never license-checked, even when acting for a salon
        context = GateContext(account=account)
        salon_ref = request.headers.get('X-Act-As-Salon')
        if salon_ref:
            salon_id = _parse_uuid(salon_ref)
            if salon_id is None or not self.accounts.salon_exists(salon_id):
                raise NotFound("Salon not found.")
            context.tenant_id = salon_id
            context.license = self.licenses.for_salon(salon_id)
            context.acting_as = True
        return context
