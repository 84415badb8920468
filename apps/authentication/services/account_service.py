"""
Account lifecycle: salon registration, login and account creation.
"""
import logging

from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction

from apps.core.exceptions import Forbidden, NotFound, Unauthenticated, ValidationFailed
from apps.notifications.services.email_service import EmailNotificationService
from apps.salons.services import create_salon
from apps.subscriptions.subscription_service import create_trial_license, issue_license, license_summary

from ..models import Account
from ..roles import Action, Role, TENANT_ROLES, has_privilege
from .token_service import token_service

logger = logging.getLogger(__name__)


def ensure_email_available(email: str) -> None:
    if Account.objects.filter(email__iexact=email).exists():
        raise ValidationFailed("An account with this email already exists.", field='email')


def _create_account(email, password, **fields) -> Account:
    ensure_email_available(email)
    try:
        return Account.objects.create_user(email=email, password=password, **fields)
    except IntegrityError:
        raise ValidationFailed("An account with this email already exists.", field='email')


def register_salon(salon_name, admin_name, email, password, phone='', address='', notifier=EmailNotificationService):
    """
    Self-registration: salon, trial license and admin account in one unit.

    Returns:
        tuple: (account, salon, license)
    """
    with transaction.atomic():
        salon = create_salon(salon_name, phone=phone, email=email, address=address)
        license = create_trial_license(salon)
        account = _create_account(email, password, name=admin_name, role=Role.ADMIN, salon=salon)
        transaction.on_commit(lambda: notifier.send_welcome(account, salon, license))

    logger.info(f"Registered salon {salon.slug} with admin {account.email}")
    return account, salon, license


def provision_salon(created_by, salon_name, plan, admin_name, admin_email, admin_password,
                    months=None, phone='', address=''):
    """
    Platform-side salon creation with a license of the chosen plan.

    Returns:
        tuple: (account, salon, license)
    """
    with transaction.atomic():
        salon = create_salon(salon_name, phone=phone, email=admin_email, address=address)
        license = issue_license(salon, plan, months=months)
        account = _create_account(
            admin_email,
            admin_password,
            name=admin_name,
            role=Role.ADMIN,
            salon=salon,
            created_by=created_by,
        )

    logger.info(f"{created_by.email} provisioned salon {salon.slug} on {plan}")
    return account, salon, license


def create_tenant_account(creator, salon_id, name, email, password, role) -> Account:
    """Account for salon staff, created by a salon admin or platform staff."""
    if role not in TENANT_ROLES:
        raise ValidationFailed("Only salon roles can be assigned here.", field='role')
    account = _create_account(email, password, name=name, role=role, salon_id=salon_id, created_by=creator)
    logger.info(f"{creator.email} created {role} account {account.email} for salon {salon_id}")
    return account


def create_platform_assistant(creator, name, email, password) -> Account:
    if not has_privilege(creator.role, Action.CREATE_PLATFORM_ASSISTANT):
        raise Forbidden("Only the platform owner can add platform assistants.")
    account = _create_account(email, password, name=name, role=Role.PLATFORM_ASSISTANT, created_by=creator)
    logger.info(f"{creator.email} created platform assistant {account.email}")
    return account


def delete_tenant_account(actor, salon_id, account_id) -> None:
    account = Account.objects.filter(pk=account_id, salon_id=salon_id).first()
    if account is None:
        raise NotFound("User not found.")
    if account.pk == actor.pk:
        raise ValidationFailed("You cannot delete your own account.")
    account.delete()
    logger.info(f"{actor.email} deleted account {account_id} from salon {salon_id}")


def login(email, password) -> Account:
    """
    Check credentials.

    Raises:
        Unauthenticated: unknown email, wrong password or inactive account
    """
    account = authenticate(username=email, password=password)
    if account is None:
        logger.info(f"Failed login for {email}")
        raise Unauthenticated("Invalid email or password.")
    return account


def session_payload(account, include_token=True) -> dict:
    """Login / me response: account, token and salon with license summary."""
    salon = account.salon
    payload = {
        'id': str(account.id),
        'name': account.name,
        'email': account.email,
        'role': account.role,
        'salon': None,
    }
    if include_token:
        payload['token'] = token_service.issue(account)
    if salon is not None:
        license = getattr(salon, 'license', None)
        payload['salon'] = {
            'id': str(salon.id),
            'name': salon.name,
            'slug': salon.slug,
            'license': license_summary(license) if license else None,
        }
    return payload
