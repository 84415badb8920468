"""
Salon helpers shared by registration and platform administration
"""
import random

from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone
from django.utils.text import slugify

from apps.core.exceptions import NotFound
from apps.core.utils.constants import LICENSE_STATUS_ACTIVE

from .models import Salon


def generate_salon_slug(name: str) -> str:
    """
    Build a unique slug from the salon name plus a random 4-digit suffix.
    """
    base = slugify(name)[:70] or 'salon'
    while True:
        slug = f"{base}-{random.randint(1000, 9999)}"
        if not Salon.objects.filter(slug=slug).exists():
            return slug


def create_salon(name: str, **fields) -> Salon:
    """Create a salon with a freshly generated slug."""
    return Salon.objects.create(name=name, slug=generate_salon_slug(name), **fields)


def public_salons():
    """Salons that can be found and booked online: active, with a valid license."""
    return Salon.objects.filter(
        is_active=True,
        license__status=LICENSE_STATUS_ACTIVE,
        license__valid_until__gt=timezone.now(),
    )


def get_public_salon(salon_id) -> Salon:
    try:
        salon = public_salons().filter(pk=salon_id).first()
    except (ValueError, DjangoValidationError):
        salon = None
    if salon is None:
        raise NotFound("Salon not found or not accepting online bookings.")
    return salon
