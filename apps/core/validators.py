"""
Custom validators
"""
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _


def validate_non_negative_decimal(value):
    """
    Validate that a price or amount is not negative
    """
    if value < 0:
        raise ValidationError(
            _('Value cannot be negative.')
        )


def validate_duration(value):
    """
    Validate duration in minutes (must be positive and reasonable)
    """
    if value <= 0 or value > 480:  # Max 8 hours
        raise ValidationError(
            _('Duration must be between 1 and 480 minutes.')
        )
