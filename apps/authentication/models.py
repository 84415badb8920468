"""
Account model
"""
import uuid

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from .managers import AccountManager
from .roles import Role, is_platform_role, role_level


class Account(AbstractBaseUser, PermissionsMixin):
    """
    Custom user model.

    Tenant roles (professional, reception, admin) belong to one salon.
    Platform roles (platform_assistant, platform_owner) have no salon.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Basic fields
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255, blank=True)

    role = models.CharField(
        max_length=30,
        choices=Role.choices,
        default=Role.PROFESSIONAL
    )

    salon = models.ForeignKey(
        'salons.Salon',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='accounts'
    )

    created_by = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_accounts'
    )

    # Status
    is_active = models.BooleanField(default=True)

    # Admin fields
    is_staff = models.BooleanField(default=False)
    # is_superuser provided by PermissionsMixin
    # last_login and password provided by AbstractBaseUser

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = AccountManager()

    class Meta:
        db_table = 'accounts'
        verbose_name = 'Account'
        verbose_name_plural = 'Accounts'
        ordering = ['-created_at']

    def __str__(self):
        return self.email

    @property
    def display_name(self):
        return self.name or self.email

    @property
    def is_platform(self):
        return is_platform_role(self.role)

    @property
    def level(self):
        return role_level(self.role)
