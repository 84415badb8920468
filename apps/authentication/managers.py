"""
Custom account manager
"""
from django.contrib.auth.base_user import BaseUserManager

from .roles import Role


class AccountManager(BaseUserManager):
    """
    Manager for email-identified accounts with hashed passwords.
    """

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save an account.
        """
        if not email:
            raise ValueError('The Email field must be set')

        extra_fields.setdefault('is_active', True)

        account = self.model(email=self.normalize_email(email), **extra_fields)
        if password:
            account.set_password(password)
        else:
            account.set_unusable_password()

        account.save(using=self._db)
        return account

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a platform owner with Django admin access.
        """
        extra_fields.setdefault('role', Role.PLATFORM_OWNER)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password=password, **extra_fields)

    def get_by_natural_key(self, username):
        return self.get(**{f'{self.model.USERNAME_FIELD}__iexact': username})
