"""
Management command to create or update the platform owner account.
"""
import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.authentication.models import Account
from apps.authentication.roles import Role

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Create or update the platform owner account from PLATFORM_OWNER_EMAIL'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            type=str,
            help='Owner email (defaults to PLATFORM_OWNER_EMAIL)'
        )
        parser.add_argument(
            '--password',
            type=str,
            help='Owner password (defaults to PLATFORM_OWNER_PASSWORD)'
        )
        parser.add_argument(
            '--name',
            type=str,
            default='Platform Owner',
            help='Display name for a newly created owner'
        )

    def handle(self, *args, **options):
        email = options['email'] or settings.PLATFORM_OWNER_EMAIL
        password = options['password'] or settings.PLATFORM_OWNER_PASSWORD
        if not email:
            raise CommandError('No owner email. Set PLATFORM_OWNER_EMAIL or pass --email.')

        account = Account.objects.filter(email__iexact=email).first()
        if account is None:
            if not password:
                raise CommandError('No password for the new owner. Set PLATFORM_OWNER_PASSWORD or pass --password.')
            Account.objects.create_superuser(email=email, password=password, name=options['name'])
            self.stdout.write(self.style.SUCCESS(f'Created platform owner {email}'))
            logger.info(f"Created platform owner {email}")
            return

        account.role = Role.PLATFORM_OWNER
        account.salon = None
        account.is_active = True
        account.is_staff = True
        account.is_superuser = True
        if password:
            account.set_password(password)
        account.save()
        self.stdout.write(self.style.SUCCESS(f'Updated platform owner {email}'))
        logger.info(f"Updated platform owner {email}")
