"""
Licensing and platform administration serializers
"""
from rest_framework import serializers

from apps.authentication.models import Account
from apps.core.utils.constants import LICENSE_PLANS, LICENSE_STATUSES, PAYMENT_METHODS
from apps.salons.models import Salon
from .models import License


class LicenseSerializer(serializers.ModelSerializer):
    plan_display = serializers.CharField(source='get_plan_display', read_only=True)

    class Meta:
        model = License
        fields = [
            'id', 'key', 'plan', 'plan_display', 'status', 'valid_until',
            'booking_limit', 'has_waiting_list', 'report_level', 'updated_at'
        ]
        read_only_fields = fields


class LicenseUpdateSerializer(serializers.Serializer):
    """Administrative license update. Every field is optional."""
    plan = serializers.ChoiceField(choices=LICENSE_PLANS, required=False)
    status = serializers.ChoiceField(choices=LICENSE_STATUSES, required=False)
    valid_until = serializers.DateTimeField(required=False)
    booking_limit = serializers.IntegerField(min_value=0, required=False)
    has_waiting_list = serializers.BooleanField(required=False)
    report_level = serializers.IntegerField(min_value=1, max_value=3, required=False)


class LicenseStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=LICENSE_STATUSES)


class SubscriptionActivationSerializer(serializers.Serializer):
    plan = serializers.ChoiceField(choices=[(code, label) for code, label in LICENSE_PLANS if code != 'trial'])
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    payment_method = serializers.ChoiceField(choices=PAYMENT_METHODS, required=False, default='transfer')


class SalonAdminSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ['id', 'name', 'email']


class PlatformSalonSerializer(serializers.ModelSerializer):
    """Salon row in the platform listing"""
    license = serializers.SerializerMethodField()
    admin = serializers.SerializerMethodField()

    class Meta:
        model = Salon
        fields = ['id', 'name', 'slug', 'email', 'phone', 'is_active', 'created_at', 'license', 'admin']

    def get_license(self, obj) -> dict:
        license = getattr(obj, 'license', None)
        return LicenseSerializer(license).data if license else None

    def get_admin(self, obj) -> dict:
        admin = next((account for account in obj.accounts.all() if account.role == 'admin'), None)
        return SalonAdminSerializer(admin).data if admin else None


class SalonProvisionSerializer(serializers.Serializer):
    """Platform-side salon creation"""
    name = serializers.CharField(max_length=255)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    address = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    plan = serializers.ChoiceField(choices=LICENSE_PLANS)
    months = serializers.IntegerField(min_value=1, max_value=36, required=False)
    admin_name = serializers.CharField(max_length=255)
    admin_email = serializers.EmailField()
    admin_password = serializers.CharField(write_only=True, min_length=8)


class BulkEmailSerializer(serializers.Serializer):
    subject = serializers.CharField(max_length=200)
    body = serializers.CharField()
    license_status = serializers.ChoiceField(
        choices=LICENSE_STATUSES,
        required=False,
        help_text='Only salons whose license has this status'
    )
