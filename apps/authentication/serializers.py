"""
Authentication serializers
"""
from rest_framework import serializers

from .models import Account
from .roles import Role, TENANT_ROLES


class AccountSerializer(serializers.ModelSerializer):
    """Account for API responses"""
    salon_name = serializers.CharField(source='salon.name', read_only=True, default=None)

    class Meta:
        model = Account
        fields = ['id', 'email', 'name', 'role', 'salon', 'salon_name', 'is_active', 'created_by', 'created_at']
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class SalonRegistrationSerializer(serializers.Serializer):
    """Self-registration of a salon and its admin"""
    salon_name = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255, help_text='Admin full name')
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    address = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class AccountCreateSerializer(serializers.Serializer):
    """Salon staff account created by a salon admin"""
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)
    role = serializers.ChoiceField(choices=[
        (value, label) for value, label in Role.choices if value in TENANT_ROLES
    ])


class PlatformAssistantCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)


class LicenseSummarySerializer(serializers.Serializer):
    key = serializers.CharField()
    plan = serializers.CharField()
    plan_display = serializers.CharField()
    status = serializers.CharField()
    valid_until = serializers.DateTimeField()
    days_remaining = serializers.IntegerField()
    is_expired = serializers.BooleanField()
    booking_limit = serializers.IntegerField()
    has_waiting_list = serializers.BooleanField()
    report_level = serializers.IntegerField()


class SessionSalonSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    slug = serializers.CharField()
    license = LicenseSummarySerializer(allow_null=True)


class SessionSerializer(serializers.Serializer):
    """Login response"""
    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
    token = serializers.CharField(required=False)
    salon = SessionSalonSerializer(allow_null=True)


class HealthCheckSerializer(serializers.Serializer):
    """Serializer for health check response"""
    status = serializers.CharField()
    timestamp = serializers.DateTimeField()
    database = serializers.CharField()
