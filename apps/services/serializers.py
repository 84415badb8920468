"""
Service serializers
"""
from rest_framework import serializers
from .models import Service


class ServiceSerializer(serializers.ModelSerializer):
    """Serializer for Service model"""

    class Meta:
        model = Service
        fields = ['id', 'name', 'price', 'duration_minutes', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Price cannot be negative")
        return value

    def validate_duration_minutes(self, value):
        if value < 5:
            raise serializers.ValidationError("Duration must be at least 5 minutes")
        if value > 480:  # 8 hours
            raise serializers.ValidationError("Duration cannot exceed 8 hours")
        return value


class PublicServiceSerializer(serializers.ModelSerializer):
    """Service as shown on public booking pages"""
    salon_id = serializers.UUIDField(read_only=True)
    salon_name = serializers.CharField(source='salon.name', read_only=True)

    class Meta:
        model = Service
        fields = ['id', 'salon_id', 'salon_name', 'name', 'price', 'duration_minutes']
