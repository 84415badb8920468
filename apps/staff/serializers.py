"""
Staff serializers
"""
from rest_framework import serializers
from .models import Professional


class ProfessionalSerializer(serializers.ModelSerializer):
    """Serializer for Professional model"""

    class Meta:
        model = Professional
        fields = ['id', 'name', 'specialty', 'color', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class PublicProfessionalSerializer(serializers.ModelSerializer):
    """Professional as shown to clients booking online"""

    class Meta:
        model = Professional
        fields = ['id', 'name', 'specialty', 'color']
