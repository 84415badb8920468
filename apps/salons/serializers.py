"""
Salon serializers
"""
from rest_framework import serializers

from apps.services.serializers import PublicServiceSerializer
from apps.staff.serializers import PublicProfessionalSerializer
from .models import Salon


class SalonSettingsSerializer(serializers.ModelSerializer):
    """Salon settings as edited by the salon admin"""

    class Meta:
        model = Salon
        fields = [
            'id', 'name', 'slug', 'phone', 'email', 'address',
            'tax_id', 'logo', 'receipt_footer', 'is_active', 'created_at'
        ]
        read_only_fields = ['id', 'slug', 'is_active', 'created_at']


class PublicSalonSerializer(serializers.ModelSerializer):
    """Salon card shown in the public directory"""

    class Meta:
        model = Salon
        fields = ['id', 'name', 'slug', 'phone', 'email', 'address', 'logo']


class PublicSalonDetailSerializer(PublicSalonSerializer):
    services = serializers.SerializerMethodField()
    professionals = serializers.SerializerMethodField()

    class Meta(PublicSalonSerializer.Meta):
        fields = PublicSalonSerializer.Meta.fields + ['services', 'professionals']

    def get_services(self, obj) -> list:
        services = self.context['services']
        return PublicServiceSerializer(services, many=True).data

    def get_professionals(self, obj) -> list:
        professionals = self.context['professionals']
        return PublicProfessionalSerializer(professionals, many=True).data
