"""
Client serializers
"""
from rest_framework import serializers
from .models import Client


class ClientSerializer(serializers.ModelSerializer):
    """Serializer for Client model. A loyalty id is generated when omitted."""

    class Meta:
        model = Client
        fields = ['id', 'name', 'phone', 'email', 'loyalty_id', 'notes', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {'loyalty_id': {'required': False}}


class ClientLookupSerializer(serializers.ModelSerializer):
    """Minimal client card returned by the public loyalty lookup"""

    class Meta:
        model = Client
        fields = ['name', 'phone', 'email', 'loyalty_id']
