"""
Appointment serializers
"""
from rest_framework import serializers

from apps.core.utils.constants import (
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_SCHEDULED,
    PAYMENT_METHODS,
)
from apps.finance.serializers import TransactionSerializer
from .models import Appointment

TIME_FORMAT = '%H:%M'


class AppointmentSerializer(serializers.ModelSerializer):
    """Detailed appointment serializer for output"""
    client_name = serializers.CharField(source='client.name', read_only=True)
    client_loyalty_id = serializers.CharField(source='client.loyalty_id', read_only=True)
    service_name = serializers.CharField(source='service.name', read_only=True, default=None)
    professional_name = serializers.CharField(source='professional.name', read_only=True, default=None)
    start_time = serializers.TimeField(format=TIME_FORMAT, read_only=True)
    end_time = serializers.TimeField(format=TIME_FORMAT, read_only=True)

    class Meta:
        model = Appointment
        fields = [
            'id', 'client', 'client_name', 'client_loyalty_id',
            'service', 'service_name', 'professional', 'professional_name',
            'date', 'start_time', 'end_time', 'status', 'price',
            'notes', 'source', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class AppointmentCreateSerializer(serializers.Serializer):
    """Input for staff-facing booking"""
    client_id = serializers.UUIDField()
    service_id = serializers.UUIDField(required=False, allow_null=True)
    professional_id = serializers.UUIDField(required=False, allow_null=True)
    date = serializers.DateField()
    start_time = serializers.TimeField(input_formats=[TIME_FORMAT, '%H:%M:%S'])
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class AppointmentUpdateSerializer(serializers.Serializer):
    """Reschedule / edit input. Every field is optional."""
    service_id = serializers.UUIDField(required=False, allow_null=True)
    professional_id = serializers.UUIDField(required=False, allow_null=True)
    date = serializers.DateField(required=False)
    start_time = serializers.TimeField(required=False, input_formats=[TIME_FORMAT, '%H:%M:%S'])
    notes = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(
        required=False,
        choices=[APPOINTMENT_STATUS_SCHEDULED, APPOINTMENT_STATUS_CANCELLED]
    )


class CheckoutSerializer(serializers.Serializer):
    payment_method = serializers.ChoiceField(choices=PAYMENT_METHODS, default='cash')
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, min_value=0)


class CheckoutResponseSerializer(serializers.Serializer):
    appointment = AppointmentSerializer()
    transaction = TransactionSerializer()


class WaitingListSerializer(serializers.Serializer):
    """Today's board grouped by stage"""
    date = serializers.DateField()
    waiting = AppointmentSerializer(many=True)
    completed = AppointmentSerializer(many=True)
    cancelled = AppointmentSerializer(many=True)


class PublicClientDataSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    email = serializers.EmailField(required=False, allow_blank=True, default='')
    loyalty_id = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')

    def validate_loyalty_id(self, value):
        return value.strip().upper()

    def validate(self, data):
        if not data.get('phone') and not data.get('loyalty_id'):
            raise serializers.ValidationError("Provide a phone number or a loyalty id.")
        return data


class PublicBookingSerializer(serializers.Serializer):
    """Online booking request"""
    salon_id = serializers.UUIDField()
    service_id = serializers.UUIDField(required=False, allow_null=True)
    professional_id = serializers.UUIDField(required=False, allow_null=True)
    date = serializers.DateField()
    start_time = serializers.TimeField(input_formats=[TIME_FORMAT, '%H:%M:%S'])
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    client_data = PublicClientDataSerializer()
