"""
Finance serializers
"""
from rest_framework import serializers

from apps.core.utils.constants import TRANSACTION_TYPE_EXPENSE, TRANSACTION_TYPE_INCOME
from .models import Transaction


class TransactionSerializer(serializers.ModelSerializer):
    """Ledger entry. Salon users may record income and expenses only."""

    class Meta:
        model = Transaction
        fields = [
            'id', 'description', 'amount', 'type', 'category',
            'payment_method', 'date', 'appointment', 'created_at'
        ]
        read_only_fields = ['id', 'appointment', 'created_at']

    def validate_type(self, value):
        if value not in (TRANSACTION_TYPE_INCOME, TRANSACTION_TYPE_EXPENSE):
            raise serializers.ValidationError("Only income and expense entries can be recorded here.")
        return value

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Amount must be greater than zero.")
        return value


class ReportQuerySerializer(serializers.Serializer):
    start = serializers.DateField(required=False)
    end = serializers.DateField(required=False)

    def validate(self, data):
        if data.get('start') and data.get('end') and data['start'] > data['end']:
            raise serializers.ValidationError("start must be on or before end.")
        return data
