"""
Support ticket serializers
"""
from rest_framework import serializers

from apps.core.utils.constants import TICKET_PRIORITIES, TICKET_STATUSES
from .models import Ticket, TicketMessage


class TicketMessageSerializer(serializers.ModelSerializer):
    author_name = serializers.CharField(source='author.display_name', read_only=True, default=None)

    class Meta:
        model = TicketMessage
        fields = ['id', 'author', 'author_name', 'author_role', 'content', 'is_read', 'created_at']
        read_only_fields = fields


class TicketSerializer(serializers.ModelSerializer):
    salon_name = serializers.CharField(source='salon.name', read_only=True)
    opened_by_name = serializers.CharField(source='opened_by.display_name', read_only=True, default=None)

    class Meta:
        model = Ticket
        fields = [
            'id', 'salon', 'salon_name', 'subject', 'status', 'priority',
            'opened_by', 'opened_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class TicketDetailSerializer(TicketSerializer):
    messages = TicketMessageSerializer(many=True, read_only=True)

    class Meta(TicketSerializer.Meta):
        fields = TicketSerializer.Meta.fields + ['messages']
        read_only_fields = fields


class TicketCreateSerializer(serializers.Serializer):
    subject = serializers.CharField(max_length=255)
    content = serializers.CharField()
    priority = serializers.ChoiceField(choices=TICKET_PRIORITIES, default='medium')


class TicketMessageCreateSerializer(serializers.Serializer):
    content = serializers.CharField()


class TicketStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TICKET_STATUSES)
