"""
Availability serializers
"""
from rest_framework import serializers

from apps.staff.serializers import PublicProfessionalSerializer


class SlotQuerySerializer(serializers.Serializer):
    date = serializers.DateField()


class ProfessionalQuerySerializer(serializers.Serializer):
    date = serializers.DateField()
    time = serializers.TimeField(input_formats=['%H:%M', '%H:%M:%S'])


class SlotLoadSerializer(serializers.Serializer):
    time = serializers.CharField()
    booked = serializers.IntegerField()
    capacity = serializers.IntegerField()
    is_available = serializers.BooleanField()


class AvailableSlotsResponseSerializer(serializers.Serializer):
    date = serializers.DateField()
    slots = serializers.ListField(child=serializers.CharField())


class AvailableProfessionalsResponseSerializer(serializers.Serializer):
    date = serializers.DateField()
    time = serializers.CharField()
    professionals = PublicProfessionalSerializer(many=True)
