"""
Core serializers
"""
from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Error envelope returned by every failing endpoint"""
    error = serializers.BooleanField(default=True)
    code = serializers.CharField()
    message = serializers.CharField()
    status_code = serializers.IntegerField()
    errors = serializers.DictField(required=False)

