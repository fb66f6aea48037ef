from django.contrib.auth.models import User
from rest_framework import serializers


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user representation embedded in action payloads."""
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields

    def get_name(self, obj):
        return obj.get_full_name() or obj.username
