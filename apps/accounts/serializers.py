from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """User profile with the current debt (positive means the user owes money)."""

    balance = serializers.DecimalField(
        source='get_balance.debt',
        max_digits=12,
        decimal_places=2,
        read_only=True,
    )

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'is_staff',
            'balance',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True, max_length=150)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
