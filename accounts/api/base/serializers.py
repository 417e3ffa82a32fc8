from rest_framework import serializers

from accounts.models import SubscriptionPlan, User


class BaseUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'email', 'first_name', 'last_name', 'phone', 'role']
        read_only_fields = fields


class BaseSubscriptionPlanSerializer(serializers.ModelSerializer):
    class Meta:
        model = SubscriptionPlan
        fields = ['id', 'name', 'price', 'currency', 'duration_days',
                  'features', 'max_menu_items', 'is_active']
        read_only_fields = fields
