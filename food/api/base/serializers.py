from rest_framework import serializers

from accounts.api.base.serializers import BaseSubscriptionPlanSerializer
from billing.utilities.plan_pricing import days_remaining
from food.models import Restaurant


class BaseRestaurantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Restaurant
        fields = ['id', 'uid', 'slug', 'name', 'owner_email', 'phone', 'address',
                  'city', 'currency', 'status']
        read_only_fields = fields


class BaseRestaurantAccountSerializer(serializers.ModelSerializer):
    plan = BaseSubscriptionPlanSerializer(read_only=True)
    days_remaining = serializers.SerializerMethodField()

    class Meta:
        model = Restaurant
        fields = ['id', 'uid', 'name', 'currency', 'account_balance', 'plan',
                  'plan_expiry_date', 'days_remaining', 'status']
        read_only_fields = fields

    def get_days_remaining(self, obj: Restaurant):
        if obj.plan_expiry_date is None:
            return None
        return days_remaining(obj.plan_expiry_date)
