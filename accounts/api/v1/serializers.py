from accounts.api.base.serializers import (BaseSubscriptionPlanSerializer,
                                           BaseUserSerializer)


class UserSerializer(BaseUserSerializer):
    pass


class SubscriptionPlanSerializer(BaseSubscriptionPlanSerializer):
    pass
