from accounts.api.base.views import (BaseSubscriptionPlanListAPIView,
                                     BaseSubscriptionPlanRetrieveAPIView,
                                     BaseUserRetrieveAPIView)
from accounts.api.v1.serializers import (SubscriptionPlanSerializer,
                                         UserSerializer)


class UserRetrieveAPIView(BaseUserRetrieveAPIView):
    serializer_class = UserSerializer


class SubscriptionPlanListAPIView(BaseSubscriptionPlanListAPIView):
    serializer_class = SubscriptionPlanSerializer


class SubscriptionPlanRetrieveAPIView(BaseSubscriptionPlanRetrieveAPIView):
    serializer_class = SubscriptionPlanSerializer
