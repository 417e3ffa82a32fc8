from rest_framework.generics import ListAPIView, RetrieveAPIView
from rest_framework.permissions import IsAuthenticated

from accounts.api.base.serializers import (BaseSubscriptionPlanSerializer,
                                           BaseUserSerializer)
from accounts.models import SubscriptionPlan


class BaseUserRetrieveAPIView(RetrieveAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = BaseUserSerializer

    def get_object(self):
        return self.request.user


class BaseSubscriptionPlanListAPIView(ListAPIView):
    """Active plans a restaurant can move to. Inactive plans stay hidden."""
    permission_classes = [IsAuthenticated]
    serializer_class = BaseSubscriptionPlanSerializer
    pagination_class = None

    def get_queryset(self):
        return SubscriptionPlan.objects.active()


class BaseSubscriptionPlanRetrieveAPIView(RetrieveAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = BaseSubscriptionPlanSerializer
    queryset = SubscriptionPlan.objects.all()
