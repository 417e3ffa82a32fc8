from rest_framework.generics import ListAPIView, RetrieveAPIView
from rest_framework.permissions import IsAuthenticated

from core.api.mixins import RestaurantParamMixin
from core.api.paginations import StandardResultsSetPagination
from core.api.permissions import HasRestaurantAccess
from food.api.base.serializers import (BaseRestaurantAccountSerializer,
                                       BaseRestaurantSerializer)
from food.models import Restaurant


class BaseRestaurantListAPIView(ListAPIView):
    serializer_class = BaseRestaurantSerializer
    pagination_class = StandardResultsSetPagination
    permission_classes = [IsAuthenticated]
    filterset_fields = ['status', 'city']
    search_fields = ['name']

    def get_queryset(self):
        return Restaurant.objects.owned_by(self.request.user)


class BaseRestaurantAccountAPIView(RestaurantParamMixin, RetrieveAPIView):
    """
        Balance, plan and expiry of one restaurant. The balance is re-read from
        the database on every call.
    """
    serializer_class = BaseRestaurantAccountSerializer
    permission_classes = [IsAuthenticated, HasRestaurantAccess]

    def get_object(self):
        return self.get_restaurant()
