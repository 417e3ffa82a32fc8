from food.api.base.views import (BaseRestaurantAccountAPIView,
                                 BaseRestaurantListAPIView)
from food.api.v1.serializers import (RestaurantAccountSerializer,
                                     RestaurantSerializer)


class RestaurantListAPIView(BaseRestaurantListAPIView):
    serializer_class = RestaurantSerializer


class RestaurantAccountAPIView(BaseRestaurantAccountAPIView):
    serializer_class = RestaurantAccountSerializer
