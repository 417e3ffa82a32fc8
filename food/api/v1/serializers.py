from food.api.base.serializers import (BaseRestaurantAccountSerializer,
                                       BaseRestaurantSerializer)


class RestaurantSerializer(BaseRestaurantSerializer):
    pass


class RestaurantAccountSerializer(BaseRestaurantAccountSerializer):
    pass
