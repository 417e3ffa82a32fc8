from rest_framework.exceptions import ValidationError

from core.api.permissions import get_requested_restaurant_id
from core.exceptions import NotFoundError
from food.models import Restaurant


class RestaurantScopedQuerysetMixin:
    """
        Mixin for list views over models that hang off a restaurant. Superusers
        see everything, everybody else only rows of restaurants they own.
    """
    model_class = None
    request = None
    restaurant_field_name = 'restaurant'

    def get_base_queryset(self):
        return self.model_class.objects.all()

    def get_queryset(self):
        queryset = self.get_base_queryset()
        if self.request.user.is_superuser:
            return queryset
        return queryset.filter(**{f'{self.restaurant_field_name}__owner': self.request.user})


class RestaurantParamMixin:
    """Resolves the mandatory ``restaurant`` param and checks object permissions on it."""
    request = None

    def get_restaurant(self):
        restaurant_id = get_requested_restaurant_id(self.request)
        if restaurant_id is None:
            raise ValidationError({'restaurant': 'restaurant must be provided in query params!'})
        restaurant = Restaurant.objects.select_related('plan').filter(id=restaurant_id).first()
        if restaurant is None:
            raise NotFoundError('Restaurant not found.')
        self.check_object_permissions(self.request, restaurant)
        return restaurant
