from rest_framework.exceptions import ValidationError
from rest_framework.permissions import BasePermission

from core.exceptions import NotFoundError
from food.models import Restaurant


def get_requested_restaurant_id(request):
    """Restaurant id sent with the request body, falling back to the query string."""
    restaurant_id = None
    if isinstance(getattr(request, 'data', None), dict):
        restaurant_id = request.data.get('restaurant', None)
    if restaurant_id in (None, ''):
        restaurant_id = request.query_params.get('restaurant', None)
    if restaurant_id in (None, ''):
        return None
    try:
        return int(restaurant_id)
    except (TypeError, ValueError):
        raise ValidationError({'restaurant': 'A valid integer is required.'})


class HasRestaurantAccess(BasePermission):
    """
    Vendor access: the restaurant named in the request must belong to the caller.
    """
    message = 'You do not have access to this restaurant.'

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False
        if request.user.is_superuser:
            return True

        restaurant_id = get_requested_restaurant_id(request)
        if restaurant_id is None:
            return True
        restaurant = Restaurant.objects.filter(id=restaurant_id).only('id', 'owner').first()
        if restaurant is None:
            raise NotFoundError('Restaurant not found.')
        return restaurant.owner_id == request.user.id

    def has_object_permission(self, request, view, obj):
        if request.user.is_superuser:
            return True
        restaurant = obj if isinstance(obj, Restaurant) else obj.restaurant
        return restaurant is not None and restaurant.owner_id == request.user.id
