from django.urls import path

from food.api.v1.views import RestaurantAccountAPIView, RestaurantListAPIView

urlpatterns = [
    path('restaurant/', RestaurantListAPIView.as_view(), name='restaurant-list'),
    path('restaurant/account/', RestaurantAccountAPIView.as_view(), name='restaurant-account'),
]
