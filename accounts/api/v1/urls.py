from django.urls import path

from accounts.api.v1.views import (SubscriptionPlanListAPIView,
                                   SubscriptionPlanRetrieveAPIView,
                                   UserRetrieveAPIView)

urlpatterns = [
    path('user/', UserRetrieveAPIView.as_view(), name='user-detail'),
    path('subscription-plans/', SubscriptionPlanListAPIView.as_view(),
         name='subscription-plan-list'),
    path('subscription-plans/<int:pk>/', SubscriptionPlanRetrieveAPIView.as_view(),
         name='subscription-plan-detail'),
]
