"""menuhub URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from menuhub.settings import ENV_TYPE

api_url_patterns = (
    [
        # V1 APIS
        path('accounts/v1/', include('accounts.api.v1.urls')),
        path('food/v1/', include('food.api.v1.urls')),
        path('billing/v1/', include('billing.api.v1.urls')),
    ]
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include(api_url_patterns)),
]

if ENV_TYPE == 'DEVELOPMENT':
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
