from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from accounts.models import SubscriptionPlan, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ['email', 'first_name', 'last_name', 'role', 'is_staff']
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2"),
            },
        ),
    )
    fieldsets = [
        [None, {'fields': ['password']}],
        [_('Personal info'), {'fields': ['first_name', 'last_name', 'email', 'phone']}],
        [_('Permissions'), {
            'fields': ['role', 'is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'],
        }],
        [_('Important dates'), {'fields': ['last_login', 'date_joined']}],
    ]
    date_hierarchy = 'date_joined'
    ordering = ['-id']
    search_fields = ("first_name", "last_name", "email")


@admin.register(SubscriptionPlan)
class SubscriptionPlanAdmin(admin.ModelAdmin):
    list_display = ['name', 'price', 'currency', 'duration_days', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name']
