from django.contrib import admin

from food.models import Restaurant


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'city', 'status', 'plan', 'plan_expiry_date', 'account_balance']
    list_filter = ['status', 'plan']
    search_fields = ['name', 'owner__email', 'owner_email']
    readonly_fields = ['uid', 'slug', 'account_balance']
