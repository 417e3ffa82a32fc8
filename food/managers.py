from django.db import models


class RestaurantQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status='active')

    def owned_by(self, user):
        if user.is_superuser:
            return self
        return self.filter(owner=user)
