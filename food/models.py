from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from accounts.models import SubscriptionPlan, User
from core.models import SluggedModel
from food.managers import RestaurantQuerySet


class Restaurant(SluggedModel):
    """
        Restaurant tenant. ``account_balance`` is a prepaid balance in the
        restaurant's currency and is only ever moved by
        ``billing.utilities.account_balance.AccountBalanceService``; an ordinary
        ``save()`` leaves the stored value untouched.
    """
    class StatusType(models.TextChoices):
        ACTIVE = 'active', _('Active')
        INACTIVE = 'inactive', _('Inactive')
        SUSPENDED = 'suspended', _('Suspended')

    name = models.CharField(max_length=255, verbose_name=_("Name"))
    owner = models.ForeignKey(
        User, verbose_name=_("Owner"), on_delete=models.SET_NULL, null=True,
        related_name='restaurants'
    )
    owner_email = models.EmailField(verbose_name=_("Owner email"), blank=True)
    phone = models.CharField(
        max_length=20, verbose_name=_("Phone number"), blank=True
    )
    address = models.TextField(verbose_name=_("Address"), blank=True)
    city = models.CharField(max_length=100, verbose_name=_("City"), blank=True)
    notes = models.TextField(verbose_name=_("Notes"), blank=True)
    currency = models.CharField(
        max_length=8, verbose_name=_("Currency"), default=settings.DEFAULT_CURRENCY
    )
    account_balance = models.DecimalField(
        max_digits=12, decimal_places=2, verbose_name=_("Account balance"),
        default=Decimal('0.00'), editable=False
    )
    plan = models.ForeignKey(
        SubscriptionPlan, verbose_name=_("Subscription plan"),
        on_delete=models.PROTECT, null=True, blank=True, related_name='restaurants'
    )
    plan_expiry_date = models.DateTimeField(
        verbose_name=_("Plan expiry date"), null=True, blank=True
    )
    status = models.CharField(
        max_length=20, verbose_name=_("Status"), choices=StatusType.choices,
        default=StatusType.ACTIVE
    )

    objects = RestaurantQuerySet.as_manager()

    class Meta:
        verbose_name = _("Restaurant")
        verbose_name_plural = _("Restaurants")
        ordering = ['-id']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if self._state.adding:
            self.account_balance = Decimal('0.00')
        else:
            update_fields = kwargs.get('update_fields')
            if update_fields is None:
                update_fields = [
                    field.name for field in self._meta.concrete_fields
                    if not field.primary_key
                ]
            kwargs['update_fields'] = [
                name for name in update_fields if name != 'account_balance'
            ]
        super().save(*args, **kwargs)
