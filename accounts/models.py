from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from accounts.managers import SubscriptionPlanQuerySet, UserManager
from core.models import BaseModel


# Create your models here.


class User(AbstractUser):
    class RoleType(models.TextChoices):
        OWNER = 'owner', _('Owner')
        EMPLOYEE = 'employee', _('Employee')
        NA = 'n/a', _('N/A')

    username = None
    email = models.EmailField(verbose_name=_('Email address'), unique=True)
    phone = models.CharField(
        max_length=20, verbose_name=_('Phone number'), blank=True)
    role = models.CharField(max_length=15, verbose_name=_(
        'Role'), choices=RoleType.choices, default=RoleType.NA)
    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    def __str__(self):
        return self.email


class SubscriptionPlan(BaseModel):
    """
        Catalog entry a restaurant can subscribe to. Prices are exact decimals.
    """
    name = models.CharField(max_length=255, verbose_name=_('Name'))
    price = models.DecimalField(
        max_digits=12, decimal_places=2, verbose_name=_('Price'),
        validators=[MinValueValidator(0)])
    currency = models.CharField(
        max_length=8, verbose_name=_('Currency'), default=settings.DEFAULT_CURRENCY)
    duration_days = models.PositiveIntegerField(
        verbose_name=_('Duration (days)'), default=30, validators=[MinValueValidator(1)])
    features = models.JSONField(verbose_name=_('Features'), default=list, blank=True)
    max_menu_items = models.PositiveIntegerField(
        verbose_name=_('Max menu items'), null=True, blank=True)
    is_active = models.BooleanField(verbose_name=_('Is active'), default=True)

    objects = SubscriptionPlanQuerySet.as_manager()

    class Meta:
        verbose_name = _('Subscription Plan')
        verbose_name_plural = _('Subscription Plans')
        ordering = ['price', 'id']

    def __str__(self):
        return f'{self.name} ({self.price} {self.currency})'
