import math
from collections import namedtuple
from decimal import ROUND_FLOOR, Decimal

from django.conf import settings
from django.utils import timezone

from core.exceptions import ValidationError

UpgradeQuote = namedtuple(
    'UpgradeQuote',
    ['price_difference', 'pro_rated_amount', 'days_remaining', 'duration_days', 'currency'],
)


def floor_to_minor_unit(amount):
    return Decimal(amount).quantize(settings.CURRENCY_MINOR_UNIT, rounding=ROUND_FLOOR)


def days_remaining(plan_expiry_date, now=None):
    """Whole days left until ``plan_expiry_date``, a started day counts as a full one."""
    if plan_expiry_date is None:
        return 0
    now = now or timezone.now()
    seconds = (plan_expiry_date - now).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / 86400)


def quote_upgrade(current_plan, target_plan, days_remaining):
    """
    Pro-rated cost of moving to ``target_plan`` for the rest of the current period.

        price_difference = target.price - current.price (0 when there is no current plan)
        pro_rated_amount = price_difference * days_remaining / target.duration_days,
                           floored to the currency minor unit

    Only a quote: no plan is swapped and no balance is debited.
    """
    if target_plan is None:
        raise ValidationError({'target_plan': 'A target plan is required.'})
    if days_remaining is None or int(days_remaining) < 0:
        raise ValidationError({'days_remaining': 'days_remaining cannot be negative.'})
    if not target_plan.duration_days or target_plan.duration_days <= 0:
        raise ValidationError({'target_plan': 'Plan duration must be a positive number of days.'})

    days_remaining = int(days_remaining)
    current_price = current_plan.price if current_plan is not None else Decimal('0')
    price_difference = Decimal(target_plan.price) - Decimal(current_price)
    pro_rated_amount = floor_to_minor_unit(
        price_difference * Decimal(days_remaining) / Decimal(target_plan.duration_days)
    )
    return UpgradeQuote(
        price_difference=price_difference,
        pro_rated_amount=pro_rated_amount,
        days_remaining=days_remaining,
        duration_days=target_plan.duration_days,
        currency=target_plan.currency,
    )
