from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import models
from django.db.models import CharField, Count, Q, Sum
from django.db.models.functions import Cast


def parse_amount_keyword(keyword):
    try:
        amount = Decimal(keyword.strip().replace(',', ''))
    except InvalidOperation:
        return None
    if not amount.is_finite() or abs(amount) >= 10 ** 10:
        return None
    return amount


class PaymentRequestQuerySet(models.QuerySet):
    def for_restaurant(self, restaurant_id):
        return self.filter(restaurant_id=restaurant_id)

    def search(self, keyword):
        """
        Case-insensitive match on restaurant name, transaction reference or amount.

        The text form of ``amount`` differs between backends ('5000' on SQLite,
        '5000.00' on PostgreSQL), so a numeric keyword also matches the amount exactly.
        """
        if not keyword:
            return self
        condition = (
            Q(restaurant__name__icontains=keyword)
            | Q(transaction_ref__icontains=keyword)
            | Q(amount_text__icontains=keyword)
        )
        amount = parse_amount_keyword(keyword)
        if amount is not None:
            condition |= Q(amount=amount)
        return self.annotate(
            amount_text=Cast('amount', output_field=CharField())
        ).filter(condition)

    def summary(self):
        status_choices = self.model.Status
        aggregates = self.order_by().aggregate(
            total=Count('id'),
            pending=Count('id', filter=Q(status=status_choices.PENDING)),
            under_review=Count('id', filter=Q(status=status_choices.UNDER_REVIEW)),
            approved=Count('id', filter=Q(status=status_choices.APPROVED)),
            rejected=Count('id', filter=Q(status=status_choices.REJECTED)),
            total_amount=Sum('amount'),
        )
        aggregates['total_amount'] = Decimal(aggregates['total_amount'] or 0).quantize(
            settings.CURRENCY_MINOR_UNIT)
        return aggregates
