from decimal import Decimal, InvalidOperation

from django.db import transaction
from django.db.models import F

from billing.models import BalanceTransaction
from core.exceptions import NotFoundError, ValidationError
from core.utils import get_logger
from food.models import Restaurant

logger = get_logger('billing')


def to_decimal(value, field_name='amount'):
    if isinstance(value, float):
        raise ValidationError({field_name: 'Amounts must be exact decimals, not floats.'})
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field_name: 'A valid decimal amount is required.'})


class AccountBalanceService:
    """
        The only code path that moves ``Restaurant.account_balance``.

        Credits are applied as ``account_balance = account_balance + amount``
        in a single UPDATE so concurrent credits never lose an increment.
    """

    @staticmethod
    def read_balance(restaurant_id):
        balance = Restaurant.objects.filter(pk=restaurant_id).values_list(
            'account_balance', flat=True).first()
        if balance is None:
            raise NotFoundError('Restaurant not found.')
        return balance

    @staticmethod
    def credit(restaurant_id, amount, payment_request=None, created_by=None, description=''):
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise ValidationError({'amount': 'Credit amount must be greater than zero.'})

        with transaction.atomic():
            updated = Restaurant.objects.filter(pk=restaurant_id).update(
                account_balance=F('account_balance') + amount
            )
            if updated == 0:
                raise NotFoundError('Restaurant not found.')

            restaurant = Restaurant.objects.only('id', 'currency', 'account_balance').get(pk=restaurant_id)
            balance_after = restaurant.account_balance
            balance_before = balance_after - amount

            entry = BalanceTransaction.objects.create(
                restaurant=restaurant,
                type=BalanceTransaction.TransactionType.BALANCE_ADD,
                amount=amount,
                currency=restaurant.currency,
                balance_before=balance_before,
                balance_after=balance_after,
                payment_request=payment_request,
                transaction_ref=payment_request.transaction_ref if payment_request else '',
                description=description,
                created_by=created_by,
            )

        logger.info(
            f"restaurant {restaurant_id} credited {amount} {restaurant.currency}: "
            f"{balance_before} -> {balance_after}"
            f"{f' (payment request {payment_request.uid})' if payment_request else ''}"
        )
        return entry

    @staticmethod
    def history(restaurant_id):
        return BalanceTransaction.objects.filter(restaurant_id=restaurant_id).select_related('payment_request')
