from datetime import timedelta
from decimal import Decimal

from django.test import SimpleTestCase
from django.utils import timezone

from accounts.models import SubscriptionPlan
from billing.utilities.plan_pricing import days_remaining, quote_upgrade
from core.exceptions import ValidationError


class QuoteUpgradeTestCase(SimpleTestCase):
    def setUp(self):
        self.basic = SubscriptionPlan(name='Basic', price=Decimal('1000.00'), duration_days=30)
        self.pro = SubscriptionPlan(name='Pro', price=Decimal('2500.00'), duration_days=30)

    def test_full_period(self):
        quote = quote_upgrade(self.basic, self.pro, 30)
        self.assertEqual(quote.price_difference, Decimal('1500.00'))
        self.assertEqual(quote.pro_rated_amount, Decimal('1500.00'))
        self.assertEqual(quote.duration_days, 30)

    def test_partial_period_is_floored_to_minor_unit(self):
        # 1500 * 7 / 30 = 350
        self.assertEqual(quote_upgrade(self.basic, self.pro, 7).pro_rated_amount, Decimal('350.00'))
        monthly = SubscriptionPlan(name='Monthly', price=Decimal('1000.00'), duration_days=30)
        # 1000 * 2 / 30 = 66.666...
        self.assertEqual(quote_upgrade(None, monthly, 2).pro_rated_amount, Decimal('66.66'))
        odd = SubscriptionPlan(name='Odd', price=Decimal('1000.00'), duration_days=7)
        # 1000 * 1 / 7 = 142.857...
        self.assertEqual(quote_upgrade(None, odd, 1).pro_rated_amount, Decimal('142.85'))

    def test_no_current_plan_uses_full_target_price(self):
        quote = quote_upgrade(None, self.pro, 15)
        self.assertEqual(quote.price_difference, Decimal('2500.00'))
        self.assertEqual(quote.pro_rated_amount, Decimal('1250.00'))

    def test_zero_days_remaining_costs_nothing(self):
        self.assertEqual(quote_upgrade(self.basic, self.pro, 0).pro_rated_amount, Decimal('0.00'))

    def test_downgrade_gives_negative_difference(self):
        quote = quote_upgrade(self.pro, self.basic, 10)
        self.assertEqual(quote.price_difference, Decimal('-1500.00'))
        self.assertEqual(quote.pro_rated_amount, Decimal('-500.00'))

    def test_invalid_inputs(self):
        with self.assertRaises(ValidationError):
            quote_upgrade(self.basic, self.pro, -1)
        with self.assertRaises(ValidationError):
            quote_upgrade(self.basic, SubscriptionPlan(name='Broken', price=Decimal('1'), duration_days=0), 3)
        with self.assertRaises(ValidationError):
            quote_upgrade(self.basic, None, 3)


class DaysRemainingTestCase(SimpleTestCase):
    def setUp(self):
        self.now = timezone.now()

    def test_partial_day_rounds_up(self):
        self.assertEqual(days_remaining(self.now + timedelta(days=2, hours=1), now=self.now), 3)
        self.assertEqual(days_remaining(self.now + timedelta(days=2), now=self.now), 2)

    def test_expired_or_missing_is_zero(self):
        self.assertEqual(days_remaining(self.now - timedelta(days=1), now=self.now), 0)
        self.assertEqual(days_remaining(None, now=self.now), 0)
