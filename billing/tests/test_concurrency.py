import threading
import unittest
from decimal import Decimal

from django.db import connection
from django.test import TransactionTestCase

from billing.models import BalanceTransaction, PaymentRequest
from billing.tests.utils import BillingTestMixin
from billing.utilities.account_balance import AccountBalanceService
from billing.utilities.payment_ledger import PaymentRequestLedger
from core.exceptions import InvalidStateError


@unittest.skipUnless(connection.vendor == 'postgresql', 'needs row-level locking from a real database')
class ParallelApprovalTestCase(BillingTestMixin, TransactionTestCase):
    def test_two_admins_approving_at_once_credit_once(self):
        owner = self.create_owner()
        restaurant = self.create_restaurant(owner)
        admins = [self.create_admin('first@example.com'), self.create_admin('second@example.com')]
        payment_request = PaymentRequestLedger.create(
            restaurant.id, Decimal('5000.00'), 'jazzcash', 'JC-RACE', self.create_receipt(restaurant).uid)

        barrier = threading.Barrier(len(admins))
        outcomes = []

        def approve(admin):
            try:
                barrier.wait()
                PaymentRequestLedger.transition(payment_request.pk, 'approve', admin=admin)
                outcomes.append('approved')
            except InvalidStateError:
                outcomes.append('conflict')
            finally:
                connection.close()

        threads = [threading.Thread(target=approve, args=(admin,)) for admin in admins]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(sorted(outcomes), ['approved', 'conflict'])
        self.assertEqual(AccountBalanceService.read_balance(restaurant.id), Decimal('5000.00'))
        self.assertEqual(BalanceTransaction.objects.filter(payment_request=payment_request).count(), 1)
        self.assertEqual(PaymentRequest.objects.get(pk=payment_request.pk).status, 'approved')

    def test_parallel_credits_are_not_lost(self):
        restaurant = self.create_restaurant(self.create_owner())

        def credit():
            try:
                AccountBalanceService.credit(restaurant.id, Decimal('10.00'))
            finally:
                connection.close()

        threads = [threading.Thread(target=credit) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(AccountBalanceService.read_balance(restaurant.id), Decimal('80.00'))
