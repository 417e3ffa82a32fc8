from decimal import Decimal

from django.contrib.admin.helpers import ACTION_CHECKBOX_NAME
from django.test import TestCase
from django.urls import reverse

from accounts.models import User
from billing.models import PaymentRequest
from billing.tests.utils import BillingTestMixin
from billing.utilities.account_balance import AccountBalanceService
from billing.utilities.payment_ledger import PaymentRequestLedger


class PaymentRequestAdminTestCase(BillingTestMixin, TestCase):
    def setUp(self):
        self.superuser = User.objects.create_superuser(email='root@example.com', password='x')
        self.restaurant = self.create_restaurant(self.create_owner())
        self.payment_request = PaymentRequestLedger.create(
            self.restaurant.id, Decimal('1200.00'), 'easypaisa', 'EP-42',
            self.create_receipt(self.restaurant).uid)
        self.client.force_login(self.superuser)
        self.changelist = reverse('admin:billing_paymentrequest_changelist')

    def test_changelist_renders(self):
        response = self.client.get(self.changelist)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'EP-42')

    def test_approve_action_goes_through_ledger(self):
        self.client.post(self.changelist, {
            'action': 'approve',
            ACTION_CHECKBOX_NAME: [self.payment_request.pk],
        })

        self.payment_request.refresh_from_db()
        self.assertEqual(self.payment_request.status, PaymentRequest.Status.APPROVED)
        self.assertEqual(self.payment_request.processed_by, self.superuser)
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('1200.00'))

        # running it again is refused, balance unchanged
        self.client.post(self.changelist, {
            'action': 'approve',
            ACTION_CHECKBOX_NAME: [self.payment_request.pk],
        })
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('1200.00'))

    def test_no_delete_or_change(self):
        response = self.client.post(
            reverse('admin:billing_paymentrequest_delete', args=[self.payment_request.pk]), {'post': 'yes'})
        self.assertEqual(response.status_code, 403)
        self.assertTrue(PaymentRequest.objects.filter(pk=self.payment_request.pk).exists())
