from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.test import override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import SubscriptionPlan
from billing.models import PaymentRequest, Receipt
from billing.tests.utils import BillingTestMixin, make_receipt_file
from billing.utilities.account_balance import AccountBalanceService
from billing.utilities.payment_ledger import PaymentRequestLedger


class VendorPaymentRequestAPITestCase(BillingTestMixin, APITestCase):
    def setUp(self):
        self.owner = self.create_owner()
        self.restaurant = self.create_restaurant(self.owner)
        self.client.force_authenticate(self.owner)

    def upload_receipt(self, **kwargs):
        return self.client.post(
            reverse('receipt-upload'),
            {'restaurant': self.restaurant.id, 'file': make_receipt_file(**kwargs)},
            format='multipart',
        )

    def payload(self, receipt_uid, **overrides):
        data = {
            'restaurant': self.restaurant.id,
            'amount': '5000.00',
            'payment_method': 'bank_transfer',
            'bank_name': 'HBL',
            'account_number': '1234-5678',
            'account_holder': 'Karachi Grill',
            'transaction_ref': 'HBL-2024-0001',
            'receipt': str(receipt_uid),
        }
        data.update(overrides)
        return data

    def test_upload_receipt(self):
        response = self.upload_receipt(name='slip.jpg', content_type='image/jpeg')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['content_type'], 'image/jpeg')
        self.assertEqual(response.data['original_filename'], 'slip.jpg')
        self.assertTrue(response.data['url'].startswith('http://testserver/media/payment_receipts/'))
        self.assertTrue(Receipt.objects.filter(uid=response.data['uid']).exists())

    def test_upload_rejects_wrong_type_and_size(self):
        response = self.upload_receipt(name='slip.pdf', content_type='application/pdf')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        with override_settings(PAYMENT_RECEIPT_MAX_SIZE_MB=1):
            response = self.upload_receipt(size=1024 * 1024 + 1)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Receipt.objects.exists())

    def test_submit_payment_request(self):
        receipt_uid = self.upload_receipt().data['uid']

        response = self.client.post(reverse('payment-request-list'), self.payload(receipt_uid), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'pending')
        self.assertEqual(response.data['amount'], '5000.00')
        self.assertEqual(response.data['receipt']['uid'], receipt_uid)
        self.assertIsNone(response.data['processed_at'])
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('0.00'))

    def test_submit_validation_errors(self):
        receipt_uid = self.upload_receipt().data['uid']
        url = reverse('payment-request-list')

        for overrides in [{'amount': '0.00'}, {'amount': '-10.00'}, {'bank_name': ''},
                          {'payment_method': 'cash'}, {'receipt': 'not-a-uuid'}]:
            response = self.client.post(url, self.payload(receipt_uid, **overrides), format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, overrides)

        self.assertFalse(PaymentRequest.objects.exists())

    def test_submit_with_non_object_body(self):
        response = self.client.post(
            reverse('payment-request-list'), [{'restaurant': self.restaurant.id}], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(PaymentRequest.objects.exists())

    def test_cannot_submit_for_someone_elses_restaurant(self):
        other = self.create_restaurant(self.create_owner('other@example.com'), name='Other')
        receipt = self.create_receipt(other)

        response = self.client.post(
            reverse('payment-request-list'),
            self.payload(receipt.uid, restaurant=other.id),
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.post(
            reverse('payment-request-list'),
            self.payload(receipt.uid, restaurant=999999),
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_history_shows_only_own_requests(self):
        mine = PaymentRequestLedger.create(
            self.restaurant.id, Decimal('1500.00'), 'jazzcash', 'JC-1', self.create_receipt(self.restaurant).uid)
        other = self.create_restaurant(self.create_owner('other@example.com'), name='Other')
        theirs = PaymentRequestLedger.create(
            other.id, Decimal('900.00'), 'easypaisa', 'EP-1', self.create_receipt(other).uid)

        response = self.client.get(reverse('payment-request-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['results'][0]['uid'], str(mine.uid))

        response = self.client.get(reverse('payment-request-detail', kwargs={'uid': mine.uid}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.get(reverse('payment-request-detail', kwargs={'uid': theirs.uid}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_restaurant_account_and_balance_history(self):
        payment_request = PaymentRequestLedger.create(
            self.restaurant.id, Decimal('3000.00'), 'jazzcash', 'JC-9', self.create_receipt(self.restaurant).uid)
        PaymentRequestLedger.transition(payment_request.pk, 'approve', admin=self.create_admin())

        response = self.client.get(reverse('restaurant-account'), {'restaurant': self.restaurant.id})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['account_balance'], '3000.00')
        self.assertEqual(response.data['currency'], 'PKR')

        response = self.client.get(reverse('balance-history'), {'restaurant': self.restaurant.id})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)
        entry = response.data['results'][0]
        self.assertEqual(entry['type'], 'balance_add')
        self.assertEqual(entry['balance_before'], '0.00')
        self.assertEqual(entry['balance_after'], '3000.00')
        self.assertEqual(entry['payment_request'], str(payment_request.uid))

        response = self.client.get(reverse('balance-history'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_plan_upgrade_quote(self):
        basic = SubscriptionPlan.objects.create(name='Basic', price=Decimal('1000.00'), duration_days=30)
        pro = SubscriptionPlan.objects.create(name='Pro', price=Decimal('2500.00'), duration_days=30)
        self.restaurant.plan = basic
        self.restaurant.plan_expiry_date = timezone.now() + timedelta(days=9, hours=12)
        self.restaurant.save()

        response = self.client.get(
            reverse('plan-upgrade-quote'), {'restaurant': self.restaurant.id, 'target_plan': pro.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['days_remaining'], 10)
        self.assertEqual(response.data['price_difference'], '1500.00')
        self.assertEqual(response.data['pro_rated_amount'], '500.00')
        self.assertFalse(response.data['sufficient_balance'])
        self.restaurant.refresh_from_db()
        self.assertEqual(self.restaurant.plan, basic)

        response = self.client.get(
            reverse('plan-upgrade-quote'), {'restaurant': self.restaurant.id, 'target_plan': basic.id})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.get(
            reverse('plan-upgrade-quote'), {'restaurant': self.restaurant.id, 'target_plan': 999999})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_vendor_cannot_reach_verification_endpoints(self):
        payment_request = PaymentRequestLedger.create(
            self.restaurant.id, Decimal('100.00'), 'jazzcash', 'JC-1', self.create_receipt(self.restaurant).uid)

        response = self.client.get(reverse('admin-payment-request-list'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        response = self.client.post(
            reverse('admin-payment-request-verify', kwargs={'uid': payment_request.uid}),
            {'action': 'approve'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('0.00'))


class AdminVerificationAPITestCase(BillingTestMixin, APITestCase):
    def setUp(self):
        self.owner = self.create_owner()
        self.admin = self.create_admin()
        self.restaurant = self.create_restaurant(self.owner)
        self.client.force_authenticate(self.admin)

    def submit(self, amount='5000.00', payment_method='jazzcash', transaction_ref='JC-5000', restaurant=None):
        restaurant = restaurant or self.restaurant
        return PaymentRequestLedger.create(
            restaurant.id, Decimal(amount), payment_method, transaction_ref,
            self.create_receipt(restaurant).uid)

    def verify(self, payment_request, **data):
        return self.client.post(
            reverse('admin-payment-request-verify', kwargs={'uid': payment_request.uid}),
            data, format='json')

    def test_bank_transfer_scenario(self):
        self.client.force_authenticate(self.owner)
        receipt_uid = self.client.post(
            reverse('receipt-upload'),
            {'restaurant': self.restaurant.id,
             'file': make_receipt_file(name='slip.jpg', content_type='image/jpeg', size=200 * 1024)},
            format='multipart',
        ).data['uid']
        response = self.client.post(reverse('payment-request-list'), {
            'restaurant': self.restaurant.id,
            'amount': '5000',
            'payment_method': 'bank_transfer',
            'bank_name': 'UBL',
            'account_number': '000123',
            'account_holder': 'Karachi Grill',
            'transaction_ref': 'UBL-77',
            'receipt': receipt_uid,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'pending')
        payment_request = PaymentRequest.objects.get(uid=response.data['uid'])

        self.client.force_authenticate(self.admin)
        response = self.verify(payment_request, action='approve', admin_notes='verified via bank statement')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'approved')
        self.assertIsNotNone(response.data['processed_at'])
        self.assertEqual(response.data['processed_by'], 'admin@example.com')
        self.assertEqual(response.data['plan_context']['account_balance'], '5000.00')

        response = self.verify(payment_request, action='approve')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['current_status'], 'approved')
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('5000.00'))

    def test_reject_scenario(self):
        payment_request = self.submit()

        response = self.verify(payment_request, action='reject')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        payment_request.refresh_from_db()
        self.assertEqual(payment_request.status, 'pending')

        response = self.verify(payment_request, action='reject', rejection_reason='duplicate payment')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'rejected')
        self.assertEqual(response.data['rejection_reason'], 'duplicate payment')
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('0.00'))

    def test_approve_succeeds_when_email_queue_is_down(self):
        payment_request = self.submit()

        with mock.patch('billing.utilities.payment_ledger.send_payment_request_decision_email.delay',
                        side_effect=ConnectionError('broker down')) as delay:
            with self.captureOnCommitCallbacks(execute=True):
                response = self.verify(payment_request, action='approve')

        delay.assert_called_once_with(payment_request.id)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'approved')
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('5000.00'))

        response = self.verify(payment_request, action='approve')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('5000.00'))

    def test_review_then_verify(self):
        payment_request = self.submit()

        url = reverse('admin-payment-request-review', kwargs={'uid': payment_request.uid})
        response = self.client.post(url, {'admin_notes': 'checking with bank'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'under_review')
        self.assertEqual(response.data['reviewed_by'], 'admin@example.com')

        response = self.client.post(url, {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['current_status'], 'under_review')

        response = self.verify(payment_request, action='approve')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(AccountBalanceService.read_balance(self.restaurant.id), Decimal('5000.00'))

    def test_invalid_action_and_unknown_request(self):
        payment_request = self.submit()
        response = self.verify(payment_request, action='mark_under_review')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post(
            reverse('admin-payment-request-verify', kwargs={'uid': '1b4e28ba-2fa1-41d2-883f-0016d3cca427'}),
            {'action': 'approve'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_detail_includes_plan_context(self):
        plan = SubscriptionPlan.objects.create(name='Pro', price=Decimal('2500.00'), duration_days=30)
        self.restaurant.plan = plan
        self.restaurant.save()
        payment_request = self.submit()

        response = self.client.get(
            reverse('admin-payment-request-detail', kwargs={'uid': payment_request.uid}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['plan_context']['current_plan']['name'], 'Pro')
        self.assertEqual(response.data['plan_context']['current_plan']['price'], '2500.00')
        self.assertEqual(response.data['receipt']['content_type'], 'image/png')

    def test_list_with_filters_and_summary(self):
        first = self.submit(amount='1500.00', transaction_ref='JC-778899')
        self.submit(amount='2750.00', payment_method='easypaisa', transaction_ref='EP-112233')
        other = self.create_restaurant(self.create_owner('lahore@example.com'), name='Lahore Tikka House')
        self.submit(amount='980.00', transaction_ref='JC-000111', restaurant=other)
        PaymentRequestLedger.transition(first.pk, 'approve', admin=self.admin)

        url = reverse('admin-payment-request-list')
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 3)
        self.assertEqual(response.data['summary']['total'], 3)
        self.assertEqual(response.data['summary']['pending'], 2)
        self.assertEqual(response.data['summary']['approved'], 1)
        self.assertEqual(response.data['summary']['total_amount'], '5230.00')

        response = self.client.get(url, {'status': 'pending'})
        self.assertEqual(response.data['count'], 2)
        self.assertEqual(response.data['summary']['total_amount'], '3730.00')

        response = self.client.get(url, {'restaurant': other.id})
        self.assertEqual(response.data['count'], 1)

        response = self.client.get(url, {'search': 'TIKKA'})
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['results'][0]['restaurant_name'], 'Lahore Tikka House')

        response = self.client.get(url, {'search': '2750'})
        self.assertEqual(response.data['count'], 1)

        response = self.client.get(url, {'status': 'paid'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
