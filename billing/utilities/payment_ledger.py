import uuid

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from billing.models import PaymentRequest
from billing.tasks import send_payment_request_decision_email
from billing.utilities.account_balance import AccountBalanceService, to_decimal
from billing.utilities.receipt_store import ReceiptStore
from core.exceptions import InvalidStateError, NotFoundError, ValidationError
from core.utils import get_logger
from food.models import Restaurant

logger = get_logger('billing')

BANK_DETAIL_FIELDS = ('bank_name', 'account_number', 'account_holder')
MAX_AMOUNT_DIGITS = 10


def queue_decision_email(payment_request_id):
    try:
        send_payment_request_decision_email.delay(payment_request_id)
    except Exception as e:
        logger.error(f"could not queue decision email for payment request {payment_request_id}: {e}")


class PaymentRequestLedger:
    """
    Lifecycle of payment requests.

        pending --approve--> approved
        pending --reject--> rejected
        pending --mark_under_review--> under_review
        under_review --approve--> approved
        under_review --reject--> rejected

    approved and rejected are terminal. Every transition is a conditional
    UPDATE on the status column; the affected-row count decides whether the
    caller won, so an approval credits the balance at most once even when
    two admins decide the same request at the same time.
    """
    APPROVE = 'approve'
    REJECT = 'reject'
    MARK_UNDER_REVIEW = 'mark_under_review'
    ACTIONS = (APPROVE, REJECT, MARK_UNDER_REVIEW)

    ALLOWED_FROM = {
        APPROVE: PaymentRequest.OPEN_STATUSES,
        REJECT: PaymentRequest.OPEN_STATUSES,
        MARK_UNDER_REVIEW: (PaymentRequest.Status.PENDING,),
    }

    @staticmethod
    def _lookup(request_id):
        if isinstance(request_id, PaymentRequest):
            return {'pk': request_id.pk}
        if isinstance(request_id, uuid.UUID):
            return {'uid': request_id}
        if isinstance(request_id, int):
            return {'pk': request_id}
        value = str(request_id)
        if value.isdigit():
            return {'pk': int(value)}
        try:
            return {'uid': uuid.UUID(value)}
        except ValueError:
            raise NotFoundError('Payment request not found.')

    @staticmethod
    def get(request_id):
        payment_request = PaymentRequest.objects.select_related(
            'restaurant', 'restaurant__plan', 'receipt'
        ).filter(**PaymentRequestLedger._lookup(request_id)).first()
        if payment_request is None:
            raise NotFoundError('Payment request not found.')
        return payment_request

    @staticmethod
    def _load_snapshot(request_id):
        return PaymentRequestLedger.get(request_id)

    @staticmethod
    def _clean_amount(amount):
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise ValidationError({'amount': 'Amount must be greater than zero.'})
        if amount >= 10 ** MAX_AMOUNT_DIGITS:
            raise ValidationError({'amount': 'Amount is too large.'})
        if amount != amount.quantize(settings.CURRENCY_MINOR_UNIT):
            raise ValidationError({'amount': 'Amount has more decimal places than the currency allows.'})
        return amount.quantize(settings.CURRENCY_MINOR_UNIT)

    @staticmethod
    def _clean_bank_details(payment_method, bank_details):
        bank_details = bank_details or {}
        cleaned = {field: (bank_details.get(field) or '').strip() for field in BANK_DETAIL_FIELDS}
        if payment_method == PaymentRequest.PaymentMethod.BANK_TRANSFER:
            missing = {field: 'This field is required for bank transfers.'
                       for field, value in cleaned.items() if not value}
            if missing:
                raise ValidationError(missing)
        return cleaned

    @staticmethod
    def create(restaurant_id, amount, payment_method, transaction_ref, receipt_ref,
               description=None, bank_details=None, submitted_by=None):
        restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
        if restaurant is None:
            raise NotFoundError('Restaurant not found.')

        amount = PaymentRequestLedger._clean_amount(amount)
        if payment_method not in PaymentRequest.PaymentMethod.values:
            raise ValidationError({'payment_method': f"'{payment_method}' is not a supported payment method."})
        transaction_ref = (transaction_ref or '').strip()
        if not transaction_ref:
            raise ValidationError({'transaction_ref': 'Transaction reference is required.'})
        bank_fields = PaymentRequestLedger._clean_bank_details(payment_method, bank_details)

        receipt = ReceiptStore.resolve(receipt_ref)
        if receipt.restaurant_id != restaurant.id:
            raise ValidationError({'receipt': 'Receipt belongs to another restaurant.'})
        if PaymentRequest.objects.filter(receipt=receipt).exists():
            raise ValidationError({'receipt': 'Receipt is already attached to a payment request.'})

        try:
            with transaction.atomic():
                payment_request = PaymentRequest.objects.create(
                    restaurant=restaurant,
                    amount=amount,
                    currency=restaurant.currency,
                    payment_method=payment_method,
                    transaction_ref=transaction_ref,
                    receipt=receipt,
                    description=(description or '').strip(),
                    submitted_by=submitted_by,
                    status=PaymentRequest.Status.PENDING,
                    **bank_fields,
                )
        except IntegrityError:
            raise ValidationError({'receipt': 'Receipt is already attached to a payment request.'})

        logger.info(
            f"payment request {payment_request.uid} created for restaurant {restaurant.id}: "
            f"{amount} {payment_request.currency} via {payment_method} ref={transaction_ref}"
        )
        return payment_request

    @staticmethod
    def transition(request_id, action, admin, notes=None, rejection_reason=None):
        if action not in PaymentRequestLedger.ACTIONS:
            raise ValidationError({'action': f"'{action}' is not a valid action."})

        snapshot = PaymentRequestLedger._load_snapshot(request_id)
        if snapshot.is_terminal:
            logger.warning(
                f"refused {action} on payment request {snapshot.uid}: already {snapshot.status}")
            raise InvalidStateError(
                f'Payment request is already {snapshot.status}.', current_status=snapshot.status)

        rejection_reason = (rejection_reason or '').strip()
        if action == PaymentRequestLedger.REJECT and not rejection_reason:
            raise ValidationError({'rejection_reason': 'A rejection reason is required.'})

        now = timezone.now()
        changes = {'modified_date': now}
        if notes is not None:
            changes['admin_notes'] = notes
        if action == PaymentRequestLedger.MARK_UNDER_REVIEW:
            changes.update(status=PaymentRequest.Status.UNDER_REVIEW, reviewed_by=admin, reviewed_at=now)
        elif action == PaymentRequestLedger.APPROVE:
            changes.update(status=PaymentRequest.Status.APPROVED, processed_by=admin, processed_at=now)
        else:
            changes.update(status=PaymentRequest.Status.REJECTED, processed_by=admin, processed_at=now,
                           rejection_reason=rejection_reason)

        allowed_from = PaymentRequestLedger.ALLOWED_FROM[action]
        with transaction.atomic():
            updated = PaymentRequest.objects.filter(
                pk=snapshot.pk, status__in=allowed_from
            ).update(**changes)
            if updated == 0:
                current_status = PaymentRequest.objects.filter(
                    pk=snapshot.pk).values_list('status', flat=True).first()
                logger.warning(
                    f"refused {action} on payment request {snapshot.uid}: status is {current_status}")
                raise InvalidStateError(
                    f'Payment request is {current_status}, cannot {action}.', current_status=current_status)

            payment_request = PaymentRequestLedger.get(snapshot.pk)
            if action == PaymentRequestLedger.APPROVE:
                AccountBalanceService.credit(
                    payment_request.restaurant_id,
                    payment_request.amount,
                    payment_request=payment_request,
                    created_by=admin,
                    description=f'Payment request approved ({payment_request.get_payment_method_display()})',
                )

            if action in (PaymentRequestLedger.APPROVE, PaymentRequestLedger.REJECT):
                payment_request_id = payment_request.id
                transaction.on_commit(
                    lambda: queue_decision_email(payment_request_id))

        payment_request = PaymentRequestLedger.get(snapshot.pk)
        logger.info(
            f"payment request {payment_request.uid}: {snapshot.status} -> {payment_request.status} "
            f"by {admin}"
        )
        return payment_request

    @staticmethod
    def list(status=None, restaurant_id=None, search=None):
        queryset = PaymentRequest.objects.select_related('restaurant', 'receipt')
        if status:
            if status not in PaymentRequest.Status.values:
                raise ValidationError({'status': f"'{status}' is not a valid status."})
            queryset = queryset.filter(status=status)
        if restaurant_id:
            queryset = queryset.for_restaurant(restaurant_id)
        if search:
            queryset = queryset.search(search.strip())
        return queryset
