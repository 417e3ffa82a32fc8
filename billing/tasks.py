from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from billing.models import PaymentRequest
from core.utils import get_logger

logger = get_logger('billing')


def get_decision_message(payment_request):
    restaurant = payment_request.restaurant
    if payment_request.status == payment_request.Status.APPROVED:
        subject = f"Payment approved: {payment_request.amount} {payment_request.currency}"
        body = (
            f"Hi {restaurant.name},\n\n"
            f"Your payment of {payment_request.amount} {payment_request.currency} "
            f"(ref {payment_request.transaction_ref}) has been approved and added to your account balance.\n"
            f"Current balance: {restaurant.account_balance} {restaurant.currency}\n"
        )
    else:
        subject = f"Payment rejected: {payment_request.amount} {payment_request.currency}"
        body = (
            f"Hi {restaurant.name},\n\n"
            f"Your payment of {payment_request.amount} {payment_request.currency} "
            f"(ref {payment_request.transaction_ref}) could not be verified.\n"
            f"Reason: {payment_request.rejection_reason}\n"
        )
    if payment_request.admin_notes:
        body += f"Notes: {payment_request.admin_notes}\n"
    body += f"\nDetails: {settings.FRONTEND_URL}billing/payment-requests/{payment_request.uid}\n"
    return subject, body


@shared_task
def send_payment_request_decision_email(payment_request_id):
    payment_request = PaymentRequest.objects.select_related(
        'restaurant', 'restaurant__owner').filter(id=payment_request_id).first()
    if payment_request is None:
        logger.error(f"payment request {payment_request_id} does not exist, decision email skipped")
        return False
    if not payment_request.is_terminal:
        logger.warning(f"payment request {payment_request.uid} is {payment_request.status}, decision email skipped")
        return False

    restaurant = payment_request.restaurant
    recipient = restaurant.owner_email or (restaurant.owner.email if restaurant.owner else '')
    if not recipient:
        logger.warning(f"restaurant {restaurant.id} has no email, decision email skipped")
        return False

    subject, body = get_decision_message(payment_request)
    try:
        send_mail(
            subject=subject,
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
            fail_silently=False,
        )
    except Exception as e:
        logger.exception(f"decision email for payment request {payment_request.uid} failed: {e}")
        return False

    logger.info(f"decision email for payment request {payment_request.uid} sent to {recipient}")
    return True
