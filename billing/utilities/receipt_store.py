import uuid

from django.conf import settings

from billing.models import Receipt
from core.exceptions import ValidationError
from core.utils import get_logger

logger = get_logger('billing')


class ReceiptStore:
    """
        Durable storage for payment receipts. Files go to the default storage
        backend (local disk in development, S3 through django-storages in
        production) and are referenced by the receipt ``uid``.
    """

    @staticmethod
    def max_size_bytes():
        return settings.PAYMENT_RECEIPT_MAX_SIZE_MB * 1024 * 1024

    @staticmethod
    def validate(uploaded_file):
        if uploaded_file is None:
            raise ValidationError({'file': 'A receipt file is required.'})

        content_type = (getattr(uploaded_file, 'content_type', None) or '').lower()
        allowed = [item.lower() for item in settings.PAYMENT_RECEIPT_ALLOWED_CONTENT_TYPES]
        if content_type not in allowed:
            raise ValidationError(
                {'file': f"Unsupported file type '{content_type}'. Allowed: {', '.join(allowed)}."})

        if uploaded_file.size > ReceiptStore.max_size_bytes():
            raise ValidationError(
                {'file': f'File too large. Maximum size is {settings.PAYMENT_RECEIPT_MAX_SIZE_MB}MB.'})
        return content_type

    @staticmethod
    def store(uploaded_file, restaurant, uploaded_by=None):
        content_type = ReceiptStore.validate(uploaded_file)
        receipt = Receipt.objects.create(
            restaurant=restaurant,
            uploaded_by=uploaded_by,
            file=uploaded_file,
            original_filename=(uploaded_file.name or '')[:255],
            content_type=content_type,
            size=uploaded_file.size,
        )
        logger.info(
            f"receipt {receipt.uid} stored for restaurant {restaurant.id} "
            f"({receipt.content_type}, {receipt.size} bytes)"
        )
        return receipt

    @staticmethod
    def resolve(receipt_ref):
        """Receipt for ``receipt_ref`` (its uid or a Receipt instance)."""
        if isinstance(receipt_ref, Receipt):
            receipt_ref = receipt_ref.uid
        try:
            receipt_uid = receipt_ref if isinstance(receipt_ref, uuid.UUID) else uuid.UUID(str(receipt_ref))
        except (TypeError, ValueError, AttributeError):
            raise ValidationError({'receipt': 'Receipt reference is not valid.'})

        receipt = Receipt.objects.filter(uid=receipt_uid).first()
        if receipt is None:
            raise ValidationError({'receipt': 'Receipt reference does not resolve to a stored receipt.'})
        return receipt
