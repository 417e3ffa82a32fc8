import os
import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.models import User
from billing.managers import PaymentRequestQuerySet
from core.exceptions import InvalidStateError, ValidationError
from core.models import BaseModel
from food.models import Restaurant


def receipt_upload_to(instance, filename):
    _, extension = os.path.splitext(filename)
    folder = timezone.now().strftime(settings.PAYMENT_RECEIPT_UPLOAD_TO)
    return f"{folder}{instance.uid}{extension.lower()}"


class Receipt(BaseModel):
    """
        Proof of an out-of-band payment uploaded by a restaurant. Stored once and
        never modified; a payment request points at exactly one receipt.
    """
    uid = models.UUIDField(
        verbose_name=_("Uid"), default=uuid.uuid4, unique=True, editable=False
    )
    restaurant = models.ForeignKey(
        Restaurant, verbose_name=_("Restaurant"), on_delete=models.PROTECT,
        related_name="receipts"
    )
    uploaded_by = models.ForeignKey(
        User, verbose_name=_("Uploaded by"), on_delete=models.SET_NULL,
        null=True, blank=True, related_name="+"
    )
    file = models.FileField(verbose_name=_("File"), upload_to=receipt_upload_to, max_length=255)
    original_filename = models.CharField(
        max_length=255, verbose_name=_("Original filename"), blank=True
    )
    content_type = models.CharField(max_length=100, verbose_name=_("Content type"))
    size = models.PositiveBigIntegerField(verbose_name=_("Size (bytes)"))

    class Meta:
        verbose_name = _("Receipt")
        verbose_name_plural = _("Receipts")
        ordering = ["-id"]

    def __str__(self):
        return f"{self.restaurant} :: {self.original_filename or self.uid}"

    @property
    def url(self):
        return self.file.url if self.file else None

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise InvalidStateError("Receipts cannot be modified once stored.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise InvalidStateError("Receipts cannot be deleted.")


class PaymentRequest(BaseModel):
    class Status(models.TextChoices):
        PENDING = "pending", _("PENDING")
        UNDER_REVIEW = "under_review", _("UNDER REVIEW")
        APPROVED = "approved", _("APPROVED")
        REJECTED = "rejected", _("REJECTED")

    class PaymentMethod(models.TextChoices):
        JAZZCASH = "jazzcash", _("JazzCash")
        EASYPAISA = "easypaisa", _("Easypaisa")
        BANK_TRANSFER = "bank_transfer", _("Bank Transfer")

    OPEN_STATUSES = (Status.PENDING, Status.UNDER_REVIEW)
    TERMINAL_STATUSES = (Status.APPROVED, Status.REJECTED)
    DECISION_FIELDS = (
        "status", "rejection_reason", "reviewed_by", "reviewed_at", "processed_by", "processed_at",
    )

    uid = models.UUIDField(
        verbose_name=_("Uid"), default=uuid.uuid4, unique=True, editable=False
    )
    restaurant = models.ForeignKey(
        Restaurant, verbose_name=_("Restaurant"), on_delete=models.PROTECT,
        related_name="payment_requests"
    )
    amount = models.DecimalField(
        max_digits=12, decimal_places=2, verbose_name=_("Amount"),
        validators=[MinValueValidator(Decimal("0.01"))]
    )
    currency = models.CharField(
        max_length=8, verbose_name=_("Currency"), default=settings.DEFAULT_CURRENCY
    )
    payment_method = models.CharField(
        max_length=20, verbose_name=_("Payment method"), choices=PaymentMethod.choices
    )
    bank_name = models.CharField(max_length=255, verbose_name=_("Bank name"), blank=True)
    account_number = models.CharField(
        max_length=64, verbose_name=_("Account number"), blank=True
    )
    account_holder = models.CharField(
        max_length=255, verbose_name=_("Account holder"), blank=True
    )
    transaction_ref = models.CharField(max_length=255, verbose_name=_("Transaction reference"))
    receipt = models.OneToOneField(
        Receipt, verbose_name=_("Receipt"), on_delete=models.PROTECT,
        related_name="payment_request"
    )
    description = models.TextField(verbose_name=_("Description"), blank=True)
    status = models.CharField(
        max_length=20, verbose_name=_("Status"), choices=Status.choices,
        default=Status.PENDING
    )
    submitted_by = models.ForeignKey(
        User, verbose_name=_("Submitted by"), on_delete=models.SET_NULL,
        null=True, blank=True, related_name="+"
    )
    admin_notes = models.TextField(verbose_name=_("Admin notes"), blank=True)
    rejection_reason = models.TextField(verbose_name=_("Rejection reason"), blank=True)
    reviewed_by = models.ForeignKey(
        User, verbose_name=_("Reviewed by"), on_delete=models.SET_NULL,
        null=True, blank=True, related_name="+"
    )
    reviewed_at = models.DateTimeField(verbose_name=_("Reviewed at"), null=True, blank=True)
    processed_by = models.ForeignKey(
        User, verbose_name=_("Processed by"), on_delete=models.SET_NULL,
        null=True, blank=True, related_name="+"
    )
    processed_at = models.DateTimeField(verbose_name=_("Processed at"), null=True, blank=True)

    objects = PaymentRequestQuerySet.as_manager()

    class Meta:
        verbose_name = _("Payment Request")
        verbose_name_plural = _("Payment Requests")
        ordering = ["-created_date", "-id"]
        indexes = [
            models.Index(fields=["status", "-created_date"], name="billing_pr_status_created_idx"),
            models.Index(fields=["restaurant", "-created_date"], name="billing_pr_rest_created_idx"),
        ]

    def __str__(self):
        return f"{self.restaurant} :: {self.amount} {self.currency} :: {self.status}"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    def save(self, *args, **kwargs):
        # decisions are written through PaymentRequestLedger with conditional updates
        if self._state.adding:
            self.status = self.Status.PENDING
            self.rejection_reason = ""
            self.reviewed_by = self.processed_by = None
            self.reviewed_at = self.processed_at = None
        else:
            stored = PaymentRequest.objects.filter(pk=self.pk).values("status", "amount").first()
            if stored is not None:
                if stored["status"] in self.TERMINAL_STATUSES:
                    raise InvalidStateError(
                        "A decided payment request cannot be modified.",
                        current_status=stored["status"],
                    )
                if self.status != stored["status"]:
                    raise InvalidStateError(
                        "Status can only change through a ledger transition.",
                        current_status=stored["status"],
                    )
                if Decimal(self.amount) != stored["amount"]:
                    raise ValidationError({"amount": "Amount cannot be changed once submitted."})
            update_fields = kwargs.get("update_fields")
            if update_fields is None:
                update_fields = [
                    field.name for field in self._meta.concrete_fields
                    if not field.primary_key
                ]
            kwargs["update_fields"] = [
                name for name in update_fields if name not in self.DECISION_FIELDS
            ]
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise InvalidStateError("Payment requests are never deleted.", current_status=self.status)


class BalanceTransaction(BaseModel):
    """Append-only history of movements on a restaurant's account balance."""
    class TransactionType(models.TextChoices):
        BALANCE_ADD = "balance_add", _("BALANCE ADD")

    uid = models.UUIDField(
        verbose_name=_("Uid"), default=uuid.uuid4, unique=True, editable=False
    )
    restaurant = models.ForeignKey(
        Restaurant, verbose_name=_("Restaurant"), on_delete=models.PROTECT,
        related_name="balance_transactions"
    )
    type = models.CharField(
        max_length=20, verbose_name=_("Transaction type"),
        choices=TransactionType.choices, default=TransactionType.BALANCE_ADD
    )
    amount = models.DecimalField(max_digits=12, decimal_places=2, verbose_name=_("Amount"))
    currency = models.CharField(
        max_length=8, verbose_name=_("Currency"), default=settings.DEFAULT_CURRENCY
    )
    balance_before = models.DecimalField(
        max_digits=12, decimal_places=2, verbose_name=_("Balance before")
    )
    balance_after = models.DecimalField(
        max_digits=12, decimal_places=2, verbose_name=_("Balance after")
    )
    payment_request = models.OneToOneField(
        PaymentRequest, verbose_name=_("Payment request"), on_delete=models.PROTECT,
        null=True, blank=True, related_name="balance_transaction"
    )
    transaction_ref = models.CharField(
        max_length=255, verbose_name=_("Transaction reference"), blank=True
    )
    description = models.TextField(verbose_name=_("Description"), blank=True)
    created_by = models.ForeignKey(
        User, verbose_name=_("Created by"), on_delete=models.SET_NULL,
        null=True, blank=True, related_name="+"
    )

    class Meta:
        verbose_name = _("Balance Transaction")
        verbose_name_plural = _("Balance Transactions")
        ordering = ["-created_date", "-id"]

    def __str__(self):
        return f"{self.restaurant} :: {self.type} :: {self.amount}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise InvalidStateError("Balance history entries cannot be modified.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise InvalidStateError("Balance history entries cannot be deleted.")
