from django.contrib import admin, messages
from django.contrib.admin import display

from billing.models import BalanceTransaction, PaymentRequest, Receipt
from billing.utilities.payment_ledger import PaymentRequestLedger
from core.exceptions import InvalidStateError


class ReadOnlyAdminMixin:
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(PaymentRequest)
class PaymentRequestAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['uid', 'restaurant', 'amount', 'currency', 'payment_method',
                    'transaction_ref', 'status', 'created_date', 'processed_at']
    list_filter = ['status', 'payment_method']
    search_fields = ['restaurant__name', 'transaction_ref']
    date_hierarchy = 'created_date'
    actions = ['mark_under_review', 'approve']

    def _run_transition(self, request, queryset, action):
        done = 0
        for payment_request in queryset:
            try:
                PaymentRequestLedger.transition(payment_request.pk, action, admin=request.user)
                done += 1
            except InvalidStateError as e:
                self.message_user(
                    request, f"{payment_request.uid}: {e.detail}", level=messages.WARNING)
        self.message_user(request, f"{done} payment request(s) updated.")

    @admin.action(description="Mark selected requests under review")
    def mark_under_review(self, request, queryset):
        self._run_transition(request, queryset, PaymentRequestLedger.MARK_UNDER_REVIEW)

    @admin.action(description="Approve selected requests and credit balance")
    def approve(self, request, queryset):
        self._run_transition(request, queryset, PaymentRequestLedger.APPROVE)


@admin.register(Receipt)
class ReceiptAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['uid', 'restaurant', 'original_filename', 'content_type', 'size', 'created_date']
    search_fields = ['restaurant__name', 'original_filename']


@admin.register(BalanceTransaction)
class BalanceTransactionAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['uid', 'restaurant', 'type', 'amount', 'balance_before',
                    'balance_after', 'payment_request_uid', 'created_date']
    list_filter = ['type']
    search_fields = ['restaurant__name', 'transaction_ref']

    @display(description='Payment request')
    def payment_request_uid(self, obj: BalanceTransaction):
        return obj.payment_request.uid if obj.payment_request else '-'
