from rest_framework import serializers

from billing.models import BalanceTransaction, PaymentRequest, Receipt


class BaseReceiptSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()

    class Meta:
        model = Receipt
        fields = ['uid', 'restaurant', 'url', 'original_filename', 'content_type', 'size', 'created_date']
        read_only_fields = fields

    def get_url(self, obj: Receipt):
        url = obj.url
        request = self.context.get('request')
        if url and request is not None and url.startswith('/'):
            return request.build_absolute_uri(url)
        return url


class BaseReceiptUploadSerializer(serializers.Serializer):
    restaurant = serializers.IntegerField()
    file = serializers.FileField(allow_empty_file=False)


class BasePaymentRequestCreateSerializer(serializers.Serializer):
    restaurant = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    payment_method = serializers.ChoiceField(choices=PaymentRequest.PaymentMethod.choices)
    transaction_ref = serializers.CharField(max_length=255)
    receipt = serializers.UUIDField()
    description = serializers.CharField(required=False, allow_blank=True, default='')
    bank_name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    account_number = serializers.CharField(required=False, allow_blank=True, max_length=64)
    account_holder = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def get_bank_details(self):
        return {
            field: self.validated_data.get(field, '')
            for field in ('bank_name', 'account_number', 'account_holder')
        }


class BasePaymentRequestSerializer(serializers.ModelSerializer):
    restaurant_name = serializers.CharField(source='restaurant.name', read_only=True)
    receipt = BaseReceiptSerializer(read_only=True)

    class Meta:
        model = PaymentRequest
        fields = [
            'uid', 'restaurant', 'restaurant_name', 'amount', 'currency', 'payment_method',
            'bank_name', 'account_number', 'account_holder', 'transaction_ref', 'receipt',
            'description', 'status', 'admin_notes', 'rejection_reason', 'reviewed_at',
            'processed_at', 'created_date', 'modified_date',
        ]
        read_only_fields = fields


class BaseAdminPaymentRequestSerializer(BasePaymentRequestSerializer):
    submitted_by = serializers.EmailField(source='submitted_by.email', read_only=True, default=None)
    reviewed_by = serializers.EmailField(source='reviewed_by.email', read_only=True, default=None)
    processed_by = serializers.EmailField(source='processed_by.email', read_only=True, default=None)

    class Meta(BasePaymentRequestSerializer.Meta):
        fields = BasePaymentRequestSerializer.Meta.fields + [
            'submitted_by', 'reviewed_by', 'processed_by',
        ]
        read_only_fields = fields


class BaseAdminPaymentRequestDetailSerializer(BaseAdminPaymentRequestSerializer):
    plan_context = serializers.SerializerMethodField()

    class Meta(BaseAdminPaymentRequestSerializer.Meta):
        fields = BaseAdminPaymentRequestSerializer.Meta.fields + ['plan_context']
        read_only_fields = fields

    def get_plan_context(self, obj: PaymentRequest):
        restaurant = obj.restaurant
        plan = restaurant.plan
        return {
            'account_balance': str(restaurant.account_balance),
            'currency': restaurant.currency,
            'restaurant_status': restaurant.status,
            'plan_expiry_date': restaurant.plan_expiry_date,
            'current_plan': None if plan is None else {
                'id': plan.id,
                'name': plan.name,
                'price': str(plan.price),
                'duration_days': plan.duration_days,
            },
        }


class BasePaymentRequestVerifySerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=['approve', 'reject'])
    admin_notes = serializers.CharField(required=False, allow_blank=True)
    rejection_reason = serializers.CharField(required=False, allow_blank=True)


class BasePaymentRequestReviewSerializer(serializers.Serializer):
    admin_notes = serializers.CharField(required=False, allow_blank=True)


class BaseBalanceTransactionSerializer(serializers.ModelSerializer):
    payment_request = serializers.UUIDField(source='payment_request.uid', read_only=True, default=None)

    class Meta:
        model = BalanceTransaction
        fields = ['uid', 'restaurant', 'type', 'amount', 'currency', 'balance_before',
                  'balance_after', 'payment_request', 'transaction_ref', 'description',
                  'created_date']
        read_only_fields = fields


class BasePlanUpgradeQuoteSerializer(serializers.Serializer):
    restaurant = serializers.IntegerField()
    current_plan = serializers.IntegerField(allow_null=True)
    target_plan = serializers.IntegerField()
    currency = serializers.CharField()
    price_difference = serializers.DecimalField(max_digits=14, decimal_places=2)
    pro_rated_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    days_remaining = serializers.IntegerField()
    duration_days = serializers.IntegerField()
    account_balance = serializers.DecimalField(max_digits=14, decimal_places=2)
    sufficient_balance = serializers.BooleanField()
