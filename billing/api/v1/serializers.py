from billing.api.base.serializers import (BaseAdminPaymentRequestSerializer,
                                          BaseBalanceTransactionSerializer,
                                          BasePaymentRequestSerializer)


class PaymentRequestSerializer(BasePaymentRequestSerializer):
    pass


class AdminPaymentRequestSerializer(BaseAdminPaymentRequestSerializer):
    pass


class BalanceTransactionSerializer(BaseBalanceTransactionSerializer):
    pass
