from billing.api.base.views import (
    BaseAdminPaymentRequestListAPIView, BaseAdminPaymentRequestRetrieveAPIView,
    BaseAdminPaymentRequestReviewAPIView, BaseAdminPaymentRequestVerifyAPIView,
    BaseBalanceHistoryListAPIView, BasePaymentRequestListCreateAPIView,
    BasePaymentRequestRetrieveAPIView, BasePlanUpgradeQuoteAPIView,
    BaseReceiptUploadAPIView)
from billing.api.v1.serializers import (AdminPaymentRequestSerializer,
                                        BalanceTransactionSerializer,
                                        PaymentRequestSerializer)


class ReceiptUploadAPIView(BaseReceiptUploadAPIView):
    pass


class PaymentRequestListCreateAPIView(BasePaymentRequestListCreateAPIView):
    serializer_class = PaymentRequestSerializer


class PaymentRequestRetrieveAPIView(BasePaymentRequestRetrieveAPIView):
    serializer_class = PaymentRequestSerializer


class BalanceHistoryListAPIView(BaseBalanceHistoryListAPIView):
    serializer_class = BalanceTransactionSerializer


class PlanUpgradeQuoteAPIView(BasePlanUpgradeQuoteAPIView):
    pass


class AdminPaymentRequestListAPIView(BaseAdminPaymentRequestListAPIView):
    serializer_class = AdminPaymentRequestSerializer


class AdminPaymentRequestRetrieveAPIView(BaseAdminPaymentRequestRetrieveAPIView):
    pass


class AdminPaymentRequestReviewAPIView(BaseAdminPaymentRequestReviewAPIView):
    pass


class AdminPaymentRequestVerifyAPIView(BaseAdminPaymentRequestVerifyAPIView):
    pass
