from django.urls import path

from billing.api.v1.views import (AdminPaymentRequestListAPIView,
                                  AdminPaymentRequestRetrieveAPIView,
                                  AdminPaymentRequestReviewAPIView,
                                  AdminPaymentRequestVerifyAPIView,
                                  BalanceHistoryListAPIView,
                                  PaymentRequestListCreateAPIView,
                                  PaymentRequestRetrieveAPIView,
                                  PlanUpgradeQuoteAPIView,
                                  ReceiptUploadAPIView)

urlpatterns = [
    path('receipts/', ReceiptUploadAPIView.as_view(), name='receipt-upload'),
    path('payment-requests/', PaymentRequestListCreateAPIView.as_view(),
         name='payment-request-list'),
    path('payment-requests/<uuid:uid>/', PaymentRequestRetrieveAPIView.as_view(),
         name='payment-request-detail'),
    path('balance-history/', BalanceHistoryListAPIView.as_view(), name='balance-history'),
    path('plan-upgrade/quote/', PlanUpgradeQuoteAPIView.as_view(), name='plan-upgrade-quote'),

    # verification
    path('admin/payment-requests/', AdminPaymentRequestListAPIView.as_view(),
         name='admin-payment-request-list'),
    path('admin/payment-requests/<uuid:uid>/', AdminPaymentRequestRetrieveAPIView.as_view(),
         name='admin-payment-request-detail'),
    path('admin/payment-requests/<uuid:uid>/review/', AdminPaymentRequestReviewAPIView.as_view(),
         name='admin-payment-request-review'),
    path('admin/payment-requests/<uuid:uid>/verify/', AdminPaymentRequestVerifyAPIView.as_view(),
         name='admin-payment-request-verify'),
]
