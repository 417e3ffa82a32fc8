from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.generics import (ListAPIView, ListCreateAPIView,
                                     RetrieveAPIView)
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import SubscriptionPlan
from billing.api.base.serializers import (
    BaseAdminPaymentRequestDetailSerializer, BaseAdminPaymentRequestSerializer,
    BaseBalanceTransactionSerializer, BasePaymentRequestCreateSerializer,
    BasePaymentRequestReviewSerializer, BasePaymentRequestSerializer,
    BasePaymentRequestVerifySerializer, BasePlanUpgradeQuoteSerializer,
    BaseReceiptSerializer, BaseReceiptUploadSerializer)
from billing.models import PaymentRequest
from billing.utilities.account_balance import AccountBalanceService
from billing.utilities.payment_ledger import PaymentRequestLedger
from billing.utilities.plan_pricing import days_remaining, quote_upgrade
from billing.utilities.receipt_store import ReceiptStore
from core.api.mixins import (RestaurantParamMixin,
                             RestaurantScopedQuerysetMixin)
from core.api.paginations import StandardResultsSetPagination
from core.api.permissions import HasRestaurantAccess
from core.exceptions import NotFoundError


class BaseReceiptUploadAPIView(RestaurantParamMixin, APIView):
    permission_classes = [IsAuthenticated, HasRestaurantAccess]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        sr = BaseReceiptUploadSerializer(data=request.data)
        sr.is_valid(raise_exception=True)
        restaurant = self.get_restaurant()
        receipt = ReceiptStore.store(
            sr.validated_data['file'], restaurant, uploaded_by=request.user)
        return Response(
            BaseReceiptSerializer(receipt, context={'request': request}).data,
            status=status.HTTP_201_CREATED,
        )


class BasePaymentRequestListCreateAPIView(RestaurantScopedQuerysetMixin, ListCreateAPIView):
    """
        Vendor side: submit a payment request for verification, or list the
        payment requests of the restaurants the caller owns.
    """
    model_class = PaymentRequest
    serializer_class = BasePaymentRequestSerializer
    permission_classes = [IsAuthenticated, HasRestaurantAccess]
    pagination_class = StandardResultsSetPagination
    filterset_fields = ['restaurant', 'status', 'payment_method']
    ordering_fields = ['created_date', 'amount']

    def get_base_queryset(self):
        return PaymentRequest.objects.select_related('restaurant', 'receipt')

    def create(self, request, *args, **kwargs):
        sr = BasePaymentRequestCreateSerializer(data=request.data)
        sr.is_valid(raise_exception=True)
        data = sr.validated_data
        payment_request = PaymentRequestLedger.create(
            restaurant_id=data['restaurant'],
            amount=data['amount'],
            payment_method=data['payment_method'],
            transaction_ref=data['transaction_ref'],
            receipt_ref=data['receipt'],
            description=data.get('description'),
            bank_details=sr.get_bank_details(),
            submitted_by=request.user,
        )
        return Response(
            self.get_serializer(payment_request).data,
            status=status.HTTP_201_CREATED,
        )


class BasePaymentRequestRetrieveAPIView(RestaurantScopedQuerysetMixin, RetrieveAPIView):
    model_class = PaymentRequest
    serializer_class = BasePaymentRequestSerializer
    permission_classes = [IsAuthenticated, HasRestaurantAccess]
    lookup_field = 'uid'

    def get_base_queryset(self):
        return PaymentRequest.objects.select_related('restaurant', 'receipt')


class BaseBalanceHistoryListAPIView(RestaurantParamMixin, ListAPIView):
    serializer_class = BaseBalanceTransactionSerializer
    permission_classes = [IsAuthenticated, HasRestaurantAccess]
    pagination_class = StandardResultsSetPagination

    def get_queryset(self):
        restaurant = self.get_restaurant()
        return AccountBalanceService.history(restaurant.id)


class BasePlanUpgradeQuoteAPIView(RestaurantParamMixin, APIView):
    permission_classes = [IsAuthenticated, HasRestaurantAccess]

    def get(self, request):
        restaurant = self.get_restaurant()
        target_plan_id = request.query_params.get('target_plan', None)
        if not target_plan_id or not str(target_plan_id).isdigit():
            raise ValidationError({'target_plan': 'target_plan must be provided in query params!'})

        target_plan = SubscriptionPlan.objects.active().filter(id=target_plan_id).first()
        if target_plan is None:
            raise NotFoundError('Plan not found.')
        if restaurant.plan_id == target_plan.id:
            raise ValidationError({'target_plan': 'Restaurant is already on this plan.'})

        quote = quote_upgrade(
            restaurant.plan, target_plan, days_remaining(restaurant.plan_expiry_date))
        balance = AccountBalanceService.read_balance(restaurant.id)
        sr = BasePlanUpgradeQuoteSerializer({
            'restaurant': restaurant.id,
            'current_plan': restaurant.plan_id,
            'target_plan': target_plan.id,
            'currency': quote.currency,
            'price_difference': quote.price_difference,
            'pro_rated_amount': quote.pro_rated_amount,
            'days_remaining': quote.days_remaining,
            'duration_days': quote.duration_days,
            'account_balance': balance,
            'sufficient_balance': balance >= quote.pro_rated_amount,
        })
        return Response(sr.data)


class BaseAdminPaymentRequestListAPIView(ListAPIView):
    """
        Verification queue. Filters: ``status``, ``restaurant``, ``search``
        (restaurant name, transaction reference or amount). The response carries
        a ``summary`` of the filtered set next to the paginated results.
    """
    serializer_class = BaseAdminPaymentRequestSerializer
    permission_classes = [IsAdminUser]
    pagination_class = StandardResultsSetPagination
    filter_backends = []

    def get_queryset(self):
        params = self.request.query_params
        restaurant_id = params.get('restaurant', None)
        if restaurant_id and not restaurant_id.isdigit():
            raise ValidationError({'restaurant': 'A valid integer is required.'})
        return PaymentRequestLedger.list(
            status=params.get('status', None),
            restaurant_id=restaurant_id,
            search=params.get('search', None),
        ).select_related('submitted_by', 'reviewed_by', 'processed_by')

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        summary = queryset.summary()
        summary['total_amount'] = str(summary['total_amount'])
        response = super().list(request, *args, **kwargs)
        response.data['summary'] = summary
        return response


class BaseAdminPaymentRequestRetrieveAPIView(RetrieveAPIView):
    serializer_class = BaseAdminPaymentRequestDetailSerializer
    permission_classes = [IsAdminUser]

    def get_object(self):
        return PaymentRequestLedger.get(self.kwargs['uid'])


class BaseAdminPaymentRequestReviewAPIView(APIView):
    permission_classes = [IsAdminUser]

    def post(self, request, uid):
        sr = BasePaymentRequestReviewSerializer(data=request.data)
        sr.is_valid(raise_exception=True)
        payment_request = PaymentRequestLedger.transition(
            uid,
            PaymentRequestLedger.MARK_UNDER_REVIEW,
            admin=request.user,
            notes=sr.validated_data.get('admin_notes', None),
        )
        return Response(
            BaseAdminPaymentRequestDetailSerializer(payment_request, context={'request': request}).data)


class BaseAdminPaymentRequestVerifyAPIView(APIView):
    permission_classes = [IsAdminUser]

    def post(self, request, uid):
        sr = BasePaymentRequestVerifySerializer(data=request.data)
        sr.is_valid(raise_exception=True)
        data = sr.validated_data
        payment_request = PaymentRequestLedger.transition(
            uid,
            data['action'],
            admin=request.user,
            notes=data.get('admin_notes', None),
            rejection_reason=data.get('rejection_reason', None),
        )
        return Response(
            BaseAdminPaymentRequestDetailSerializer(payment_request, context={'request': request}).data)
