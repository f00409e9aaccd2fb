import logging

from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema
from .models import Purchase, Payment
from .permissions import IsStaffOrReadOnly
from .serializers import (
    PurchaseSerializer,
    PaymentSerializer,
    BalanceSerializer,
    ScanResultSerializer,
    CompletionResultSerializer,
    # Input serializers
    PurchaseFilterSerializer,
    PaymentFilterSerializer,
    ScanInputSerializer,
    PaymentInputSerializer,
)
from .services import (
    open_purchase,
    add_scan,
    complete_purchase,
    record_payment,
    get_user_balance,
    PurchasesServiceError,
    PurchaseNotFoundError,
)
from apps.achievements.serializers import AchievementSerializer
from apps.achievements.services import (
    evaluate_purchase,
    evaluate_open_purchase,
    AchievementPersistenceError,
)

logger = logging.getLogger(__name__)


def _error_response(error):
    """Translate a purchase service error into an API response."""
    if isinstance(error, PurchaseNotFoundError):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class PurchasePagination(PageNumberPagination):
    """Custom pagination for purchases."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class PurchaseViewSet(mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      mixins.CreateModelMixin,
                      viewsets.GenericViewSet):
    """
    ViewSet for the current user's purchases.

    list: Own purchases (filterable by completion and date)
    create: Open a new purchase
    retrieve: A specific purchase with scans
    scans: Scan an item into an open purchase
    complete: Complete a purchase and evaluate achievements
    balance: Current user's balance
    """

    queryset = Purchase.objects.prefetch_related('scans__product')
    serializer_class = PurchaseSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PurchasePagination
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Only the user's own purchases, filtered by validated query params."""
        queryset = super().get_queryset().filter(user=self.request.user)

        if self.action != 'list':
            return queryset

        filter_serializer = PurchaseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        completed = params.get('completed')
        if completed is not None:
            queryset = queryset.filter(completed_at__isnull=not completed)
        if 'date_from' in params:
            queryset = queryset.filter(completed_at__date__gte=params['date_from'])
        if 'date_to' in params:
            queryset = queryset.filter(completed_at__date__lte=params['date_to'])

        return queryset

    @extend_schema(request=None, responses={201: PurchaseSerializer})
    def create(self, request, *args, **kwargs):
        """
        Open a new purchase.

        POST /api/purchases/
        """
        purchase = open_purchase(user=request.user)
        return Response(
            PurchaseSerializer(purchase).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=ScanInputSerializer, responses={201: ScanResultSerializer})
    @action(detail=True, methods=['post'])
    def scans(self, request, pk=None):
        """
        Scan an item and return any badges earned so far.

        POST /api/purchases/{id}/scans/
        Body: {"amount": "1.50", "product": 3}
        """
        serializer = ScanInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.validated_data.get('product')

        try:
            scan = add_scan(
                purchase_id=pk,
                user=request.user,
                amount=serializer.validated_data['amount'],
                product_id=product.id if product else None,
            )
        except PurchasesServiceError as e:
            return _error_response(e)

        earned = self._evaluate(evaluate_open_purchase, scan.purchase_id)

        return Response(
            ScanResultSerializer({'scan': scan, 'achievements': earned}).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=None, responses={200: CompletionResultSerializer})
    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """
        Complete a purchase and return newly earned achievements.

        POST /api/purchases/{id}/complete/
        """
        try:
            purchase = complete_purchase(purchase_id=pk, user=request.user)
        except PurchasesServiceError as e:
            return _error_response(e)

        earned = self._evaluate(evaluate_purchase, purchase.id)
        purchase = self.get_queryset().get(id=purchase.id)

        return Response({
            'purchase': PurchaseSerializer(purchase).data,
            'achievements': AchievementSerializer(earned, many=True).data,
        })

    @extend_schema(responses={200: BalanceSerializer})
    @action(detail=False, methods=['get'])
    def balance(self, request):
        """
        Get the current user's balance.

        GET /api/purchases/balance/
        """
        balance = get_user_balance(user_id=request.user.id)
        return Response(BalanceSerializer(balance).data)

    def _evaluate(self, evaluate, purchase_id):
        try:
            return evaluate(user_id=self.request.user.id, purchase_id=purchase_id)
        except AchievementPersistenceError:
            # Log error but don't fail the purchase
            logger.exception("Achievement evaluation failed for purchase %s", purchase_id)
            return []


class PaymentViewSet(mixins.ListModelMixin,
                     mixins.CreateModelMixin,
                     viewsets.GenericViewSet):
    """
    Payments towards user balances.

    list: Own payments (staff may pass ?user=<id>)
    create: Record a payment (staff only)
    """

    queryset = Payment.objects.select_related('recorded_by')
    serializer_class = PaymentSerializer
    permission_classes = [IsAuthenticated, IsStaffOrReadOnly]
    pagination_class = PurchasePagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if not self.request.user.is_staff:
            return queryset.filter(user=self.request.user)

        filter_serializer = PaymentFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        user_id = filter_serializer.validated_data.get('user')
        if user_id is not None:
            return queryset.filter(user_id=user_id)
        return queryset.filter(user=self.request.user)

    @extend_schema(request=PaymentInputSerializer, responses={201: PaymentSerializer})
    def create(self, request, *args, **kwargs):
        """
        Record a payment.

        POST /api/purchases/payments/
        Body: {"user": 5, "amount": "20.00", "notes": "cash"}
        """
        serializer = PaymentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            payment = record_payment(
                user_id=data['user'].id,
                amount=data['amount'],
                notes=data['notes'],
                recorded_by=request.user,
            )
        except PurchasesServiceError as e:
            return _error_response(e)

        return Response(
            PaymentSerializer(payment).data,
            status=status.HTTP_201_CREATED
        )
