from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import Product, ProductBatch
from .serializers import (
    BatchFilterSerializer,
    ProductSerializer,
    ProductBatchSerializer,
    ProductStockSummarySerializer,
    ShelvingActionInputSerializer,
    ShelvingActionSerializer,
)
from .services import (
    record_shelving_action as record_shelving_action_service,
    get_product_stock_summary,
    BatchNotFoundError,
    InsufficientStockError,
)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only product catalog.

    list: Active products
    retrieve: A single product
    stock: Derived stock summary for a product
    """

    queryset = Product.objects.filter(is_active=True)
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: ProductStockSummarySerializer})
    @action(detail=True, methods=['get'])
    def stock(self, request, pk=None):
        """
        Get derived stock levels for this product.

        GET /api/inventory/products/{id}/stock/
        """
        product = self.get_object()
        summary = get_product_stock_summary(product_id=product.id)
        return Response(ProductStockSummarySerializer(summary).data)


class ProductBatchViewSet(viewsets.ReadOnlyModelViewSet):
    """Batches with storage/shelf quantities (staff only)."""

    queryset = ProductBatch.objects.select_related('product').prefetch_related('shelving_actions')
    serializer_class = ProductBatchSerializer
    permission_classes = [IsAdminUser]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = BatchFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        product_id = filter_serializer.validated_data.get('product')
        if product_id is not None:
            queryset = queryset.filter(product_id=product_id)
        return queryset


@extend_schema(
    request=ShelvingActionInputSerializer,
    responses={201: ShelvingActionSerializer},
    description="Record a stock movement for a batch (staff only).",
    tags=['inventory'],
)
@api_view(['POST'])
@permission_classes([IsAdminUser])
def record_shelving_action(request):
    """Record a shelving action."""
    serializer = ShelvingActionInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        shelving_action = record_shelving_action_service(
            batch_id=data['batch'],
            action_type=data['action_type'],
            quantity=data['quantity'],
            action_at=data.get('action_at'),
        )
    except BatchNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InsufficientStockError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(
        ShelvingActionSerializer(shelving_action).data,
        status=status.HTTP_201_CREATED
    )
