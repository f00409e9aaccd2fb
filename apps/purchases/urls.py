from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'purchases'

# Note: payments must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'payments', views.PaymentViewSet, basename='payment')
router.register(r'', views.PurchaseViewSet, basename='purchase')

urlpatterns = [
    # Purchase ViewSet routes
    # GET    /api/purchases/                 - List own purchases
    # POST   /api/purchases/                 - Open a purchase
    # GET    /api/purchases/{id}/            - Purchase with scans
    # POST   /api/purchases/{id}/scans/      - Scan an item
    # POST   /api/purchases/{id}/complete/   - Complete and evaluate achievements
    # GET    /api/purchases/balance/         - Current balance

    # Payment routes
    # GET    /api/purchases/payments/        - Own payments
    # POST   /api/purchases/payments/        - Record payment (staff)

    path('', include(router.urls)),
]
