from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter()
router.register(r'products', views.ProductViewSet, basename='product')
router.register(r'batches', views.ProductBatchViewSet, basename='batch')

urlpatterns = [
    # GET  /api/inventory/products/             - List products
    # GET  /api/inventory/products/{id}/stock/  - Stock summary
    # GET  /api/inventory/batches/              - Batches with quantities (staff)
    # POST /api/inventory/shelving-actions/     - Record movement (staff)
    path('shelving-actions/', views.record_shelving_action, name='shelving-action-create'),

    path('', include(router.urls)),
]
