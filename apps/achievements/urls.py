from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'achievements'

router = DefaultRouter()
router.register(r'', views.AchievementViewSet, basename='achievement')

urlpatterns = [
    # GET  /api/achievements/             - Catalog
    # GET  /api/achievements/{id}/        - Catalog entry
    # GET  /api/achievements/mine/        - Earned by current user
    # GET  /api/achievements/unshown/     - Not yet acknowledged
    # POST /api/achievements/mark_shown/  - Acknowledge
    path('', include(router.urls)),
]
