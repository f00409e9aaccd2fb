from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import Achievement
from .serializers import (
    AchievementSerializer,
    UserAchievementSerializer,
    MarkShownInputSerializer,
    MarkShownResponseSerializer,
)
from .services import (
    get_user_achievements,
    get_unshown_achievements,
    mark_achievements_shown,
)


class AchievementViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Achievement catalog and the current user's earned achievements.

    list: Full catalog
    retrieve: One catalog entry
    mine: Achievements the user has earned
    unshown: Earned achievements not yet acknowledged
    mark_shown: Acknowledge earned achievements
    """

    queryset = Achievement.objects.all()
    serializer_class = AchievementSerializer
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserAchievementSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """
        GET /api/achievements/mine/
        """
        earned = get_user_achievements(user_id=request.user.id)
        return Response(UserAchievementSerializer(earned, many=True).data)

    @extend_schema(responses={200: UserAchievementSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def unshown(self, request):
        """
        GET /api/achievements/unshown/
        """
        earned = get_unshown_achievements(user_id=request.user.id)
        return Response(UserAchievementSerializer(earned, many=True).data)

    @extend_schema(
        request=MarkShownInputSerializer,
        responses={200: MarkShownResponseSerializer},
    )
    @action(detail=False, methods=['post'])
    def mark_shown(self, request):
        """
        Mark earned achievements as shown.

        POST /api/achievements/mark_shown/
        Body: {"ids": [1, 2]} or {} for all
        """
        serializer = MarkShownInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated = mark_achievements_shown(
            user_id=request.user.id,
            ids=serializer.validated_data.get('ids'),
        )
        return Response({'updated': updated})
