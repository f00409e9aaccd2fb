import pytest
from rest_framework.test import APIRequestFactory
from apps.purchases.permissions import IsStaffOrReadOnly


# =============================================================================
# IsStaffOrReadOnly Tests
# =============================================================================

@pytest.mark.django_db
class TestIsStaffOrReadOnly:
    """Tests for IsStaffOrReadOnly permission class."""

    def test_anyone_can_read(self, buyer):
        """Regular users can use safe methods."""
        request = APIRequestFactory().get('/')
        request.user = buyer

        assert IsStaffOrReadOnly().has_permission(request, None) is True

    def test_regular_user_cannot_write(self, buyer):
        """Regular users cannot POST."""
        request = APIRequestFactory().post('/')
        request.user = buyer

        assert IsStaffOrReadOnly().has_permission(request, None) is False

    def test_staff_can_write(self, staff_user):
        """Staff can POST."""
        request = APIRequestFactory().post('/')
        request.user = staff_user

        assert IsStaffOrReadOnly().has_permission(request, None) is True
