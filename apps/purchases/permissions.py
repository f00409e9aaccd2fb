"""
Custom permission classes for purchases app.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsStaffOrReadOnly(BasePermission):
    """
    Read access for any authenticated user, writes for staff only.

    Usage:
        permission_classes = [IsAuthenticated, IsStaffOrReadOnly]
    """

    message = 'Only staff members can record payments.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_staff)
