"""
Role-based permission classes shared by every app.

Roles come from ``User.role``; admins manage money and approvals, cooks
submit kitchen lists and night sales.
"""
from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """
    Permission: User must have the admin role.

    Usage:
        @permission_classes([IsAuthenticated, IsAdminRole])
        def capital_detail(request):
            ...
    """

    message = 'Solo un administrador puede realizar esta acción.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsCookRole(BasePermission):
    """
    Permission: User must have the cook role.
    """

    message = 'Solo un cocinero puede realizar esta acción.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_cook)
