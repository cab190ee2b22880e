from rest_framework.permissions import BasePermission

from authentication.models import Role


class IsSessionAuthenticated(BasePermission):
    """A session user resolved by SessionAuthenticationMiddleware is present."""

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        return bool(user and getattr(user, "is_authenticated", False))


class IsDoctor(IsSessionAuthenticated):
    message = "Only doctors can perform this action"

    def has_permission(self, request, view):
        if not super().has_permission(request, view):
            return False
        return getattr(request.user, "role", None) == Role.DOCTOR
