from rest_framework.permissions import BasePermission


class IsDirectoryAdmin(BasePermission):
    """
    Approval queues and moderation. The administrator is a role claim on the
    user (`is_staff`), never a configured email address.
    """
    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and (user.is_staff or user.is_superuser))


class IsBusinessUser(BasePermission):
    message = "Only business accounts can do this."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "user_type", None) == "business")


class IsSeekerUser(BasePermission):
    message = "Only seeker accounts can do this."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "user_type", None) == "seeker")
