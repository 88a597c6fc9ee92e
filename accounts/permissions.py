"""
Role-based permissions for the feedlot API.
"""

from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """
    Permission for user-management access.

    Only administrators may list, create or edit staff accounts.
    """
    message = "Only administrators can manage user accounts."

    def has_permission(self, request, view):
        return (
            request.user and
            request.user.is_authenticated and
            request.user.role == 'admin'
        )
