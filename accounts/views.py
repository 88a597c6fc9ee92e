import logging

from django.contrib.auth import get_user_model
from rest_framework import generics, permissions
from rest_framework_simplejwt.views import TokenObtainPairView

from .permissions import IsAdmin
from .serializers import (
    UserSerializer,
    UserCreateSerializer,
    UserAdminUpdateSerializer,
    CustomTokenObtainPairSerializer,
)

User = get_user_model()
logger = logging.getLogger(__name__)


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    Custom JWT token obtain view with additional user information.
    """
    serializer_class = CustomTokenObtainPairSerializer


class UserProfileView(generics.RetrieveUpdateAPIView):
    """
    GET/PATCH /api/auth/profile/

    Retrieve or update the authenticated user's own profile.
    """
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user


class UserListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/auth/users/
    POST /api/auth/users/

    List and create staff accounts. Administrators only.
    """
    queryset = User.objects.all()
    permission_classes = [permissions.IsAuthenticated, IsAdmin]
    filterset_fields = ['role', 'is_active']
    search_fields = ['full_name', 'username', 'email']
    ordering_fields = ['full_name', 'created_at']

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return UserCreateSerializer
        return UserAdminUpdateSerializer

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info(
            f"User {user.username} ({user.role}) created by {self.request.user.username}"
        )


class UserDetailView(generics.RetrieveUpdateAPIView):
    """
    GET/PUT/PATCH /api/auth/users/{id}/

    Edit a staff account's name, role or active flag. Administrators only.
    """
    queryset = User.objects.all()
    serializer_class = UserAdminUpdateSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def perform_update(self, serializer):
        user = serializer.save()
        logger.info(
            f"User {user.username} updated by {self.request.user.username} "
            f"(role={user.role}, active={user.is_active})"
        )
