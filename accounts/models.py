from django.contrib.auth.models import AbstractUser
from django.db import models
import uuid


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.

    Every feedlot staff member is either an administrator (can manage other
    user accounts) or an employee. No other operation is role-gated.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class UserRole(models.TextChoices):
        ADMIN = 'admin', 'Administrator'
        EMPLOYEE = 'employee', 'Employee'

    full_name = models.CharField(
        max_length=150,
        blank=True,
        help_text="Name shown in the dashboard and on created records"
    )

    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.EMPLOYEE,
        db_index=True,
        help_text="User's role in the system"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    last_login_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['full_name', 'username']
        indexes = [
            models.Index(fields=['role', 'is_active'], name='users_role_active_idx'),
        ]

    def __str__(self):
        return f"{self.get_full_name()} ({self.get_role_display()})"

    def get_full_name(self):
        """Return the stored full name, falling back to first/last name or username."""
        if self.full_name:
            return self.full_name
        full_name = super().get_full_name()
        return full_name if full_name else self.username

    @property
    def is_admin(self):
        return self.role == self.UserRole.ADMIN
