"""
Custom managers for admin accounts.

AdminManager creates admins keyed by email instead of username.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from django.contrib.auth.base_user import BaseUserManager

if TYPE_CHECKING:
    from .models import Admin

_T = TypeVar("_T", bound="Admin")


class AdminManager(BaseUserManager[_T]):
    """
    Manager for the Admin user model.

    Usage:
        admin = Admin.objects.create_user("owner@example.com", "s3cret-pass")

    Passwords are hashed with Django's configured PASSWORD_HASHERS; the raw
    value is never stored.
    """

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any) -> _T:
        if not email:
            msg = "Admins must have an email address"
            raise ValueError(msg)
        admin = self.model(email=self.normalize_email(email), **extra_fields)
        admin.set_password(password)
        admin.save(using=self._db)
        return admin

    def create_user(
        self, email: str, password: str | None = None, **extra_fields: Any
    ) -> _T:
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(
        self, email: str, password: str | None = None, **extra_fields: Any
    ) -> _T:
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if extra_fields.get("is_staff") is not True:
            msg = "Superuser must have is_staff=True."
            raise ValueError(msg)
        if extra_fields.get("is_superuser") is not True:
            msg = "Superuser must have is_superuser=True."
            raise ValueError(msg)
        return self._create_user(email, password, **extra_fields)
