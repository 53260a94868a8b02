"""
Core models - admin accounts and shared bases.

All domain models inherit from TimestampedModel.
"""

from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.db import models

from .managers import AdminManager


class TimestampedModel(models.Model):
    """
    Abstract base for all domain models.

    Provides created/updated timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Admin(AbstractBaseUser, PermissionsMixin):
    """
    Restaurant administrator.

    Identified by email; the session established at sign-in refers to this
    account. No other table holds a foreign key to it.
    """

    email = models.EmailField(unique=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(
        default=False,
        help_text="Can log into the Django admin site",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AdminManager()

    EMAIL_FIELD = "email"
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        ordering = ["email"]

    def __str__(self) -> str:
        return self.email
