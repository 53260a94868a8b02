"""Django app configuration for admin accounts."""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Sign-in, sign-up and session endpoints for restaurant admins."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.accounts"
    verbose_name = "Accounts"
