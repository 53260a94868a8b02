"""Django app configuration for the menu (restaurant) module."""

from django.apps import AppConfig


class RestaurantConfig(AppConfig):
    """Menu app configuration: categories, items, display settings."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.restaurant"
    verbose_name = "Menu"
