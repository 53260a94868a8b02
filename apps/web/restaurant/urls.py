"""
URL routing for menu API endpoints.

Reads are public; writes require an admin session.
"""

from django.urls import path

from apps.web.restaurant import views

app_name = "restaurant"

urlpatterns = [
    # Categories
    path("categories", views.category_collection, name="category_list"),
    path(
        "categories/<int:category_id>",
        views.category_detail,
        name="category_detail",
    ),
    # Menu items
    path("menu-items", views.menu_item_collection, name="menu_item_list"),
    path("menu-items/<int:item_id>", views.menu_item_detail, name="menu_item_detail"),
    # Display settings (admin)
    path("menu-settings", views.menu_settings, name="menu_settings"),
]
