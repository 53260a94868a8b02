"""
URL configuration for the restaurant backend.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    # JSON API
    path("api/auth/", include("apps.web.accounts.urls")),
    path("api/", include("apps.web.restaurant.urls")),
    path("api/", include("apps.web.reservations.urls")),
]
