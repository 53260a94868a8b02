"""
URL routing for reservation API endpoints.

Creating a reservation is public; reading and managing them requires an
admin session.
"""

from django.urls import path

from apps.web.reservations import views

app_name = "reservations"

urlpatterns = [
    path("reservations", views.reservation_collection, name="reservation_list"),
    path(
        "reservations/<int:reservation_id>",
        views.reservation_detail,
        name="reservation_detail",
    ),
]
