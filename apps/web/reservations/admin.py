"""Admin registration for reservation models."""

from django.contrib import admin

from apps.web.reservations.models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    """Admin for reservations."""

    list_display = [
        "name",
        "date",
        "time",
        "number_of_guests",
        "status",
        "email",
        "created_at",
    ]
    list_filter = ["status", "date"]
    search_fields = ["name", "email", "phone_number"]
    readonly_fields = ["created_at", "updated_at"]
    date_hierarchy = "date"

    fieldsets = [
        (None, {"fields": ["status"]}),
        ("Guest", {"fields": ["name", "email", "phone_number"]}),
        (
            "Booking",
            {"fields": ["date", "time", "number_of_guests", "message"]},
        ),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]
