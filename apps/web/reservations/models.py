"""
Reservation models - table bookings and their status.
"""

from django.core.validators import MinValueValidator
from django.db import models

from apps.web.core.models import TimestampedModel


class ReservationStatus(models.TextChoices):
    """
    Reservation lifecycle status.

    Any status may move to any other; Confirmed and Cancelled are terminal
    in practice only.
    """

    PENDING = "Pending", "Pending"
    CONFIRMED = "Confirmed", "Confirmed"
    CANCELLED = "Cancelled", "Cancelled"


class Reservation(TimestampedModel):
    """
    A table reservation made from the public site.

    Created as Pending; staff confirm or cancel it and the guest is emailed.
    """

    # Guest
    name = models.CharField(max_length=200)
    email = models.EmailField()
    phone_number = models.CharField(max_length=30)

    # Booking
    number_of_guests = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    date = models.DateField()
    time = models.CharField(max_length=20, help_text="Requested time, e.g. 19:30")
    message = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=ReservationStatus.choices,
        default=ReservationStatus.PENDING,
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["date"], name="reservation_date_idx"),
            models.Index(fields=["status"], name="reservation_status_idx"),
            models.Index(fields=["created_at"], name="reservation_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.date} {self.time} ({self.number_of_guests})"
