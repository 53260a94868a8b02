"""
Reservation services - booking CRUD and the status workflow.

Status changes are persisted before the guest is emailed. A failed delivery
does not roll the change back: it is logged and reported to the caller
alongside the updated reservation.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from django.conf import settings
from django.db.models import Q

from apps.web.core.exceptions import ValidationError
from apps.web.core.gateway import ModelGateway
from apps.web.reservations import notifications
from apps.web.reservations.models import Reservation, ReservationStatus
from apps.web.reservations.notifications import NotificationError
from apps.web.reservations.serializers import ReservationListQuery, ReservationRequest

logger = logging.getLogger(__name__)

reservation_gateway: ModelGateway[Reservation] = ModelGateway(Reservation)

# (to_email, subject, body) -> provider message id
Notifier = Callable[[str, str, str], str]

NEW_RESERVATION_SUBJECT = "New Table Reservation"

# Target status -> (subject, body template)
STATUS_EMAILS: dict[str, tuple[str, str]] = {
    ReservationStatus.CONFIRMED.value: (
        "Your Reservation is Confirmed",
        "confirmed.txt",
    ),
    ReservationStatus.CANCELLED.value: (
        "Your Reservation is Cancelled",
        "cancelled.txt",
    ),
    ReservationStatus.PENDING.value: (
        "Your Reservation is Pending",
        "pending.txt",
    ),
}


@dataclass(frozen=True)
class NotificationOutcome:
    """What happened to the email that accompanies a reservation change."""

    sent: bool
    error: str = ""


@dataclass(frozen=True)
class ReservationResult:
    """A persisted reservation plus the outcome of its notification."""

    reservation: Reservation
    notification: NotificationOutcome


def _dispatch(
    notifier: Notifier,
    to_email: str,
    subject: str,
    template_name: str,
    reservation: Reservation,
) -> NotificationOutcome:
    """Render and send one email. NotificationError is reported, not raised."""
    try:
        body = notifications.render_body(template_name, {"reservation": reservation})
        notifier(to_email, subject, body)
    except NotificationError as e:
        logger.warning(
            "Notification '%s' to %s failed: %s", subject, to_email, e.message
        )
        return NotificationOutcome(sent=False, error=e.message)
    return NotificationOutcome(sent=True)


def create_reservation(
    data: ReservationRequest,
    *,
    gateway: ModelGateway[Reservation] | None = None,
    notifier: Notifier | None = None,
) -> ReservationResult:
    """
    Store a new reservation (status Pending) and notify the restaurant inbox.

    The inbox notice is skipped when RESERVATION_NOTIFY_EMAIL is blank.
    """
    gateway = gateway or reservation_gateway
    notifier = notifier or notifications.send_email

    fields = data.model_dump()
    fields["message"] = fields["message"] or ""
    reservation = gateway.create(**fields)
    logger.info(
        "Reservation %s created for %s on %s at %s",
        reservation.pk,
        reservation.email,
        reservation.date,
        reservation.time,
    )

    inbox = getattr(settings, "RESERVATION_NOTIFY_EMAIL", "")
    if not inbox:
        logger.info("RESERVATION_NOTIFY_EMAIL not set, skipping inbox notice")
        return ReservationResult(reservation, NotificationOutcome(sent=False))

    outcome = _dispatch(
        notifier, inbox, NEW_RESERVATION_SUBJECT, "new_reservation.txt", reservation
    )
    return ReservationResult(reservation, outcome)


def date_range_filter(query: ReservationListQuery) -> Q:
    """Inclusive [start_date, end_date] filter; either bound may be absent."""
    filters = Q()
    if query.start_date is not None:
        filters &= Q(date__gte=query.start_date)
    if query.end_date is not None:
        filters &= Q(date__lte=query.end_date)
    return filters


def list_reservations(
    query: ReservationListQuery,
    gateway: ModelGateway[Reservation] | None = None,
) -> tuple[list[Reservation], int]:
    """
    One page of reservations, newest first.

    Returns:
        Tuple of (page rows, total rows matching the filter)
    """
    gateway = gateway or reservation_gateway
    filters = date_range_filter(query)

    rows = gateway.find_many(
        filters,
        offset=(query.page - 1) * query.page_size,
        limit=query.page_size,
        order_by=["-created_at", "-pk"],
    )
    return rows, gateway.count(filters)


def get_reservation(
    reservation_id: int, gateway: ModelGateway[Reservation] | None = None
) -> Reservation:
    gateway = gateway or reservation_gateway
    return gateway.get(reservation_id)


def update_reservation(
    reservation_id: int,
    data: ReservationRequest,
    gateway: ModelGateway[Reservation] | None = None,
) -> Reservation:
    """Overwrite the booking details. Status only changes through the workflow."""
    gateway = gateway or reservation_gateway
    fields = data.model_dump()
    fields["message"] = fields["message"] or ""
    return gateway.update(reservation_id, **fields)


def delete_reservation(
    reservation_id: int, gateway: ModelGateway[Reservation] | None = None
) -> Reservation:
    gateway = gateway or reservation_gateway
    reservation = gateway.delete(reservation_id)
    logger.info("Reservation %s deleted", reservation_id)
    return reservation


def change_reservation_status(
    reservation_id: int,
    status: str,
    *,
    gateway: ModelGateway[Reservation] | None = None,
    notifier: Notifier | None = None,
) -> ReservationResult:
    """
    Move a reservation to a new status and email the guest.

    Steps:
    1. Reject statuses outside Pending/Confirmed/Cancelled (nothing persisted)
    2. Load the reservation (NotFoundError if absent)
    3. Persist the new status
    4. Refuse to notify when the stored email is blank (status stays changed)
    5. Render and email the guest; a failure in either is reported, not raised

    Raises:
        ValidationError: Invalid status, or reservation has no email
        NotFoundError: Reservation does not exist
    """
    gateway = gateway or reservation_gateway
    notifier = notifier or notifications.send_email

    if status not in ReservationStatus.values:
        allowed = ", ".join(ReservationStatus.values)
        raise ValidationError(
            "Invalid status value",
            details={"status": [f"Status must be one of: {allowed}"]},
        )

    reservation = gateway.update(reservation_id, status=status)
    logger.info("Reservation %s status set to %s", reservation_id, status)

    if not reservation.email:
        logger.error(
            "Reservation %s has no email; status changed to %s without notice",
            reservation_id,
            status,
        )
        raise ValidationError(
            "Reservation email missing",
            details={"email": ["Reservation email missing"]},
            code="missing_email",
        )

    subject, template_name = STATUS_EMAILS[status]
    outcome = _dispatch(
        notifier, reservation.email, subject, template_name, reservation
    )
    return ReservationResult(reservation, outcome)
