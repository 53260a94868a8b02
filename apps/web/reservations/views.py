"""
Reservation API views.

Guests create reservations from the public site; everything else is for
signed-in admins.
"""

from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.web.core.decorators import admin_required, api_view
from apps.web.core.exceptions import NotFoundError
from apps.web.core.responses import json_response
from apps.web.core.validation import parse_json_body, validate_payload
from apps.web.reservations import services
from apps.web.reservations.serializers import (
    ReservationListQuery,
    ReservationPageSchema,
    ReservationRequest,
    ReservationSchema,
    ReservationStatusRequest,
)


def _result_payload(result: services.ReservationResult) -> dict[str, Any]:
    """Reservation JSON plus a warning when its email could not be sent."""
    schema = ReservationSchema.model_validate(result.reservation)
    data = schema.model_dump(mode="json", by_alias=True)
    if result.notification.error:
        data["notificationWarning"] = result.notification.error
    return data


@csrf_exempt
@require_http_methods(["GET", "POST"])
def reservation_collection(request: HttpRequest) -> JsonResponse:
    """GET|POST /api/reservations"""
    if request.method == "POST":
        return create_reservation(request)
    return list_reservations(request)


@csrf_exempt
@require_http_methods(["GET", "PUT", "PATCH", "DELETE"])
def reservation_detail(request: HttpRequest, reservation_id: int) -> JsonResponse:
    """GET|PUT|PATCH|DELETE /api/reservations/{reservation_id}"""
    match request.method:
        case "PUT":
            return update_reservation(request, reservation_id)
        case "PATCH":
            return change_status(request, reservation_id)
        case "DELETE":
            return delete_reservation(request, reservation_id)
        case _:
            return get_reservation(request, reservation_id)


@api_view("RESERVATION_POST")
def create_reservation(request: HttpRequest) -> JsonResponse:
    """
    POST /api/reservations

    Request body: ReservationRequest
    Response: ReservationSchema (201) or 400 with field errors.
    Includes notificationWarning if the restaurant could not be emailed.
    """
    data = validate_payload(ReservationRequest, parse_json_body(request)).unwrap()
    result = services.create_reservation(data)
    return json_response(_result_payload(result), status=201)


@api_view("RESERVATION_LIST")
@admin_required
def list_reservations(request: HttpRequest) -> JsonResponse:
    """
    GET /api/reservations?page=&pageSize=&startDate=&endDate=

    Newest first. Date bounds are inclusive. 404 when the page is empty.
    """
    params = {key: value for key, value in request.GET.items() if value != ""}
    query = validate_payload(ReservationListQuery, params).unwrap()

    rows, total = services.list_reservations(query)
    if not rows:
        raise NotFoundError("No reservations found")

    response = ReservationPageSchema(
        data=[ReservationSchema.model_validate(r) for r in rows],
        total=total,
        page=query.page,
        page_size=query.page_size,
    )
    return json_response(response)


@api_view("RESERVATION_GET")
@admin_required
def get_reservation(_request: HttpRequest, reservation_id: int) -> JsonResponse:
    """GET /api/reservations/{reservation_id}"""
    reservation = services.get_reservation(reservation_id)
    return json_response(ReservationSchema.model_validate(reservation))


@api_view("RESERVATION_PUT")
@admin_required
def update_reservation(request: HttpRequest, reservation_id: int) -> JsonResponse:
    """
    PUT /api/reservations/{reservation_id}

    Full replacement of the booking details, validated like a create.
    """
    data = validate_payload(ReservationRequest, parse_json_body(request)).unwrap()
    reservation = services.update_reservation(reservation_id, data)
    return json_response(ReservationSchema.model_validate(reservation))


@api_view("RESERVATION_DELETE")
@admin_required
def delete_reservation(_request: HttpRequest, reservation_id: int) -> JsonResponse:
    """DELETE /api/reservations/{reservation_id}"""
    services.delete_reservation(reservation_id)
    return json_response({"message": "Reservation deleted successfully"})


@api_view("RESERVATION_PATCH")
@admin_required
def change_status(request: HttpRequest, reservation_id: int) -> JsonResponse:
    """
    PATCH /api/reservations/{reservation_id}

    Request body: {"status": "Pending" | "Confirmed" | "Cancelled"}
    Response: ReservationSchema (200), plus notificationWarning if the
    guest could not be emailed.
    """
    data = validate_payload(ReservationStatusRequest, parse_json_body(request)).unwrap()
    result = services.change_reservation_status(reservation_id, data.status)
    return json_response(_result_payload(result))
