"""
Pydantic schemas for the reservations API.
"""

from datetime import date, datetime

from pydantic import ConfigDict, Field

from apps.web.core.validation import APISchema, EmailAddress, NonEmptyStr

# =============================================================================
# Requests
# =============================================================================


class ReservationRequest(APISchema):
    """Body for POST /api/reservations and PUT /api/reservations/{id}."""

    name: NonEmptyStr = Field(..., max_length=200)
    email: EmailAddress
    phone_number: str = Field(..., min_length=10, max_length=30)
    number_of_guests: int = Field(..., ge=1)
    date: date
    time: NonEmptyStr = Field(..., max_length=20)
    message: str | None = Field(default=None, max_length=2000)


class ReservationStatusRequest(APISchema):
    """Body for PATCH /api/reservations/{id}. Membership is checked by the workflow."""

    status: str


class ReservationListQuery(APISchema):
    """Query string for GET /api/reservations."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)
    start_date: date | None = None
    end_date: date | None = None


# =============================================================================
# Responses
# =============================================================================


class ReservationSchema(APISchema):
    """A reservation as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone_number: str
    number_of_guests: int
    date: date
    time: str
    message: str
    status: str
    created_at: datetime
    updated_at: datetime


class ReservationPageSchema(APISchema):
    """Response for GET /api/reservations."""

    data: list[ReservationSchema]
    total: int
    page: int
    page_size: int
