"""
Admin account API views.

Sign-in stores the admin in a signed session cookie; every protected
endpoint reads it back through admin_required.
"""

from django.conf import settings
from django.contrib.auth import logout
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from apps.web.accounts import services
from apps.web.accounts.serializers import AdminSchema, SignInRequest, SignUpRequest
from apps.web.core.decorators import admin_required, api_view
from apps.web.core.exceptions import PermissionDeniedError
from apps.web.core.responses import json_response
from apps.web.core.validation import parse_json_body, validate_payload


@csrf_exempt
@require_POST
@api_view("SIGN_IN")
def sign_in(request: HttpRequest) -> JsonResponse:
    """
    POST /api/auth/sign-in

    Request body: {"email": "...", "password": "..."}
    Response: AdminSchema (200) with a session cookie, or 401 with the
    offending field in details.
    """
    data = validate_payload(SignInRequest, parse_json_body(request)).unwrap()
    admin = services.sign_in(request, data)
    return json_response(AdminSchema.model_validate(admin))


@csrf_exempt
@require_POST
@api_view("SIGN_UP")
def sign_up(request: HttpRequest) -> JsonResponse:
    """
    POST /api/auth/sign-up

    Request body: {"email": "...", "password": "...", "confirmPassword": "..."}
    Response: AdminSchema (201). 403 unless ADMIN_SIGNUP_ENABLED is set.
    """
    if not settings.ADMIN_SIGNUP_ENABLED:
        raise PermissionDeniedError("Admin sign-up is disabled")

    data = validate_payload(SignUpRequest, parse_json_body(request)).unwrap()
    admin = services.sign_up(data)
    return json_response(AdminSchema.model_validate(admin), status=201)


@csrf_exempt
@require_POST
@api_view("SIGN_OUT")
def sign_out(request: HttpRequest) -> JsonResponse:
    """POST /api/auth/sign-out"""
    logout(request)
    return json_response({"message": "Signed out"})


@require_GET
@api_view("SESSION")
@admin_required
def session(request: HttpRequest) -> JsonResponse:
    """GET /api/auth/session - the admin behind the current cookie."""
    return json_response(AdminSchema.model_validate(request.user))
