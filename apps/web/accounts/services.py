"""
Admin account services - credential checks and registration.

Sign-in is unlimited: a wrong password can be retried immediately and
nothing is locked out.
"""

import logging

from django.contrib.auth import login, password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.http import HttpRequest

from apps.web.accounts.serializers import SignInRequest, SignUpRequest
from apps.web.core.exceptions import AuthError, ConflictError, ValidationError
from apps.web.core.gateway import ModelGateway
from apps.web.core.models import Admin

logger = logging.getLogger(__name__)

admin_gateway: ModelGateway[Admin] = ModelGateway(Admin, label="Admin")

EMAIL_IN_USE = "Email is already in use"


def _normalize(email: str) -> str:
    return Admin.objects.normalize_email(email.strip())


def authenticate_admin(
    data: SignInRequest, gateway: ModelGateway[Admin] | None = None
) -> Admin:
    """
    Check credentials without touching the session.

    Raises:
        AuthError: Unknown email, wrong password, or a deactivated account
    """
    gateway = gateway or admin_gateway
    admin = gateway.find_unique(email=_normalize(data.email))

    if admin is None:
        raise AuthError(
            "Invalid credentials",
            details={"email": ["No user found with this email"]},
            code="invalid_credentials",
        )

    if not admin.check_password(data.password):
        logger.info("Failed sign-in for admin %s", admin.pk)
        raise AuthError(
            "Invalid credentials",
            details={"password": ["Incorrect password"]},
            code="invalid_credentials",
        )

    if not admin.is_active:
        raise AuthError(
            "Invalid credentials",
            details={"email": ["This account is disabled"]},
            code="invalid_credentials",
        )

    return admin


def sign_in(request: HttpRequest, data: SignInRequest) -> Admin:
    """Verify credentials and attach the admin to the request's session."""
    admin = authenticate_admin(data)
    login(request, admin, backend="django.contrib.auth.backends.ModelBackend")
    logger.info("Admin %s signed in", admin.pk)
    return admin


def sign_up(data: SignUpRequest) -> Admin:
    """
    Register a new admin.

    Raises:
        ConflictError: An admin with this email already exists
        ValidationError: The password fails AUTH_PASSWORD_VALIDATORS
    """
    email = _normalize(data.email)
    if admin_gateway.find_unique(email=email) is not None:
        raise ConflictError(EMAIL_IN_USE, details={"email": [EMAIL_IN_USE]})

    try:
        password_validation.validate_password(data.password, Admin(email=email))
    except DjangoValidationError as e:
        raise ValidationError(
            "Validation failed", details={"password": list(e.messages)}
        ) from e

    try:
        with transaction.atomic():
            admin = Admin.objects.create_user(email, data.password)
    except IntegrityError as e:
        raise ConflictError(EMAIL_IN_USE, details={"email": [EMAIL_IN_USE]}) from e

    logger.info("Admin %s registered", admin.pk)
    return admin
