"""API error taxonomy.

Every handler raises one of these; ``apps.web.core.responses.error_response``
is the only place they are turned into HTTP responses.
"""

FieldErrors = dict[str, list[str]]


class APIError(Exception):
    """Base exception for errors that map to a structured JSON response."""

    status_code = 500
    code = "internal_error"

    def __init__(
        self,
        message: str,
        details: FieldErrors | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        if code is not None:
            self.code = code
        super().__init__(message)


class ValidationError(APIError):
    """Malformed or missing input."""

    status_code = 400
    code = "validation_error"


class ConflictError(APIError):
    """Duplicate unique field, or a delete blocked by dependent rows."""

    status_code = 400
    code = "conflict"


class NotFoundError(APIError):
    """Referenced entity does not exist."""

    status_code = 404
    code = "not_found"


class AuthError(APIError):
    """Missing or invalid admin session, or rejected credentials."""

    status_code = 401
    code = "authentication_required"


class PermissionDeniedError(APIError):
    """Authenticated (or anonymous) caller may not use this operation."""

    status_code = 403
    code = "forbidden"


class DependencyFailure(APIError):
    """Store or mail collaborator failed."""

    status_code = 500
    code = "internal_error"
