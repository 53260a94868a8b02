"""
Request validation - runs pydantic schemas and collects field-level errors.

validate_payload() never raises: callers inspect the returned result and
decide how to report failures (usually via ValidationResult.unwrap()).
"""

import json
from dataclasses import dataclass, field
from typing import Annotated, Any, Generic, TypeVar

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator, validate_email
from django.http import HttpRequest

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from apps.web.core.exceptions import FieldErrors, ValidationError

_S = TypeVar("_S", bound=BaseModel)

NON_FIELD_ERRORS = "__all__"

# Required string; surrounding whitespace is stripped before the length check
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

_url_validator = URLValidator(schemes=["http", "https"])


class APISchema(BaseModel):
    """
    Base for request and response schemas.

    Fields are snake_case in Python and camelCase on the wire. Incoming
    payloads may use either spelling; responses are dumped by alias.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True)
class ValidationResult(Generic[_S]):
    """Outcome of validating one payload: a typed value or field errors."""

    value: _S | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> _S:
        """Return the value, or raise ValidationError with the field errors."""
        if not self.ok or self.value is None:
            raise ValidationError("Validation failed", details=self.errors)
        return self.value


def validate_payload(schema: type[_S], data: Any) -> ValidationResult[_S]:
    """
    Validate an untyped record against a schema.

    Args:
        schema: Pydantic model class describing the payload
        data: Decoded JSON (or query parameters) to validate

    Returns:
        ValidationResult with either the parsed value or field -> messages
    """
    if not isinstance(data, dict):
        return ValidationResult(errors={NON_FIELD_ERRORS: ["Expected a JSON object"]})

    try:
        value = schema.model_validate(data)
    except PydanticValidationError as e:
        return ValidationResult(errors=_collect_errors(e))

    return ValidationResult(value=value)


def _collect_errors(exc: PydanticValidationError) -> FieldErrors:
    """Group pydantic errors by dotted field path."""
    errors: FieldErrors = {}
    for err in exc.errors():
        name = ".".join(str(loc) for loc in err["loc"]) or NON_FIELD_ERRORS
        message = str(err["msg"]).removeprefix("Value error, ")
        errors.setdefault(name, []).append(message)
    return errors


def parse_json_body(request: HttpRequest) -> Any:
    """Decode the request body, treating an empty body as an empty object."""
    if not request.body:
        return {}
    try:
        return json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(
            "Invalid JSON in request body", code="invalid_json"
        ) from e


def check_url(value: str) -> str:
    """Pydantic after-validator: value must be an absolute http(s) URL."""
    try:
        _url_validator(value)
    except DjangoValidationError as e:
        raise ValueError("Enter a valid URL") from e
    return value


def check_email(value: str) -> str:
    """Pydantic after-validator: value must be a well-formed email address."""
    try:
        validate_email(value)
    except DjangoValidationError as e:
        raise ValueError("Enter a valid email address") from e
    return value


# Email address; trimmed, then checked with Django's validator
EmailAddress = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=254),
    AfterValidator(check_email),
]
