"""
Pydantic schemas for the admin account endpoints.
"""

from pydantic import ConfigDict, Field, ValidationInfo, field_validator

from apps.web.core.validation import APISchema, EmailAddress, NonEmptyStr

MIN_PASSWORD_LENGTH = 8


class SignInRequest(APISchema):
    """Body for POST /api/auth/sign-in."""

    email: NonEmptyStr
    password: str = Field(..., min_length=1)


class SignUpRequest(APISchema):
    """Body for POST /api/auth/sign-up."""

    email: EmailAddress
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        # password is absent from info.data when it failed its own checks
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError("Passwords do not match")
        return value


class AdminSchema(APISchema):
    """The signed-in admin as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
