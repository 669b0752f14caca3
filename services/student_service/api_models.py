from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from services.student_service import validation

# camelCase on the wire, snake_case in Python; both accepted on input
_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# ====================================================================
# Request Models
# ====================================================================


class CreateStudentRequest(BaseModel):
    """Body of POST /students. Missing or null fields fail as blank."""

    model_config = _WIRE_CONFIG

    registration_number: str | None = Field(default=None, validate_default=True)
    full_name: str | None = Field(default=None, validate_default=True)
    address: str | None = Field(default=None, validate_default=True)
    contact: str | None = Field(default=None, validate_default=True)
    email: str | None = Field(default=None, validate_default=True)

    @field_validator("registration_number")
    @classmethod
    def _check_registration_number(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Registration number can't be empty")
        if not validation.is_registration_number(value):
            raise ValueError("Registration number must follow the format SXXX")
        return value

    @field_validator("full_name")
    @classmethod
    def _check_full_name(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Full name can't be empty")
        if not validation.is_letters_and_whitespace(value):
            raise ValueError("Full name should only contain letters and spaces")
        return value

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Address can't be empty")
        if not validation.has_min_length(value):
            raise ValueError("Address must contain at least 3 letters")
        return value

    @field_validator("contact")
    @classmethod
    def _check_contact(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Contact number can't be empty")
        if not validation.is_contact_number(value):
            raise ValueError("Contact must follow the format XXX-XXXXXXX")
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Email can't be empty")
        if not validation.is_email(value):
            raise ValueError("Invalid email format")
        return value


# ====================================================================
# Response Models
# ====================================================================


class StudentResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    registration_number: str
    full_name: str
    address: str
    contact: str
    email: str
