from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.course_service import validation

# ====================================================================
# Request Models
# ====================================================================


class CreateCourseRequest(BaseModel):
    """Body of POST /courses. Missing or null fields fail as blank."""

    id: str | None = Field(default=None, validate_default=True)
    name: str | None = Field(default=None, validate_default=True)
    duration: str | None = Field(default=None, validate_default=True)

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Course ID cannot be empty")
        if not validation.is_letters_only(value):
            raise ValueError("Course ID must contain only letters")
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Course name cannot be empty")
        if not validation.is_letters_and_spaces(value):
            raise ValueError("Course name must contain only letters and spaces")
        return value

    @field_validator("duration")
    @classmethod
    def _check_duration(cls, value: str | None) -> str | None:
        if not validation.is_not_blank(value):
            raise ValueError("Course duration cannot be empty")
        return value


# ====================================================================
# Response Models
# ====================================================================


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    duration: str
