"""Unit tests for course field predicates and the create request model."""

from __future__ import annotations

import pytest
from eca_service_libs.error_handling import field_errors
from pydantic import ValidationError

from services.course_service import validation
from services.course_service.api_models import CreateCourseRequest


class TestPredicates:
    @pytest.mark.parametrize(
        "value, expected", [("HDSE", True), ("", False), ("  ", False), (None, False)]
    )
    def test_is_not_blank(self, value: str | None, expected: bool) -> None:
        assert validation.is_not_blank(value) is expected

    @pytest.mark.parametrize(
        "value, expected", [("HDSE", True), ("hd", True), ("HD SE", False), ("HD1", False)]
    )
    def test_is_letters_only(self, value: str, expected: bool) -> None:
        assert validation.is_letters_only(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [("Software Engineering", True), ("Data-Science", False), ("Year 2", False)],
    )
    def test_is_letters_and_spaces(self, value: str, expected: bool) -> None:
        assert validation.is_letters_and_spaces(value) is expected


class TestCreateCourseRequest:
    def test_accepts_valid_course(self) -> None:
        request = CreateCourseRequest(
            id="HDSE", name="Higher Diploma in Software Engineering", duration="2 Years"
        )

        assert request.id == "HDSE"

    @pytest.mark.parametrize(
        "payload, field, message",
        [
            ({"name": "Math", "duration": "1 Year"}, "id", "Course ID cannot be empty"),
            (
                {"id": "HD5", "name": "Math", "duration": "1 Year"},
                "id",
                "Course ID must contain only letters",
            ),
            (
                {"id": "MA", "name": " ", "duration": "1 Year"},
                "name",
                "Course name cannot be empty",
            ),
            (
                {"id": "MA", "name": "Math 101", "duration": "1 Year"},
                "name",
                "Course name must contain only letters and spaces",
            ),
            (
                {"id": "MA", "name": "Math", "duration": ""},
                "duration",
                "Course duration cannot be empty",
            ),
        ],
    )
    def test_reports_field_message(
        self, payload: dict[str, str], field: str, message: str
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CreateCourseRequest.model_validate(payload)

        assert {"field": field, "message": message} in field_errors(exc_info.value)

    def test_reports_every_invalid_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CreateCourseRequest.model_validate({})

        assert [e["field"] for e in field_errors(exc_info.value)] == ["id", "name", "duration"]
