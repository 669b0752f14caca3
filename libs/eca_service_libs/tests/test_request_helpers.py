"""Tests for request validation translation and correlation id handling."""

from __future__ import annotations

import uuid

import pytest
from eca_service_libs.error_handling import (
    EcaError,
    field_errors,
    raise_request_validation_error,
)
from eca_service_libs.request_context import correlation_id_from_request
from pydantic import BaseModel, ValidationError, field_validator
from quart import Quart, jsonify


class _Course(BaseModel):
    code: str
    weeks: int

    @field_validator("code")
    @classmethod
    def _letters(cls, value: str) -> str:
        if not value.isalpha():
            raise ValueError("Code must contain only letters")
        return value


def _validation_error(payload: dict[str, object]) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        _Course.model_validate(payload)
    return exc_info.value


class TestFieldErrors:
    def test_own_validator_messages_are_verbatim(self) -> None:
        errors = field_errors(_validation_error({"code": "A1", "weeks": 3}))

        assert errors == [{"field": "code", "message": "Code must contain only letters"}]

    def test_pydantic_messages_are_kept(self) -> None:
        errors = field_errors(_validation_error({"code": "AB"}))

        assert errors == [{"field": "weeks", "message": "Field required"}]

    def test_raise_uses_first_error_and_lists_all(self) -> None:
        correlation_id = uuid.uuid4()

        with pytest.raises(EcaError) as exc_info:
            raise_request_validation_error(
                service="svc",
                operation="create",
                error=_validation_error({"code": "A1"}),
                correlation_id=correlation_id,
            )

        detail = exc_info.value.error_detail
        assert detail.message == "Code must contain only letters"
        assert detail.details["field"] == "code"
        assert len(detail.details["errors"]) == 2
        assert detail.correlation_id == correlation_id


class TestCorrelationIdFromRequest:
    @pytest.fixture
    def app(self) -> Quart:
        app = Quart(__name__)

        @app.route("/cid")
        async def cid() -> object:
            return jsonify({"correlation_id": str(correlation_id_from_request())})

        return app

    async def test_reuses_valid_header(self, app: Quart) -> None:
        expected = str(uuid.uuid4())

        async with app.test_client() as client:
            response = await client.get("/cid", headers={"X-Correlation-ID": expected})

            assert (await response.get_json())["correlation_id"] == expected

    async def test_generates_id_for_invalid_header(self, app: Quart) -> None:
        async with app.test_client() as client:
            response = await client.get("/cid", headers={"X-Correlation-ID": "not-a-uuid"})

            value = (await response.get_json())["correlation_id"]
            assert value != "not-a-uuid"
            assert str(uuid.UUID(value)) == value
