"""Unit tests for application layer errors."""

from dataclasses import FrozenInstanceError

import pytest

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import ValidationError


@pytest.mark.unit
class TestApplicationErrorCode:
    def test_codes(self):
        assert {code.name for code in ApplicationErrorCode} == {
            "COMMAND_VALIDATION_FAILED",
            "QUERY_VALIDATION_FAILED",
            "FORBIDDEN",
            "NOT_FOUND",
        }

    def test_values_are_snake_case(self):
        for code in ApplicationErrorCode:
            assert code.value == code.name.lower()


@pytest.mark.unit
class TestApplicationError:
    def test_wraps_domain_error(self):
        domain_error = ValidationError(
            code=ErrorCode.INVALID_SCHEDULE,
            message="Invalid timezone",
            field="timezone",
        )

        error = ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message="Invalid timezone",
            domain_error=domain_error,
        )

        assert error.domain_error.field == "timezone"
        assert error.details is None

    def test_is_immutable(self):
        error = ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message="gone")

        with pytest.raises(FrozenInstanceError):
            error.message = "changed"  # type: ignore[misc]
