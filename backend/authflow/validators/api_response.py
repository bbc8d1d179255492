"""API response checks for the auth endpoints the browser tests intercept.

These are status-code comparisons against literal expected values; the
interception itself belongs to the browser driver.
"""

from collections.abc import Iterable
from typing import Any, Optional

from pydantic import BaseModel

from authflow.validators.models import ValidationResult

# URL globs of the endpoints each flow calls
AUTH_ENDPOINTS: dict[str, str] = {
    "signup": "**/api/myaccount/v4/user/local/signup",
    "signin": "**/api/myaccount/v3/auth/token",
    "profile": "**/api/myaccount/v4/user/me",
    "logout": "**/api/myaccount/v3/auth/revoke",
}

SIGNUP_SUCCESS = (200, 201)
SIGNIN_SUCCESS = (200,)
CLIENT_ERROR = 400
FORBIDDEN = 403  # unknown account or wrong password
RATE_LIMITED = 429
LOGOUT_SUCCESS = 204
PROFILE_SUCCESS = 200


class ApiResponse(BaseModel):
    """Status and decoded JSON body of one intercepted response."""

    status: int
    body: Optional[Any] = None


def _format_statuses(statuses: tuple[int, ...]) -> str:
    return "/".join(str(s) for s in statuses)


def validate_status(response: ApiResponse, expected: Iterable[int], label: str) -> ValidationResult:
    """Valid iff the response status is one of ``expected``."""
    expected = tuple(expected)
    if response.status in expected:
        return ValidationResult()
    return ValidationResult.build(
        [f"Expected {label} status ({_format_statuses(expected)}), got {response.status}"]
    )


def validate_signup_response(response: ApiResponse, expect_success: bool = True) -> ValidationResult:
    if expect_success:
        return validate_status(response, SIGNUP_SUCCESS, "success")
    return validate_status(response, (CLIENT_ERROR,), "error")


def validate_signin_response(
    response: ApiResponse,
    expect_success: bool = True,
    failure_status: int = CLIENT_ERROR,
) -> ValidationResult:
    """Sign-in failures are 400 for malformed requests, 403 for rejected credentials."""
    if expect_success:
        return validate_status(response, SIGNIN_SUCCESS, "success")
    return validate_status(response, (failure_status,), "error")


def validate_rate_limited_response(response: ApiResponse) -> ValidationResult:
    return validate_status(response, (RATE_LIMITED,), "rate limit")


def validate_logout_response(response: ApiResponse) -> ValidationResult:
    return validate_status(response, (LOGOUT_SUCCESS,), "logout")


def validate_profile_response(response: ApiResponse, expected_email: str) -> ValidationResult:
    """Status 200 and, when a body was captured, the expected account email."""
    errors = list(validate_status(response, (PROFILE_SUCCESS,), "profile").errors)

    if response.body:
        actual = response.body.get("email") if isinstance(response.body, dict) else None
        if actual != expected_email:
            errors.append(f"Expected email {expected_email}, got {actual}")

    return ValidationResult.build(errors)
