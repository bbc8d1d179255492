"""Form Validator: deterministic validation layer for auth form submissions.

Usage:
    from authflow.validators import validation_engine, FormMode

    result = validation_engine.validate_form(form_data, FormMode.EMAIL)
    if not result.is_valid:
        # Compare result.errors with the messages rendered in the UI
"""

from authflow.validators.engine import ValidationEngine, validation_engine
from authflow.validators.models import (
    SIGNIN_MESSAGES,
    SIGNUP_MESSAGES,
    FormData,
    FormMessages,
    FormMode,
    PasswordPolicy,
    PhonePolicy,
    ValidationResult,
)
from authflow.validators.rules import is_valid_email, is_valid_phone, strip_country_code

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "FormData",
    "FormMessages",
    "FormMode",
    "PasswordPolicy",
    "PhonePolicy",
    "ValidationResult",
    "SIGNUP_MESSAGES",
    "SIGNIN_MESSAGES",
    "is_valid_email",
    "is_valid_phone",
    "strip_country_code",
]
