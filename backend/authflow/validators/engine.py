"""Validation Engine: runs the field validators of a form flow and builds the result.

This is the main entry point for form validation. Page objects call it with
the values they read from (or are about to type into) the form and compare
the returned messages against the text the UI renders.

Usage:
    engine = ValidationEngine()
    result = engine.validate_form({"email": email, "password": password}, FormMode.EMAIL)
    assert result.is_valid, result.errors
"""

import time
from typing import Any, Optional

import structlog

from authflow.validators.base import BaseValidator
from authflow.validators.identity_validator import IdentityValidator
from authflow.validators.models import (
    SIGNIN_MESSAGES,
    SIGNUP_MESSAGES,
    FormData,
    FormMode,
    PasswordPolicy,
    PhonePolicy,
    ValidationResult,
)
from authflow.validators.password_validator import PasswordValidator
from authflow.validators import rules

logger = structlog.get_logger()


class ValidationEngine:
    """Validates sign-up and sign-in submissions against the field rules.

    Design principles:
        - Deterministic: same input → same output
        - Never raises for malformed input; bad values become error messages
        - Extensible: add validators to a flow without modifying the engine
    """

    def __init__(
        self,
        password_policy: Optional[PasswordPolicy] = None,
        phone_policy: Optional[PhonePolicy] = None,
    ):
        """Initialize with policies from settings, or explicit ones.

        Args:
            password_policy: Optional password rules. If None, loaded from settings.
            phone_policy: Optional phone rules. If None, loaded from settings.
        """
        self.password_policy = password_policy or PasswordPolicy.from_settings()
        self.phone_policy = phone_policy or PhonePolicy.from_settings()
        self.signup_validators = self._signup_validators()
        self.signin_validators = self._signin_validators()

    def _signup_validators(self) -> list[BaseValidator]:
        """Sign-up chain in execution order."""
        return [
            IdentityValidator(SIGNUP_MESSAGES, self.phone_policy),
            PasswordValidator(SIGNUP_MESSAGES.password_required, self.password_policy),
        ]

    def _signin_validators(self) -> list[BaseValidator]:
        """Sign-in chain; the password policy is not enforced at sign-in."""
        return [
            IdentityValidator(SIGNIN_MESSAGES, self.phone_policy),
            PasswordValidator(SIGNIN_MESSAGES.password_required),
        ]

    # ── Field checks ──

    def is_valid_email(self, email: Any) -> bool:
        return rules.is_valid_email(email)

    def is_valid_phone(self, phone: Any) -> bool:
        """Local subscriber number only; strip any country code first."""
        return rules.is_valid_phone(phone, self.phone_policy.digits)

    def strip_country_code(self, phone: Any) -> str:
        """Local part of a number written with the policy's country code."""
        return rules.strip_country_code(phone, self.phone_policy.country_code)

    def validate_password(self, password: Any) -> ValidationResult:
        """Check the password policy, reporting every failing rule."""
        return ValidationResult.build(rules.password_policy_errors(password, self.password_policy))

    # ── Form checks ──

    def validate_form(self, form: Any, mode: FormMode = FormMode.EMAIL) -> ValidationResult:
        """Validate a sign-up submission.

        Args:
            form: FormData or a mapping with email/phone/password/subscribe
            mode: Which identity field keys the submission

        Returns:
            ValidationResult with identity errors first, then password errors
        """
        return self._run("signup", self.signup_validators, form, mode)

    validate_signup_form = validate_form

    def validate_signin_form(self, form: Any, mode: FormMode = FormMode.EMAIL) -> ValidationResult:
        """Validate a sign-in submission: presence and identity format only."""
        return self._run("signin", self.signin_validators, form, mode)

    def _run(
        self,
        flow: str,
        validators: list[BaseValidator],
        form: Any,
        mode: FormMode,
    ) -> ValidationResult:
        start_time = time.perf_counter()
        form = FormData.from_mapping(form)
        mode = FormMode(mode.lower()) if isinstance(mode, str) else FormMode(mode)

        errors: list[str] = []
        validator_timings: dict[str, float] = {}

        for validator in validators:
            v_start = time.perf_counter()
            try:
                errors.extend(validator.validate(form, mode))
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                )
                # A crash becomes an error entry; later validators still run
                errors.append(f"Validator '{validator.name}' crashed: {e}")
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 3)

        result = ValidationResult.build(errors)

        logger.debug(
            "form_validated",
            flow=flow,
            mode=mode.value,
            is_valid=result.is_valid,
            error_count=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
            validator_timings=validator_timings,
        )

        return result

    def add_validator(self, validator: BaseValidator, flow: str = "signup") -> None:
        """Append a custom validator to the sign-up or sign-in chain."""
        self._chain(flow).append(validator)

    def remove_validator(self, validator_name: str, flow: str = "signup") -> None:
        """Remove a validator by name from a chain."""
        chain = self._chain(flow)
        chain[:] = [v for v in chain if v.name != validator_name]

    def _chain(self, flow: str) -> list[BaseValidator]:
        if flow == "signup":
            return self.signup_validators
        if flow == "signin":
            return self.signin_validators
        raise ValueError(f"Unknown form flow: {flow!r}")


# Module-level singleton
validation_engine = ValidationEngine()
