"""Tests for the ValidationEngine form flows."""

import pytest

from authflow.fixtures import EDGE_CASES, EXISTING_USER, INVALID, VALID
from authflow.validators import (
    FormData,
    FormMode,
    PasswordPolicy,
    ValidationEngine,
    ValidationResult,
    validation_engine,
)
from authflow.validators.base import BaseValidator


class TestValidatePassword:

    def test_valid_password(self, engine):
        result = engine.validate_password("Password123!")
        assert result.is_valid is True
        assert result.errors == []

    def test_short_digits_only_reports_length_and_letters(self, engine):
        result = engine.validate_password("12345678")
        assert result.is_valid is False
        assert "Password must be at least 9 characters long" in result.errors
        assert "Password must include letters" in result.errors

    @pytest.mark.parametrize("password", VALID["passwords"])
    def test_reference_valid_passwords(self, engine, password):
        assert engine.validate_password(password).is_valid

    @pytest.mark.parametrize("password", INVALID["passwords"])
    def test_reference_invalid_passwords(self, engine, password):
        assert not engine.validate_password(password).is_valid

    @pytest.mark.parametrize("password,accepted", EDGE_CASES["passwords"].items())
    def test_edge_case_passwords(self, engine, password, accepted):
        assert engine.validate_password(password).is_valid is accepted

    def test_non_string_is_treated_as_empty(self, engine):
        assert engine.validate_password(None) == engine.validate_password("")

    def test_policy_from_constructor(self):
        engine = ValidationEngine(password_policy=PasswordPolicy(min_length=12))
        assert engine.validate_password("Password12!").errors == [
            "Password must be at least 12 characters long"
        ]


class TestSignupEmailMode:

    def test_valid_form(self, engine):
        result = engine.validate_form({"email": "a@b.co", "password": "Abc123456!"}, FormMode.EMAIL)
        assert result.is_valid is True

    def test_empty_email_only_reports_required(self, engine):
        result = engine.validate_form({"email": "", "password": "x"}, FormMode.EMAIL)
        assert result.is_valid is False
        assert "Email is required" in result.errors
        assert "Please enter a valid email address" not in result.errors

    def test_malformed_email(self, engine):
        result = engine.validate_form({"email": "user@domain", "password": "Password123!"})
        assert result.errors == ["Please enter a valid email address"]

    def test_whitespace_email_is_missing(self, engine):
        result = engine.validate_form({"email": "   ", "password": "Password123!"})
        assert result.errors == ["Email is required"]

    def test_missing_password_skips_policy(self, engine):
        result = engine.validate_form({"email": "user@example.com"})
        assert result.errors == ["Password is required"]

    def test_identity_errors_come_before_password_errors(self, engine):
        result = engine.validate_form({"email": "bad", "password": "Password123"})
        assert result.errors == [
            "Please enter a valid email address",
            "Password must include at least one special character (# ? ! @ $ % ^ & * -)",
        ]

    def test_everything_missing(self, engine):
        result = engine.validate_form({})
        assert result.errors == ["Email is required", "Password is required"]

    def test_phone_is_ignored_in_email_mode(self, engine):
        result = engine.validate_form({"email": "user@example.com", "phone": "bad", "password": "Password123!"})
        assert result.is_valid

    @pytest.mark.parametrize("email", VALID["emails"] + list(EDGE_CASES["emails"]))
    def test_reference_emails_accepted(self, engine, email):
        assert engine.validate_form({"email": email, "password": "Password123!"}).is_valid

    @pytest.mark.parametrize("email", INVALID["emails"])
    def test_reference_emails_rejected(self, engine, email):
        assert not engine.validate_form({"email": email, "password": "Password123!"}).is_valid


class TestSignupPhoneMode:

    def test_valid_form(self, engine):
        form = FormData(phone="501234567", password="Password123!")
        assert engine.validate_form(form, FormMode.PHONE).is_valid

    def test_missing_phone(self, engine):
        result = engine.validate_form({"password": "Password123!"}, FormMode.PHONE)
        assert result.errors == ["Phone number is required"]

    def test_international_number_rejected(self, engine):
        result = engine.validate_form({"phone": "+966501234567", "password": "Password123!"}, FormMode.PHONE)
        assert result.errors == ["Please enter a valid phone number"]

    @pytest.mark.parametrize("phone", [p for p in INVALID["phones"] if p])
    def test_reference_phones_rejected(self, engine, phone):
        result = engine.validate_form({"phone": phone, "password": "Password123!"}, FormMode.PHONE)
        assert result.errors == ["Please enter a valid phone number"]

    def test_mode_given_as_string(self, engine):
        assert engine.validate_form({"phone": "501234567", "password": "Password123!"}, "phone").is_valid


class TestSigninForm:

    def test_valid_email_signin(self, engine):
        result = engine.validate_signin_form(
            {"email": EXISTING_USER["email"], "password": EXISTING_USER["password"]}
        )
        assert result.is_valid

    def test_password_policy_not_enforced(self, engine):
        result = engine.validate_signin_form({"email": "user@example.com", "password": "x"})
        assert result.is_valid

    def test_signin_messages(self, engine):
        result = engine.validate_signin_form({"email": "", "password": ""})
        assert result.errors == ["Please enter your email address", "Please enter your password"]

    def test_invalid_mobile_number(self, engine):
        result = engine.validate_signin_form({"phone": "5012", "password": "secret"}, FormMode.PHONE)
        assert result.errors == ["Please enter a valid mobile number"]

    def test_missing_phone(self, engine):
        result = engine.validate_signin_form({"password": "secret"}, FormMode.PHONE)
        assert result.errors == ["Phone number is required"]


class TestMalformedInput:

    def test_wrong_types_are_treated_as_empty(self, engine):
        result = engine.validate_form({"email": 123, "password": ["Password123!"], "subscribe": "yes"})
        assert result.errors == ["Email is required", "Password is required"]

    def test_non_mapping_is_an_empty_form(self, engine):
        assert engine.validate_form(None).errors == ["Email is required", "Password is required"]

    def test_unknown_keys_ignored(self, engine):
        result = engine.validate_form({"email": "a@b.co", "password": "Abc123456!", "captcha": "x"})
        assert result.is_valid


class TestResultInvariants:

    @pytest.mark.parametrize("form", [
        {},
        {"email": "a@b.co", "password": "Abc123456!"},
        {"email": "bad", "password": "short"},
    ])
    def test_is_valid_matches_errors(self, engine, form):
        result = engine.validate_form(form)
        assert result.is_valid == (len(result.errors) == 0)

    def test_repeated_calls_are_identical(self, engine):
        form = {"email": "bad", "password": "12345678"}
        assert engine.validate_form(form) == engine.validate_form(form)
        assert engine.validate_password("12345678") == engine.validate_password("12345678")

    def test_result_serialises_both_fields(self):
        result = ValidationResult.build(["Email is required"])
        assert result.model_dump() == {"errors": ["Email is required"], "is_valid": False}

    def test_signup_alias(self, engine):
        form = {"email": "", "password": ""}
        assert engine.validate_signup_form(form) == engine.validate_form(form)


class RejectDisposableDomains(BaseValidator):

    @property
    def name(self) -> str:
        return "RejectDisposableDomains"

    def validate(self, form, mode):
        if form.email and form.email.endswith("@mailinator.com"):
            return ["Disposable email addresses are not allowed"]
        return []


class TestValidatorChain:

    def test_add_and_remove_validator(self, engine):
        form = {"email": "user@mailinator.com", "password": "Password123!"}
        engine.add_validator(RejectDisposableDomains())
        assert engine.validate_form(form).errors == ["Disposable email addresses are not allowed"]
        assert engine.validate_signin_form(form).is_valid

        engine.remove_validator("RejectDisposableDomains")
        assert engine.validate_form(form).is_valid

    def test_unknown_flow(self, engine):
        with pytest.raises(ValueError):
            engine.add_validator(RejectDisposableDomains(), flow="logout")

    def test_singleton_uses_default_policy(self):
        assert validation_engine.password_policy.min_length == 9
        assert validation_engine.phone_policy.digits == 9


class ExplodingValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "ExplodingValidator"

    def validate(self, form, mode):
        raise RuntimeError("boom")


class TestCrashingValidator:

    def test_crash_becomes_an_error_entry(self, engine):
        engine.add_validator(ExplodingValidator())
        result = engine.validate_form({})
        assert result.errors == [
            "Email is required",
            "Password is required",
            "Validator 'ExplodingValidator' crashed: boom",
        ]
        assert result.is_valid is False

    def test_later_validators_still_run(self, engine):
        engine.signup_validators.insert(0, ExplodingValidator())
        result = engine.validate_form({"email": "a@b.co", "password": ""})
        assert result.errors == [
            "Validator 'ExplodingValidator' crashed: boom",
            "Password is required",
        ]


class TestModeNames:

    @pytest.mark.parametrize("mode", ["EMAIL", "Email", "email", FormMode.EMAIL])
    def test_email_mode_spellings(self, engine, mode):
        assert engine.validate_form({"email": "a@b.co", "password": "Abc123456!"}, mode).is_valid

    @pytest.mark.parametrize("mode", ["PHONE", "phone", FormMode.PHONE])
    def test_phone_mode_spellings(self, engine, mode):
        result = engine.validate_signin_form({"password": "secret"}, mode)
        assert result.errors == ["Phone number is required"]
