"""Validation models: form payloads, policies, message sets and results.

All validation is deterministic: same input → same output. Only the fixture
generators read the clock and the random source.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from authflow.config import Settings, get_settings


class FormMode(str, Enum):
    """Which identity field keys a form submission."""

    EMAIL = "email"
    PHONE = "phone"


class FormData(BaseModel):
    """Field values read from, or about to be typed into, an auth form.

    Values of the wrong type are treated as empty rather than rejected,
    so the engine can report them as ordinary validation errors.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    subscribe: Optional[bool] = None

    @field_validator("email", "phone", "password", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("subscribe", mode="before")
    @classmethod
    def _flag_or_none(cls, value: Any) -> Optional[bool]:
        return value if isinstance(value, bool) else None

    @classmethod
    def from_mapping(cls, data: Any) -> "FormData":
        """Build from a plain dict; anything that is not a mapping is an empty form."""
        if isinstance(data, FormData):
            return data
        if not isinstance(data, Mapping):
            return cls()
        return cls.model_validate(dict(data))


class PasswordPolicy(BaseModel):
    """Process-wide password acceptability rules."""

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=9, ge=1)
    require_letter: bool = True
    require_digit: bool = True
    required_special_chars: tuple[str, ...] = ("#", "?", "!", "@", "$", "%", "^", "&", "*", "-")

    @field_validator("required_special_chars", mode="before")
    @classmethod
    def _split_chars(cls, value: Any) -> Any:
        # Settings carry the set as one string, e.g. "#?!@$%^&*-"
        if isinstance(value, str):
            return tuple(dict.fromkeys(value))
        if isinstance(value, (list, tuple, set, frozenset)):
            for char in value:
                if not isinstance(char, str) or len(char) != 1:
                    raise ValueError(f"Special characters must be single characters, got {char!r}")
        return value

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PasswordPolicy":
        settings = settings or get_settings()
        return cls(
            min_length=settings.PASSWORD_MIN_LENGTH,
            require_letter=settings.PASSWORD_REQUIRE_LETTER,
            require_digit=settings.PASSWORD_REQUIRE_DIGIT,
            required_special_chars=settings.PASSWORD_SPECIAL_CHARS,
        )


class PhonePolicy(BaseModel):
    """Accepted phone shape: a local subscriber number of fixed length.

    The country code is never part of a valid phone value; callers holding an
    international number strip it first (see rules.strip_country_code).
    """

    model_config = ConfigDict(frozen=True)

    digits: int = Field(default=9, ge=1)
    country_code: str = "+966"

    @field_validator("country_code", mode="before")
    @classmethod
    def _normalize_code(cls, value: Any) -> Any:
        # "966", "00966" and "+966" all mean "+966"
        if not isinstance(value, str):
            return value
        code = value.strip()
        if code.startswith("+"):
            code = code[1:]
        elif code.startswith("00"):
            code = code[2:]
        if not code.isdigit() or not code.isascii():
            raise ValueError(f"Country code must be digits with an optional leading +, got {value!r}")
        return f"+{code}"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PhonePolicy":
        settings = settings or get_settings()
        return cls(digits=settings.PHONE_DIGITS, country_code=settings.PHONE_COUNTRY_CODE)


class FormMessages(BaseModel):
    """Literal error texts a form flow renders. Compared verbatim against the UI."""

    model_config = ConfigDict(frozen=True)

    email_required: str
    email_invalid: str
    phone_required: str
    phone_invalid: str
    password_required: str


SIGNUP_MESSAGES = FormMessages(
    email_required="Email is required",
    email_invalid="Please enter a valid email address",
    phone_required="Phone number is required",
    phone_invalid="Please enter a valid phone number",
    password_required="Password is required",
)

SIGNIN_MESSAGES = FormMessages(
    email_required="Please enter your email address",
    email_invalid="Please enter a valid email address",
    phone_required="Phone number is required",
    phone_invalid="Please enter a valid mobile number",
    password_required="Please enter your password",
)


class ValidationResult(BaseModel):
    """Outcome of one validation call. Errors keep the order they were found in."""

    model_config = ConfigDict(frozen=True)

    errors: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def build(cls, errors: list[str]) -> "ValidationResult":
        return cls(errors=list(errors))
