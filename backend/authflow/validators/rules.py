"""Field rules: stateless predicates shared by the validators and the generators.

The email check is a coarse shape check (local@domain.tld). It accepts some
addresses RFC 5322 would reject, e.g. ``user@domain..com``; fixtures rely on it.
"""

import re
from typing import Any, Optional

from authflow.validators.models import PasswordPolicy, PhonePolicy

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

LETTER_PATTERN = re.compile(r"[A-Za-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
DIGITS_ONLY = re.compile(r"[0-9]+")


def is_blank(value: Any) -> bool:
    """Missing, non-string, or whitespace-only."""
    return not isinstance(value, str) or value.strip() == ""


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone(phone: Any, digits: int = 9) -> bool:
    """True iff ``phone`` is exactly ``digits`` ASCII digits, with no country code."""
    if not isinstance(phone, str):
        return False
    return len(phone) == digits and DIGITS_ONLY.fullmatch(phone) is not None


def strip_country_code(phone: Any, country_code: Optional[str] = None) -> str:
    """Drop a leading country code written as ``+966`` or ``00966``.

    The code defaults to ``PHONE_COUNTRY_CODE`` and may be given with or
    without the ``+``.

    >>> strip_country_code("+966501234567")
    '501234567'
    """
    if not isinstance(phone, str):
        return ""
    if country_code is None:
        country_code = PhonePolicy.from_settings().country_code
    bare_code = PhonePolicy(country_code=country_code).country_code[1:]
    for prefix in (f"+{bare_code}", f"00{bare_code}"):
        if phone.startswith(prefix):
            return phone[len(prefix):]
    return phone


def special_chars_label(policy: PasswordPolicy) -> str:
    return " ".join(policy.required_special_chars)


def password_policy_errors(password: Any, policy: PasswordPolicy) -> list[str]:
    """Check every policy rule and report all failures, in rule order."""
    if not isinstance(password, str):
        password = ""

    errors = []

    # 1. Length
    if len(password) < policy.min_length:
        errors.append(f"Password must be at least {policy.min_length} characters long")

    # 2. Letters
    if policy.require_letter and not LETTER_PATTERN.search(password):
        errors.append("Password must include letters")

    # 3. Numbers
    if policy.require_digit and not DIGIT_PATTERN.search(password):
        errors.append("Password must include numbers")

    # 4. Special characters
    specials = policy.required_special_chars
    if specials and not any(c in specials for c in password):
        errors.append(
            f"Password must include at least one special character ({special_chars_label(policy)})"
        )

    return errors
