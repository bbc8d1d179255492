"""Fixture generators: fresh emails, phones and passwords for each test run.

Generated values always pass the engine's own checks, so a failing form in a
test points at the application, not at the fixture.
"""

import secrets
import string
import time
from functools import lru_cache
from typing import Optional

import structlog

from authflow.config import get_settings
from authflow.validators.models import PasswordPolicy, PhonePolicy

logger = structlog.get_logger()

LETTERS = string.ascii_letters
DIGITS = string.digits
ALPHANUMERIC = LETTERS + DIGITS

# Width of the random suffix appended after the timestamp
EMAIL_RANDOM_DIGITS = 8

_rng = secrets.SystemRandom()


@lru_cache
def _password_policy() -> PasswordPolicy:
    return PasswordPolicy.from_settings()


@lru_cache
def _phone_policy() -> PhonePolicy:
    return PhonePolicy.from_settings()


def generate_random_email(prefix: Optional[str] = None, domain: Optional[str] = None) -> str:
    """Return ``<prefix><time_ns><random>@<domain>``, e.g. ``testuser1760...04718823@example.com``."""
    settings = get_settings()
    prefix = prefix or settings.FIXTURE_EMAIL_PREFIX
    domain = domain or settings.FIXTURE_EMAIL_DOMAIN

    suffix = str(secrets.randbelow(10 ** EMAIL_RANDOM_DIGITS)).zfill(EMAIL_RANDOM_DIGITS)
    email = f"{prefix}{time.time_ns()}{suffix}@{domain}"

    logger.debug("fixture_generated", kind="email", value=email)
    return email


def generate_random_phone(with_country_code: bool = False, policy: Optional[PhonePolicy] = None) -> str:
    """Return a zero-padded local subscriber number.

    With ``with_country_code`` the policy's code is prepended (``+966501234567``);
    ``strip_country_code`` turns that back into a valid local number.
    """
    policy = policy or _phone_policy()
    number = str(secrets.randbelow(10 ** policy.digits)).zfill(policy.digits)
    phone = f"{policy.country_code}{number}" if with_country_code else number

    logger.debug("fixture_generated", kind="phone", value=phone)
    return phone


def generate_valid_password(length: Optional[int] = None, policy: Optional[PasswordPolicy] = None) -> str:
    """Return a random password that satisfies every rule of ``policy``.

    One character of each required class is placed first, the rest is padded
    with alphanumerics, then the whole string is shuffled.
    """
    policy = policy or _password_policy()

    chars = []
    if policy.require_letter:
        chars.append(_rng.choice(LETTERS))
    if policy.require_digit:
        chars.append(_rng.choice(DIGITS))
    if policy.required_special_chars:
        chars.append(_rng.choice(policy.required_special_chars))

    target = max(length or 0, policy.min_length, len(chars))
    chars.extend(_rng.choice(ALPHANUMERIC) for _ in range(target - len(chars)))

    _rng.shuffle(chars)
    return "".join(chars)
