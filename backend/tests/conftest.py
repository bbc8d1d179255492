"""Shared fixtures for the authflow test suite."""

import pytest

from authflow.config import get_settings
from authflow.fixtures import generators
from authflow.validators import PasswordPolicy, PhonePolicy, ValidationEngine


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine(password_policy=PasswordPolicy(), phone_policy=PhonePolicy())


@pytest.fixture
def fresh_settings():
    """Drop cached settings and policies so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    generators._password_policy.cache_clear()
    generators._phone_policy.cache_clear()
    yield
    get_settings.cache_clear()
    generators._password_policy.cache_clear()
    generators._phone_policy.cache_clear()
