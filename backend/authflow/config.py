"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validation and fixture settings loaded from environment variables."""

    # Password policy
    PASSWORD_MIN_LENGTH: int = 9
    PASSWORD_REQUIRE_LETTER: bool = True
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_SPECIAL_CHARS: str = "#?!@$%^&*-"

    # Phone numbers (local subscriber part, country code kept separately)
    PHONE_DIGITS: int = 9
    PHONE_COUNTRY_CODE: str = "+966"

    # Fixture generation
    FIXTURE_EMAIL_PREFIX: str = "testuser"
    FIXTURE_EMAIL_DOMAIN: str = "example.com"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
