"""Synthetic form values for auth tests."""

from authflow.fixtures.generators import (
    generate_random_email,
    generate_random_phone,
    generate_valid_password,
)
from authflow.fixtures.reference_data import EDGE_CASES, EXISTING_USER, INVALID, VALID

__all__ = [
    "generate_random_email",
    "generate_random_phone",
    "generate_valid_password",
    "VALID",
    "INVALID",
    "EDGE_CASES",
    "EXISTING_USER",
]
