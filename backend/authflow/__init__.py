"""authflow: form validation and fixture generation for auth-flow browser tests."""

__version__ = "1.0.0"
