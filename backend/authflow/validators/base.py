"""Base validator: abstract class implementing the Strategy Pattern.

Each validator checks one field of an auth form and is independently testable.
New checks are added to a flow without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any

from authflow.validators.models import FormData, FormMode
from authflow.validators.rules import is_blank


class BaseValidator(ABC):
    """Abstract base for all form field validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns error messages in the order they were found
          (empty = field acceptable)
        - validate() never raises for malformed input
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, form: FormData, mode: FormMode) -> list[str]:
        """Run the field checks against the form.

        Args:
            form: Field values of the submission
            mode: Whether the form is keyed by email or phone

        Returns:
            List of user-facing error messages (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _is_blank(self, value: Any) -> bool:
        return is_blank(value)
