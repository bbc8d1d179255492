"""Password Validator: presence, then (optionally) the password policy."""

from typing import Optional

from authflow.validators.base import BaseValidator
from authflow.validators.models import FormData, FormMode, PasswordPolicy
from authflow.validators.rules import password_policy_errors


class PasswordValidator(BaseValidator):
    """Checks the password field of a form.

    A blank password only reports ``required_message``; the policy rules run
    when a password is present, so "required" and "too short" never stack.
    Sign-in forms pass ``policy=None`` and only check presence.
    """

    def __init__(self, required_message: str, policy: Optional[PasswordPolicy] = None):
        self.required_message = required_message
        self.policy = policy

    @property
    def name(self) -> str:
        return "PasswordValidator"

    def validate(self, form: FormData, mode: FormMode) -> list[str]:
        if self._is_blank(form.password):
            return [self.required_message]
        if self.policy is None:
            return []
        return password_policy_errors(form.password, self.policy)
