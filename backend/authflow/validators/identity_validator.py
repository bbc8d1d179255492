"""Identity Validator: the email or phone field, depending on the form mode."""

from authflow.validators.base import BaseValidator
from authflow.validators.models import FormData, FormMessages, FormMode, PhonePolicy
from authflow.validators.rules import is_valid_email, is_valid_phone


class IdentityValidator(BaseValidator):
    """Presence check first, then format check; never both for one field."""

    def __init__(self, messages: FormMessages, phone_policy: PhonePolicy):
        self.messages = messages
        self.phone_policy = phone_policy

    @property
    def name(self) -> str:
        return "IdentityValidator"

    def validate(self, form: FormData, mode: FormMode) -> list[str]:
        errors = []

        if mode == FormMode.PHONE:
            if self._is_blank(form.phone):
                errors.append(self.messages.phone_required)
            elif not is_valid_phone(form.phone, self.phone_policy.digits):
                errors.append(self.messages.phone_invalid)
        else:
            if self._is_blank(form.email):
                errors.append(self.messages.email_required)
            elif not is_valid_email(form.email):
                errors.append(self.messages.email_invalid)

        return errors
