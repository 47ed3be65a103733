"""Input checks applied before users and credentials are written."""

import re

from usercred.domain.accounts.entities import Credential, User
from usercred.domain.shared.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")

MAX_NAME_LENGTH = 100
MAX_USERNAME_LENGTH = 50
MAX_EMAIL_LENGTH = 150


def _require_text(value: str | None, field_name: str, max_length: int) -> None:
    if value is None or not value.strip():
        raise ValidationError(
            f"{field_name} must not be empty",
            details={"field": field_name},
        )
    if len(value) > max_length:
        raise ValidationError(
            f"{field_name} must be at most {max_length} characters",
            details={"field": field_name, "max_length": max_length},
        )


def validate_user(user: User) -> None:
    """Reject users the store would accept but the application must not."""
    _require_text(user.first_name, "first_name", MAX_NAME_LENGTH)
    _require_text(user.last_name, "last_name", MAX_NAME_LENGTH)
    _require_text(user.username, "username", MAX_USERNAME_LENGTH)
    # Lookups by username trim their input, so stored usernames must be trimmed
    if user.username != user.username.strip():
        raise ValidationError(
            "username must not start or end with whitespace",
            details={"field": "username"},
        )
    _require_text(user.email, "email", MAX_EMAIL_LENGTH)
    if not EMAIL_PATTERN.match(user.email.strip()):
        raise ValidationError(
            f"Invalid email format: {user.email}",
            details={"field": "email"},
        )


def validate_credential(credential: Credential) -> None:
    """Hash and salt are opaque but must be present."""
    if not credential.hash_password:
        raise ValidationError(
            "hash_password must not be empty",
            details={"field": "hash_password"},
        )
    if not credential.salt:
        raise ValidationError("salt must not be empty", details={"field": "salt"})
