"""The account signup form.

Five fields: name, email, username, password, and a password
confirmation that is labelled "password" in its messages, so a
mismatch reads "The password confirmation does not match."

Used as the default registry for ``wren check``.
"""

from wren.validation import (
    FieldRuleRegistry,
    between_length,
    confirmation,
    email,
    min_length,
    required,
)

LABELS = {
    "confirm-password": "password",
}

INPUT_TYPES = {
    "email": "email",
    "password": "password",
    "confirm-password": "password",
}


def build_registry() -> FieldRuleRegistry:
    """Build the signup form's rule registry."""
    return FieldRuleRegistry.build(
        {
            "name": [required()],
            "email": [required(), email()],
            "username": [required(), between_length(3, 16)],
            "password": [required(), min_length(3)],
            "confirm-password": [confirmation("password")],
        },
        labels=LABELS,
    )
