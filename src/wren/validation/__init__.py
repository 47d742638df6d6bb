"""Form validation — ordered rules per field, first failure wins.

Usage::

    from wren.validation import (
        FieldRuleRegistry, FormValidator, confirmation, email, min_length, required,
    )

    registry = FieldRuleRegistry.build(
        {
            "email": [required(), email()],
            "password": [required(), min_length(3)],
            "confirm-password": [confirmation("password")],
        },
        labels={"confirm-password": "password"},
    )
    validator = FormValidator(registry)

    if validator.validate(form):
        ...  # every field passed; form shows no errors
"""

from wren.validation.engine import FormValidator
from wren.validation.outcome import VALID, Invalid, Valid, ValidationOutcome
from wren.validation.protocols import ErrorDisplay, FormSurface, ValueLookup
from wren.validation.registry import FieldRuleRegistry
from wren.validation.result import ValidationResult
from wren.validation.rules import (
    Rule,
    between_length,
    confirmation,
    email,
    matches,
    max_length,
    min_length,
    one_of,
    required,
)
from wren.validation.templating import render

__all__ = [
    "VALID",
    "ErrorDisplay",
    "FieldRuleRegistry",
    "FormSurface",
    "FormValidator",
    "Invalid",
    "Rule",
    "Valid",
    "ValidationOutcome",
    "ValidationResult",
    "ValueLookup",
    "between_length",
    "confirmation",
    "email",
    "matches",
    "max_length",
    "min_length",
    "one_of",
    "render",
    "required",
]
