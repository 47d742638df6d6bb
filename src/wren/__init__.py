"""Wren — declarative form field validation.

Ordered rules per field, first failure wins, one boolean for the form.

Basic usage::

    from wren import FieldRuleRegistry, Form, FormValidator
    from wren.validation import email, required

    registry = FieldRuleRegistry.build({
        "name": [required()],
        "email": [required(), email()],
    })
    validator = FormValidator(registry)

    form = Form({"name": "", "email": "bad"})
    validator.validate(form)  # False
    form.errors
    # {"name": "The name field is required.",
    #  "email": "The email must be a valid email address."}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FieldRuleRegistry",
    "Form",
    "FormController",
    "FormValidator",
    "RuleError",
    "ValidationConfig",
    "ValidationResult",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("FieldRuleRegistry", "FormValidator", "ValidationResult"):
        from wren import validation as _validation

        return getattr(_validation, name)

    if name in ("Form", "FormController"):
        from wren import forms as _forms

        return getattr(_forms, name)

    if name == "ValidationConfig":
        from wren.config import ValidationConfig

        return ValidationConfig

    if name in ("ConfigurationError", "RuleError", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
