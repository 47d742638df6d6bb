"""Validation result — immutable summary of one validation pass."""

from dataclasses import dataclass

from wren.errors import RuleError


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of running a registry against a form.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validator.run(form)
        if not result:
            return render_form(form, registry)

    ``errors`` maps each failing field to the one message shown for it
    (the first failing rule's)::

        {"name": "The name field is required.",
         "email": "The email must be a valid email address."}

    ``data`` holds the values of the fields that passed every rule.

    ``faults`` lists rules that raised during the pass. Their fields
    also appear in ``errors``.
    """

    data: dict[str, str]
    errors: dict[str, str]
    faults: tuple[RuleError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
