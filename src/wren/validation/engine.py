"""Form validator — runs a registry against a live form.

One pass, in registry order. For each field, rules run left to right
against a freshly read value. The first failing rule shows its message
and ends that field; every passing rule clears the field's message.
Other fields are always checked, so the user sees every problem at once.

Exceptions from the form itself (reading values, showing errors) are
never caught. Exceptions raised by a rule are handled according to
``ValidationConfig.rule_errors``.
"""

import logging

from wren.config import ValidationConfig
from wren.errors import RuleError
from wren.validation.outcome import Invalid
from wren.validation.protocols import FormSurface
from wren.validation.registry import FieldRuleRegistry
from wren.validation.result import ValidationResult
from wren.validation.templating import render

logger = logging.getLogger("wren.validation")


class FormValidator:
    """Validates forms against a fixed registry.

    Holds no per-form state; one instance can serve every submission::

        validator = FormValidator(build_registry())

        if validator.validate(form):
            ...  # proceed with the submission
    """

    __slots__ = ("config", "registry")

    def __init__(
        self,
        registry: FieldRuleRegistry,
        config: ValidationConfig | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or ValidationConfig()

    def validate(self, surface: FormSurface) -> bool:
        """Validate *surface*, showing and clearing errors on it.

        Returns True when every field passed.
        """
        return self.run(surface).is_valid

    def run(self, surface: FormSurface) -> ValidationResult:
        """Validate *surface* and return the full ``ValidationResult``."""
        errors: dict[str, str] = {}
        data: dict[str, str] = {}
        faults: list[RuleError] = []

        for field_name, rules in self.registry:
            label = self.registry.label_for(field_name)
            value = ""
            for rule in rules:
                value = surface.get_value(field_name)
                try:
                    outcome = rule.evaluate(value, surface)
                except Exception as exc:
                    fault = RuleError(field_name, rule.name, str(exc))
                    if self.config.rule_errors == "raise":
                        raise fault from exc
                    fault.__cause__ = exc
                    logger.exception("Rule %s raised on field %r", rule.name, field_name)
                    faults.append(fault)
                    outcome = Invalid(self.config.fault_message)

                if isinstance(outcome, Invalid):
                    message = render(outcome.message, {"attribute": label}, unwrap_unmatched=True)
                    logger.debug("Field %r failed %s: %s", field_name, rule.name, message)
                    errors[field_name] = message
                    surface.display_error(field_name, message)
                    break

                surface.hide_error(field_name)
            else:
                if rules:
                    data[field_name] = value

        logger.debug(
            "Validated %d field(s): %d invalid, %d rule fault(s)",
            len(self.registry),
            len(errors),
            len(faults),
        )
        return ValidationResult(data=data, errors=errors, faults=tuple(faults))
