"""Validator configuration.

ValidationConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from wren.errors import ConfigurationError

_RULE_ERROR_POLICIES = frozenset({"report", "raise"})


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(rule_errors="raise")
    """

    # What to do when a rule raises: "report" marks the field invalid and
    # keeps going, "raise" aborts the pass with RuleError
    rule_errors: str = "report"

    # Shown on a field whose rule raised (report mode only)
    fault_message: str = "The {attribute} could not be validated."

    def __post_init__(self) -> None:
        if self.rule_errors not in _RULE_ERROR_POLICIES:
            allowed = ", ".join(sorted(_RULE_ERROR_POLICIES))
            msg = f"rule_errors must be one of: {allowed} (got {self.rule_errors!r})"
            raise ConfigurationError(msg)
        if not self.fault_message:
            msg = "fault_message must not be empty"
            raise ConfigurationError(msg)
