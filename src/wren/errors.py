"""Wren exception hierarchy.

Rule failures are never exceptions: they are ``Invalid`` outcomes shown
to the user. These types cover contract violations at build time and
rules that blow up while evaluating.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a rule, registry, or config is built incorrectly.

    Typically raised once at startup, from ``FieldRuleRegistry.build()``
    or a rule factory, never during a validation pass.
    """


class RuleError(WrenError):
    """A rule raised while evaluating a field's value.

    The original exception is chained as ``__cause__``.

    Attributes:
        field: The field being validated.
        rule: Name of the rule kind that raised (e.g. ``"confirmation"``).
    """

    def __init__(self, field: str, rule: str, detail: str = "") -> None:
        self.field = field
        self.rule = rule
        self.detail = detail
        message = f"Rule {rule!r} raised on field {field!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
