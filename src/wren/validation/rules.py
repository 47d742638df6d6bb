"""Built-in validation rules.

Every rule is a small frozen dataclass with one method::

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        '''Return VALID, or Invalid(message template).'''

Rules are built through factory functions, which capture parameters
by value::

    registry = FieldRuleRegistry.build({
        "username": [required(), between_length(3, 16)],
        "password": [required(), min_length(8)],
        "confirm-password": [confirmation("password")],
    })

Failure messages keep an ``{attribute}`` placeholder; the validator
replaces it with the field's label when the message is shown.

Rules are also callable, ``rule(value, lookup=None)``, which is handy
in tests and one-off checks.
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar

from wren.errors import ConfigurationError
from wren.validation.outcome import VALID, Invalid, ValidationOutcome
from wren.validation.protocols import ValueLookup
from wren.validation.templating import render


class Rule:
    """Base for all rule kinds."""

    __slots__ = ()

    name: ClassVar[str] = "rule"

    @property
    def references(self) -> tuple[str, ...]:
        """Other fields this rule reads while evaluating."""
        return ()

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        raise NotImplementedError

    def __call__(self, value: str, lookup: ValueLookup | None = None) -> ValidationOutcome:
        return self.evaluate(value, lookup)


def _check_length(param: str, n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        msg = f"{param} must be a non-negative integer (got {n!r})"
        raise ConfigurationError(msg)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Required(Rule):
    """Field must be non-empty. Whitespace counts as content."""

    name: ClassVar[str] = "required"

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if len(value) > 0:
            return VALID
        return Invalid("The {attribute} field is required.")


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MinLength(Rule):
    name: ClassVar[str] = "min_length"

    min: int

    def __post_init__(self) -> None:
        _check_length("min", self.min)

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if len(value) >= self.min:
            return VALID
        return Invalid(
            render("The {attribute} must be at least {min} characters.", {"min": self.min})
        )


@dataclass(frozen=True, slots=True)
class MaxLength(Rule):
    name: ClassVar[str] = "max_length"

    max: int

    def __post_init__(self) -> None:
        _check_length("max", self.max)

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if len(value) <= self.max:
            return VALID
        return Invalid(
            render("The {attribute} must not be greater than {max} characters", {"max": self.max})
        )


@dataclass(frozen=True, slots=True)
class BetweenLength(Rule):
    """Length must fall within ``min..max``, both ends inclusive."""

    name: ClassVar[str] = "between_length"

    min: int
    max: int

    def __post_init__(self) -> None:
        _check_length("min", self.min)
        _check_length("max", self.max)
        if self.min > self.max:
            msg = f"between_length min ({self.min}) is greater than max ({self.max})"
            raise ConfigurationError(msg)

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if self.min <= len(value) <= self.max:
            return VALID
        return Invalid(
            render(
                "The {attribute} must be between {min} and {max} characters.",
                {"min": self.min, "max": self.max},
            )
        )


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Loose structural check, searched anywhere in the value (not anchored)
_EMAIL_RE = re.compile(r"[A-Za-z0-9+]+@[A-Za-z0-9]+\.[A-Za-z0-9]+")


@dataclass(frozen=True, slots=True)
class Email(Rule):
    name: ClassVar[str] = "email"

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if _EMAIL_RE.search(value):
            return VALID
        return Invalid("The {attribute} must be a valid email address.")


@dataclass(frozen=True, slots=True)
class Matches(Rule):
    """Value must match *pattern* from its first character."""

    name: ClassVar[str] = "matches"

    pattern: str
    message: str = "The {attribute} format is invalid."
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as exc:
            msg = f"Invalid pattern {self.pattern!r}: {exc}"
            raise ConfigurationError(msg) from exc
        object.__setattr__(self, "_compiled", compiled)

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if self._compiled.match(value):
            return VALID
        return Invalid(self.message)


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OneOf(Rule):
    name: ClassVar[str] = "one_of"

    choices: frozenset[str]

    def __post_init__(self) -> None:
        if not self.choices:
            msg = "one_of needs at least one choice"
            raise ConfigurationError(msg)

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if value in self.choices:
            return VALID
        return Invalid("The selected {attribute} is invalid.")


# ---------------------------------------------------------------------------
# Relational
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Confirmation(Rule):
    """Value must equal another field's value, read live on every call."""

    name: ClassVar[str] = "confirmation"

    original: str

    def __post_init__(self) -> None:
        if not self.original:
            msg = "confirmation needs the name of the field it confirms"
            raise ConfigurationError(msg)

    @property
    def references(self) -> tuple[str, ...]:
        return (self.original,)

    def evaluate(self, value: str, lookup: ValueLookup | None) -> ValidationOutcome:
        if lookup is None:
            msg = f"confirmation of {self.original!r} needs a value lookup"
            raise ConfigurationError(msg)
        if value == lookup.get_value(self.original):
            return VALID
        return Invalid("The {attribute} confirmation does not match.")


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def required() -> Rule:
    """Field must be present and non-empty."""
    return Required()


def email() -> Rule:
    """Value must contain something shaped like an email address."""
    return Email()


def min_length(min: int) -> Rule:  # noqa: A002
    """String must be at least *min* characters."""
    return MinLength(min)


def max_length(max: int) -> Rule:  # noqa: A002
    """String must be at most *max* characters."""
    return MaxLength(max)


def between_length(min: int, max: int) -> Rule:  # noqa: A002
    """String must be between *min* and *max* characters, inclusive."""
    return BetweenLength(min, max)


def confirmation(original: str) -> Rule:
    """Value must equal the current value of the *original* field."""
    return Confirmation(original)


def matches(pattern: str, message: str | None = None) -> Rule:
    """Value must match the given regex pattern."""
    if message is None:
        return Matches(pattern)
    return Matches(pattern, message)


def one_of(*choices: str) -> Rule:
    """Value must be one of the given choices."""
    return OneOf(frozenset(choices))
