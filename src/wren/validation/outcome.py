"""Rule outcomes — what a single rule says about a single value."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Valid:
    """The rule accepted the value."""


@dataclass(frozen=True, slots=True)
class Invalid:
    """The rule rejected the value.

    ``message`` is a template: rule parameters are already filled in,
    ``{attribute}`` is left for the validator to resolve to a label.
    """

    message: str


type ValidationOutcome = Valid | Invalid

VALID = Valid()
