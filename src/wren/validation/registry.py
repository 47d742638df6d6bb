"""Field rule registry — which rules apply to which field, in what order.

Built once at startup, immutable afterwards, and passed explicitly to
the validator::

    registry = FieldRuleRegistry.build(
        {
            "password": [required(), min_length(3)],
            "confirm-password": [confirmation("password")],
        },
        labels={"confirm-password": "password"},
    )

``build()`` checks the whole table up front, so a typo in a
confirmation target fails at import time instead of on the first
submission.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from wren.errors import ConfigurationError
from wren.validation.rules import Rule


@dataclass(frozen=True, slots=True)
class FieldRuleRegistry:
    """Ordered, immutable mapping of field → rule set, plus field labels.

    Iteration yields ``(field, rules)`` pairs in the order fields were
    declared. Use ``build()`` rather than the constructor.
    """

    entries: tuple[tuple[str, tuple[Rule, ...]], ...] = ()
    labels: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(
        cls,
        rules: Mapping[str, Iterable[Rule]],
        labels: Mapping[str, str] | None = None,
    ) -> Self:
        """Validate a rule table and freeze it into a registry.

        Raises:
            ConfigurationError: On an empty or non-string field name, a
                rule that is not a ``Rule``, a rule that references an
                unregistered field, or a label for an unregistered field.
        """
        entries: list[tuple[str, tuple[Rule, ...]]] = []
        for field_name, declared in rules.items():
            if not isinstance(field_name, str) or not field_name:
                msg = f"Field names must be non-empty strings (got {field_name!r})"
                raise ConfigurationError(msg)
            # one-shot iterables are read exactly once
            field_rules = tuple(declared)
            for rule in field_rules:
                if not isinstance(rule, Rule):
                    msg = (
                        f"Field {field_name!r} has {rule!r}, which is not a rule. "
                        "Did you forget to call the factory, e.g. required()?"
                    )
                    raise ConfigurationError(msg)
            entries.append((field_name, field_rules))

        registered = {name for name, _ in entries}
        for field_name, field_rules in entries:
            for rule in field_rules:
                for ref in rule.references:
                    if ref not in registered:
                        msg = (
                            f"Field {field_name!r} has a {rule.name} rule referencing "
                            f"{ref!r}, which is not a registered field"
                        )
                        raise ConfigurationError(msg)

        label_map = dict(labels or {})
        unknown = sorted(set(label_map) - registered)
        if unknown:
            msg = f"Labels given for unregistered fields: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        return cls(entries=tuple(entries), labels=MappingProxyType(label_map))

    @property
    def fields(self) -> tuple[str, ...]:
        """Registered field names, in declaration order."""
        return tuple(name for name, _ in self.entries)

    def rules_for(self, field_name: str) -> tuple[Rule, ...]:
        """Return the rule set for *field_name*.

        Raises:
            KeyError: If the field is not registered.
        """
        for name, field_rules in self.entries:
            if name == field_name:
                return field_rules
        raise KeyError(field_name)

    def label_for(self, field_name: str) -> str:
        """Display name for *field_name*; the name itself when unlabelled."""
        return self.labels.get(field_name) or field_name

    def __iter__(self) -> Iterator[tuple[str, tuple[Rule, ...]]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, field_name: object) -> bool:
        return any(name == field_name for name, _ in self.entries)
