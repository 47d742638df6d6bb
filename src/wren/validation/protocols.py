"""Collaborator protocols — where values come from and where errors go.

The validator never owns the form. It reads values through a
``ValueLookup`` and shows messages through an ``ErrorDisplay``::

    class MyForm:
        def get_value(self, attribute: str) -> str: ...
        def display_error(self, attribute: str, message: str) -> None: ...
        def hide_error(self, attribute: str) -> None: ...
        def hide_all_errors(self) -> None: ...

No base class required. The validator checks the shape, not the lineage.
``wren.forms.Form`` is the in-memory implementation.
"""

from typing import Protocol


class ValueLookup(Protocol):
    """Reads the current value of a field."""

    def get_value(self, attribute: str) -> str: ...


class ErrorDisplay(Protocol):
    """Shows and clears per-field error messages.

    ``display_error(attribute, "")`` clears the field's message, same as
    ``hide_error(attribute)``.
    """

    def display_error(self, attribute: str, message: str) -> None: ...

    def hide_error(self, attribute: str) -> None: ...

    def hide_all_errors(self) -> None: ...


class FormSurface(ValueLookup, ErrorDisplay, Protocol):
    """A form the validator can both read from and write errors to."""
