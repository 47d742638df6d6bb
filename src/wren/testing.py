"""Test helpers for code that validates forms.

``RecordingForm`` is a ``Form`` that remembers every call the validator
made on it, in order, so tests can check exactly what a user would have
seen flash by::

    form = RecordingForm({"name": ""})
    validator.validate(form)
    assert form.calls == [("display", "name", "The name field is required.")]

The assertion helpers produce a clear message on failure.
"""

from collections.abc import Mapping

from wren.forms import Form

type Call = tuple[str, ...]


class RecordingForm(Form):
    """A ``Form`` that records display/hide calls as tuples.

    ``("display", field, message)``, ``("hide", field)`` and
    ``("hide_all",)``. ``hide_error`` is recorded once, not as the
    display call it delegates to.
    """

    __slots__ = ("calls",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        super().__init__(values)
        self.calls: list[Call] = []

    def display_error(self, attribute: str, message: str) -> None:
        self.calls.append(("display", attribute, message))
        super().display_error(attribute, message)

    def hide_error(self, attribute: str) -> None:
        self.calls.append(("hide", attribute))
        Form.display_error(self, attribute, "")

    def hide_all_errors(self) -> None:
        self.calls.append(("hide_all",))
        super().hide_all_errors()

    def displayed(self) -> list[tuple[str, str]]:
        """``(field, message)`` for every non-empty display call, in order."""
        return [(c[1], c[2]) for c in self.calls if c[0] == "display" and c[2]]

    def clear_calls(self) -> None:
        self.calls.clear()


def assert_field_error(form: Form, field: str, message: str | None = None) -> None:
    """Assert *field* shows an error, optionally exactly *message*."""
    shown = form.error_for(field)
    assert shown, (
        f"Field {field!r} shows no error.\n"
        f"Shown errors: {form.errors!r}"
    )
    if message is not None:
        assert shown == message, (
            f"Field {field!r} shows {shown!r}, expected {message!r}"
        )


def assert_no_errors(form: Form) -> None:
    """Assert no field on *form* shows an error."""
    assert not form.errors, f"Form shows errors: {form.errors!r}"
