"""In-memory form surface and submit/reset lifecycle.

``Form`` holds a form's current values and the error message shown for
each field. It implements the ``FormSurface`` protocol, so it can be
handed straight to ``FormValidator``::

    form = Form({"name": "", "email": "ann@example.com"})
    validator.validate(form)
    form.errors  # {"name": "The name field is required."}

``FormController`` wires a validator to the two form events: submit
(validate, then clear the form on success) and reset (clear values
and errors).
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Self

from wren.validation.engine import FormValidator
from wren.validation.result import ValidationResult


class Form:
    """Mutable form state: field values plus shown error messages.

    Unknown fields read as ``""``. Showing an empty message clears the
    field's error.
    """

    __slots__ = ("_errors", "_values")

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})
        self._errors: dict[str, str] = {}

    @classmethod
    def from_form_data(cls, data: Mapping[str, str | Sequence[str]]) -> Self:
        """Build a form from parsed multi-value form data.

        Keeps the first value of each list, matching how browsers submit
        one value per text input.
        """
        values: dict[str, str] = {}
        for key, raw in data.items():
            if isinstance(raw, str):
                values[key] = raw
            elif raw:
                values[key] = raw[0]
            else:
                values[key] = ""
        return cls(values)

    # -- values -------------------------------------------------------------

    def get_value(self, attribute: str) -> str:
        return self._values.get(attribute) or ""

    def set_value(self, attribute: str, value: str) -> None:
        self._values[attribute] = value

    def update(self, values: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        self._values.update(values)

    @property
    def values(self) -> dict[str, str]:
        """A copy of the current field values."""
        return dict(self._values)

    def reset(self) -> None:
        """Clear every field value, like a browser form reset."""
        self._values.clear()

    # -- errors -------------------------------------------------------------

    def display_error(self, attribute: str, message: str) -> None:
        if message:
            self._errors[attribute] = message
        else:
            self._errors.pop(attribute, None)

    def hide_error(self, attribute: str) -> None:
        self.display_error(attribute, "")

    def hide_all_errors(self) -> None:
        self._errors.clear()

    def error_for(self, attribute: str) -> str:
        """The message shown for *attribute*, or ``""``."""
        return self._errors.get(attribute, "")

    @property
    def errors(self) -> dict[str, str]:
        """A copy of the shown messages, for fields that have one."""
        return dict(self._errors)

    def __repr__(self) -> str:
        return f"Form(values={self._values!r}, errors={self._errors!r})"


class FormController:
    """Handles submit and reset for forms validated by one validator.

    ``on_success`` runs after a valid submission has been cleared; it
    receives the result, whose ``data`` still holds the submitted values::

        controller = FormController(
            validator,
            on_success=lambda result: accounts.create(**result.data),
        )
        controller.submit(form)
    """

    __slots__ = ("_on_success", "validator")

    def __init__(
        self,
        validator: FormValidator,
        *,
        on_success: Callable[[ValidationResult], object] | None = None,
    ) -> None:
        self.validator = validator
        self._on_success = on_success

    def submit(self, form: Form) -> ValidationResult:
        """Validate *form*; on success clear it and run ``on_success``.

        On failure the per-field errors stay shown on the form.
        """
        result = self.validator.run(form)
        if result:
            form.reset()
            form.hide_all_errors()
            if self._on_success is not None:
                self._on_success(result)
        return result

    def reset(self, form: Form) -> None:
        """Reset *form*: clear its values and every shown error."""
        form.reset()
        form.hide_all_errors()
