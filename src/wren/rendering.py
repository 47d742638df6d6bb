"""Server-side HTML for a validated form.

Renders one ``form-group`` per registered field, in registry order,
with the field's current error text in its ``form-text`` slot::

    <div class="form-group has-error">
      <label for="email">email</label>
      <input type="text" id="email" name="email" value="bad">
      <small class="form-text">The email must be a valid email address.</small>
    </div>

Output is autoescaped. Password inputs never echo their value back.
"""

import functools
from collections.abc import Mapping
from dataclasses import dataclass

from kida import Environment

from wren.forms import Form
from wren.validation.registry import FieldRuleRegistry

_FORM_TEMPLATE = """\
{% for field in fields %}
<div class="form-group{% if field.error %} has-error{% end %}">
  <label for="{{ field.name }}">{{ field.label }}</label>
  <input type="{{ field.input_type }}" id="{{ field.name }}" name="{{ field.name }}" value="{{ field.value }}">
  <small class="form-text">{{ field.error }}</small>
</div>
{% end %}
"""


@dataclass(frozen=True, slots=True)
class FieldView:
    """Everything the template needs to draw one field."""

    name: str
    label: str
    input_type: str
    value: str
    error: str


@functools.cache
def _environment() -> Environment:
    """Shared autoescaping kida environment, created on first render."""
    return Environment(autoescape=True)


def field_views(
    form: Form,
    registry: FieldRuleRegistry,
    input_types: Mapping[str, str] | None = None,
) -> list[FieldView]:
    """Build the per-field view models for *form*, in registry order."""
    types = input_types or {}
    views: list[FieldView] = []
    for name in registry.fields:
        input_type = types.get(name, "text")
        value = "" if input_type == "password" else form.get_value(name)
        views.append(
            FieldView(
                name=name,
                label=registry.label_for(name),
                input_type=input_type,
                value=value,
                error=form.error_for(name),
            )
        )
    return views


def render_form(
    form: Form,
    registry: FieldRuleRegistry,
    input_types: Mapping[str, str] | None = None,
) -> str:
    """Render the fields of *form* with their current error messages.

    Args:
        form: The form, after validation has shown or cleared errors.
        registry: Decides which fields are drawn and their labels.
        input_types: Optional field → HTML input type (default ``"text"``).
    """
    template = _environment().from_string(_FORM_TEMPLATE)
    return template.render({"fields": field_views(form, registry, input_types)}).strip()
