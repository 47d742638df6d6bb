"""Registry import resolution — resolves ``"module:attribute"`` strings.

Used by ``wren check`` to locate the rule registry to validate against
and the input types used when rendering it.
"""

import importlib
from collections.abc import Mapping

from wren.validation.registry import FieldRuleRegistry


def resolve_registry(import_string: str) -> FieldRuleRegistry:
    """Resolve an import string to a ``FieldRuleRegistry``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"registry"`` (e.g. ``"myforms"`` resolves
    to ``myforms.registry``).

    Supports factory functions: if the resolved object is callable and
    not a registry, it is called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a registry or factory.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "registry"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, FieldRuleRegistry):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, FieldRuleRegistry):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a FieldRuleRegistry"
        raise TypeError(msg)

    return obj


def resolve_input_types(import_string: str) -> Mapping[str, str]:
    """Resolve an import string to a field → HTML input type mapping.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"INPUT_TYPES"``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a mapping.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "INPUT_TYPES"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if not isinstance(obj, Mapping):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a mapping"
        raise TypeError(msg)

    return obj
