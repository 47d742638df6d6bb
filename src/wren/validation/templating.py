"""Message placeholders — ``{name}`` substitution for rule messages.

Rule messages are built in two stages. Rules fill in their own
parameters and leave ``{attribute}`` alone::

    render("The {attribute} must be at least {min} characters.", {"min": 3})
    # → "The {attribute} must be at least 3 characters."

The validator then fills in the field label and unwraps anything left::

    render(message, {"attribute": "password"}, unwrap_unmatched=True)
    # → "The password must be at least 3 characters."
"""

import re
from collections.abc import Mapping

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z0-9_]+)\}")


def render(
    template: str,
    replacements: Mapping[str, object],
    unwrap_unmatched: bool = False,
) -> str:
    """Substitute ``{name}`` placeholders in *template*.

    Single pass: substituted values are never scanned again.

    A placeholder whose replacement is missing *or falsy* (``0``, ``""``,
    ``None``) counts as unmatched. Unmatched placeholders are left as-is,
    braces included, unless *unwrap_unmatched* is set, in which case the
    bare name is substituted.
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = replacements.get(name)
        if value:
            return str(value)
        return name if unwrap_unmatched else match.group(0)

    return _PLACEHOLDER_RE.sub(substitute, template)
