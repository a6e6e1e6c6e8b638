"""Template rendering for resolved translations.

Templates carry two kinds of tokens:
- ``%n`` (and ``-%n``) for the quantity
- ``%{name}`` for named substitutions
"""

from typing import Any, Mapping, Optional

NUMBER_TOKEN = "%n"
NEGATED_NUMBER_TOKEN = "-%n"


def apply_numbers(template: str, number: int) -> str:
    """Substitute the quantity into a template.

    ``-%n`` is replaced first with the negated number so that
    "Due -%n days ago" renders -10 as "Due 10 days ago".

    Args:
        template: Template with %n / -%n tokens.
        number: Quantity to substitute.

    Returns:
        Template with every number token replaced.
    """
    text = template.replace(NEGATED_NUMBER_TOKEN, str(-number))
    return text.replace(NUMBER_TOKEN, str(number))


def apply_formatting(text: str, formatting: Optional[Mapping[str, Any]]) -> str:
    """Replace every %{name} token with its value from formatting.

    Tokens without a value are left untouched. Values that themselves
    contain token syntax give order-dependent results.

    Args:
        text: Text with %{name} tokens.
        formatting: Mapping of name -> value, or None.

    Returns:
        Formatted text.
    """
    if not formatting:
        return text
    for name, value in formatting.items():
        text = text.replace(f"%{{{name}}}", str(value))
    return text


def render_original(
    key: str,
    number: Optional[int],
    formatting: Optional[Mapping[str, Any]],
) -> str:
    """Render the lookup key itself when no translation applies."""
    if number is not None:
        key = key.replace(NUMBER_TOKEN, str(number))
    return apply_formatting(key, formatting)
