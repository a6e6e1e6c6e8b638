"""Pluralization extensions.

An extension picks a template out of a dictionary-shaped entry. It is
called with the lookup key, the quantity (None when absent), the formatting
mapping and the entry's categories, and returns the chosen template. The
Translator performs %n and %{name} substitution on the result.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from phrasebook.logging import get_module_logger

logger = get_module_logger()

PluralExtension = Callable[
    [str, Optional[int], Optional[Mapping[str, Any]], Optional[Mapping[str, str]]],
    str,
]


def slavic_plural_category(number: Optional[int]) -> str:
    """Select the plural category for East Slavic languages (e.g. Russian).

    Args:
        number: Quantity, or None when absent.

    Returns:
        One of "zero", "one", "few", "many" or "other".
    """
    if not number:
        return "zero"
    # Python's modulo is non-negative for a positive divisor
    last_digit = abs(number) % 10
    last_two = abs(number) % 100
    if last_digit == 1 and last_two != 11:
        return "one"
    if last_digit in (2, 3, 4) and last_two not in (12, 13, 14):
        return "few"
    if last_digit in (0, 5, 6, 7, 8, 9) or last_two in (11, 12, 13, 14):
        return "many"
    return "other"


def slavic_plural_extension(
    key: str,
    number: Optional[int],
    formatting: Optional[Mapping[str, Any]],
    categories: Optional[Mapping[str, str]],
) -> str:
    """Pick the template for the Slavic plural category of number.

    Returns an empty string when the entry lacks the selected category.
    """
    category = slavic_plural_category(number)
    if not categories or category not in categories:
        logger.debug("plural_category_missing", key=key, category=category)
        return ""
    return categories[category]


PLURAL_EXTENSIONS: Dict[str, PluralExtension] = {
    "slavic": slavic_plural_extension,
}


def get_plural_extension(name: str) -> PluralExtension:
    """Look up a bundled extension by name.

    Args:
        name: Registered extension name (e.g. "slavic").

    Returns:
        The extension function.

    Raises:
        ValueError: If no extension is registered under name.
    """
    try:
        return PLURAL_EXTENSIONS[name]
    except KeyError as e:
        logger.error(
            "unknown_plural_extension",
            extension=name,
            available_extensions=sorted(PLURAL_EXTENSIONS),
        )
        raise ValueError(f"Unknown plural extension: {name}") from e
