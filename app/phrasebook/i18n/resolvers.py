"""Context and entry resolution.

ContextResolver picks the override table for an active context.
EntryResolver turns a looked-up entry plus a quantity into rendered text.
"""

from typing import Any, Iterable, Mapping, Optional

from phrasebook.i18n.models import (
    ContextTable,
    ExternalDictionaryEntry,
    LiteralEntry,
    PluralRangesEntry,
    TranslationEntry,
    TranslationTable,
)
from phrasebook.i18n.plurals import PluralExtension
from phrasebook.i18n.rendering import apply_formatting, apply_numbers, render_original
from phrasebook.logging import get_module_logger

logger = get_module_logger()


class ContextResolver:
    """Selects the first context table satisfied by an active context."""

    @staticmethod
    def resolve_context(
        contexts: Optional[Iterable[ContextTable]],
        active_context: Mapping[str, str],
    ) -> Optional[ContextTable]:
        """Find the first context table whose matches all hold.

        Tables are checked in authored order. A table requiring an
        attribute that active_context lacks does not match.

        Args:
            contexts: Context tables, or None.
            active_context: Caller's active context.

        Returns:
            Matching ContextTable, or None if no table matches.
        """
        if not contexts:
            return None

        for context_table in contexts:
            if context_table.is_satisfied_by(active_context):
                return context_table

        return None


class EntryResolver:
    """Resolves a key within a single translation table.

    Attributes:
        extension: Plural extension for dictionary-shaped entries, or None.
    """

    def __init__(self, extension: Optional[PluralExtension] = None):
        self.extension = extension

    def resolve(
        self,
        key: str,
        number: Optional[int],
        formatting: Optional[Mapping[str, Any]],
        table: Optional[TranslationTable],
    ) -> Optional[str]:
        """Render the entry for key in table.

        Args:
            key: Lookup key.
            number: Quantity, or None when absent.
            formatting: Named substitutions, or None.
            table: Translation table to search, or None.

        Returns:
            Rendered text, or None if the key is absent or no plural
            range matches.

        Raises:
            TypeError: If the table holds an object that is not a
                TranslationEntry.
        """
        if table is None:
            return None

        entry = table.get(key)
        if entry is None:
            return None

        return self.render_entry(key, entry, number, formatting)

    def render_entry(
        self,
        key: str,
        entry: TranslationEntry,
        number: Optional[int],
        formatting: Optional[Mapping[str, Any]],
    ) -> Optional[str]:
        """Render a single entry, dispatching on its variant."""
        if isinstance(entry, LiteralEntry):
            return apply_formatting(entry.text, formatting)

        if isinstance(entry, PluralRangesEntry):
            for plural_range in entry.ranges:
                if plural_range.matches(number):
                    text = apply_numbers(
                        plural_range.template, number if number is not None else 0
                    )
                    return apply_formatting(text, formatting)
            logger.debug("no_plural_range_matched", key=key, number=number)
            return None

        if isinstance(entry, ExternalDictionaryEntry):
            if self.extension is None:
                logger.debug("plural_extension_not_registered", key=key)
                return render_original(key, number, formatting)
            text = self.extension(key, number, formatting, entry.categories)
            text = apply_numbers(text, number if number is not None else 0)
            return apply_formatting(text, formatting)

        logger.error(
            "unsupported_translation_entry",
            key=key,
            entry_type=type(entry).__name__,
        )
        raise TypeError(f"Unsupported translation entry for key {key!r}: {entry!r}")
