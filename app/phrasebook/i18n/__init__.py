"""i18n system - runtime translation resolution.

Resolves a key, an optional quantity, named substitutions and a context
into rendered text.

Main components:
- models: LiteralEntry, PluralRangesEntry, ExternalDictionaryEntry,
  ContextTable, TranslationBundle
- rendering: apply_numbers, apply_formatting
- resolvers: ContextResolver and EntryResolver
- translator: Translator facade
- plurals: plural extension contract and bundled rules
- loader: TranslationLoader and YAMLTranslationLoader
"""

from phrasebook.i18n.loader import TranslationLoader, YAMLTranslationLoader
from phrasebook.i18n.models import (
    ContextTable,
    ExternalDictionaryEntry,
    LiteralEntry,
    PluralRange,
    PluralRangesEntry,
    TranslationBundle,
    TranslationEntry,
    TranslationTable,
)
from phrasebook.i18n.plurals import (
    PluralExtension,
    get_plural_extension,
    slavic_plural_extension,
)
from phrasebook.i18n.rendering import apply_formatting, apply_numbers
from phrasebook.i18n.resolvers import ContextResolver, EntryResolver
from phrasebook.i18n.translator import Translator

__all__ = [
    "ContextTable",
    "ExternalDictionaryEntry",
    "LiteralEntry",
    "PluralRange",
    "PluralRangesEntry",
    "TranslationBundle",
    "TranslationEntry",
    "TranslationTable",
    "PluralExtension",
    "get_plural_extension",
    "slavic_plural_extension",
    "apply_formatting",
    "apply_numbers",
    "ContextResolver",
    "EntryResolver",
    "Translator",
    "TranslationLoader",
    "YAMLTranslationLoader",
]
