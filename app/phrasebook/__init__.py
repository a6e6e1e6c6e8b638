"""phrasebook - runtime translation resolver.

Resolves a lookup key, an optional quantity, named substitutions and a
disambiguation context into a pluralized, formatted translation.
"""

from phrasebook.i18n import Translator, TranslationBundle

__all__ = ["Translator", "TranslationBundle"]
