"""Translation service for resolving and rendering translated phrases.

Core component of the resolver: owns the translation data, the persistent
default context and the plural extension, and exposes translate().
"""

import copy
from typing import Any, Dict, Mapping, NamedTuple, Optional, Union

from phrasebook.i18n.loader import TranslationLoader
from phrasebook.i18n.models import TranslationBundle
from phrasebook.i18n.plurals import PluralExtension
from phrasebook.i18n.rendering import render_original
from phrasebook.i18n.resolvers import ContextResolver, EntryResolver
from phrasebook.logging import get_module_logger

logger = get_module_logger()

NumberOrMapping = Union[int, Mapping[str, Any]]

_UNSET: Any = object()


class TranslateArguments(NamedTuple):
    """Canonical (number, formatting, context) triple for a translate call."""

    number: Optional[int]
    formatting: Optional[Mapping[str, Any]]
    context: Optional[Mapping[str, str]]


def _is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def _describe(value: Any) -> str:
    return type(value).__name__


def normalize_arguments(
    num_or_formatting: Optional[NumberOrMapping] = None,
    num_or_formatting_or_context: Optional[NumberOrMapping] = None,
    formatting_or_context: Optional[Mapping[str, Any]] = None,
) -> TranslateArguments:
    """Map the positional translate() overloads onto one canonical triple.

    Supported shapes:
        (number[, formatting[, context]])
        (formatting[, context])
        (None, number[, formatting])
        (None, formatting[, context])

    A number or mapping in a position that cannot take it is ignored.

    Raises:
        TypeError: If an argument is neither a number nor a mapping.
    """
    for position, value in enumerate(
        (num_or_formatting, num_or_formatting_or_context, formatting_or_context),
        start=1,
    ):
        if value is not None and not (_is_number(value) or _is_mapping(value)):
            raise TypeError(
                f"Argument {position} must be a number or a mapping, got {_describe(value)}"
            )

    number = None
    formatting = None
    context = None

    if num_or_formatting is not None:
        if _is_number(num_or_formatting):
            number = num_or_formatting
            if _is_mapping(num_or_formatting_or_context):
                formatting = num_or_formatting_or_context
            if _is_mapping(formatting_or_context):
                context = formatting_or_context
        else:
            formatting = num_or_formatting
            if _is_mapping(num_or_formatting_or_context):
                context = num_or_formatting_or_context
    elif num_or_formatting_or_context is not None:
        if _is_number(num_or_formatting_or_context):
            number = num_or_formatting_or_context
            if _is_mapping(formatting_or_context):
                formatting = formatting_or_context
        else:
            formatting = num_or_formatting_or_context
            if _is_mapping(formatting_or_context):
                context = formatting_or_context

    return TranslateArguments(number, formatting, context)


class Translator:
    """Service for translating phrases with plurals, contexts and formatting.

    Translation never fails: a key missing from the context table falls
    back to the default table, and a key missing there is rendered as-is.

    Attributes:
        data: Merged TranslationBundle, or None when nothing is loaded.
        extension: Plural extension for dictionary-shaped entries, or None.
        loader: TranslationLoader used by load() and reload(), or None.
    """

    def __init__(
        self,
        bundle: Optional[Union[TranslationBundle, Mapping[str, Any]]] = None,
        extension: Optional[PluralExtension] = None,
        context: Optional[Mapping[str, str]] = None,
        loader: Optional[TranslationLoader] = None,
    ):
        """Initialize Translator.

        Args:
            bundle: Initial translation data (bundle or its dict shape).
            extension: Optional plural extension.
            context: Initial default context.
            loader: Optional TranslationLoader for load() and reload().
        """
        self.data: Optional[TranslationBundle] = None
        self.extension = extension
        self.loader = loader
        self._global_context: Dict[str, str] = dict(context or {})

        if bundle is not None:
            self.add(bundle)

    @classmethod
    def create(
        cls, bundle: Union[TranslationBundle, Mapping[str, Any]]
    ) -> "Translator":
        """Create a translator holding bundle."""
        return cls(bundle)

    @property
    def context(self) -> Dict[str, str]:
        """Copy of the persistent default context."""
        return dict(self._global_context)

    def add(self, bundle: Union[TranslationBundle, Mapping[str, Any]]) -> None:
        """Merge translation data into the translator.

        Default values overwrite existing keys; context tables are appended
        after the existing ones.

        Args:
            bundle: TranslationBundle or its dict shape.

        Raises:
            ValueError: If a dict bundle has an invalid shape.
        """
        if not isinstance(bundle, TranslationBundle):
            bundle = TranslationBundle.from_dict(bundle)

        if self.data is None:
            self.data = copy.deepcopy(bundle)
        else:
            self.data.merge(bundle)

        logger.info(
            "added_translations",
            value_count=len(bundle.values or {}),
            context_count=len(bundle.contexts or []),
        )

    def load(self) -> None:
        """Load the bundle from the loader and merge it in.

        Raises:
            ValueError: If the translator has no loader, or the loaded
                data is invalid.
            FileNotFoundError: If the loader finds no translation files.
        """
        if self.loader is None:
            logger.error("translator_has_no_loader")
            raise ValueError("Translator has no loader to load translations from")
        self.add(self.loader.load())
        logger.info("loaded_translations_from_loader")

    def reload(self) -> None:
        """Drop translation data and load it again from the loader."""
        self.reset_data()
        self.load()
        logger.info("reloaded_translations")

    def set_context(self, key: str, value: str) -> None:
        """Set an attribute of the persistent default context."""
        self._global_context[key] = value

    def clear_context(self, key: str) -> None:
        """Remove an attribute from the persistent default context."""
        self._global_context.pop(key, None)

    def reset_data(self) -> None:
        """Drop all translation data."""
        self.data = None

    def reset_context(self) -> None:
        """Drop the persistent default context."""
        self._global_context = {}

    def reset(self) -> None:
        """Drop translation data and the default context."""
        self.reset_data()
        self.reset_context()
        logger.info("reset_translator")

    def extend(self, extension: Optional[PluralExtension]) -> None:
        """Register the plural extension (None removes it)."""
        self.extension = extension
        logger.info(
            "registered_plural_extension",
            extension=getattr(extension, "__name__", None),
        )

    def copy(self) -> "Translator":
        """Return an independent translator with the same state."""
        clone = Translator(
            extension=self.extension,
            context=self._global_context,
            loader=self.loader,
        )
        clone.data = copy.deepcopy(self.data)
        return clone

    def translate(
        self,
        key: str,
        num_or_formatting: Optional[NumberOrMapping] = None,
        num_or_formatting_or_context: Optional[NumberOrMapping] = None,
        formatting_or_context: Optional[Mapping[str, Any]] = None,
        *,
        number: Optional[int] = _UNSET,
        formatting: Optional[Mapping[str, Any]] = _UNSET,
        context: Optional[Mapping[str, str]] = _UNSET,
        extension: Optional[PluralExtension] = None,
    ) -> str:
        """Translate key, accepting positional or keyword arguments.

        Positional shapes:
            translate(key, number[, formatting[, context]])
            translate(key, formatting[, context])
            translate(key, None, number[, formatting])
            translate(key, None, formatting[, context])

        Args:
            key: Lookup key (source phrase).
            number: Quantity for plural selection and %n.
            formatting: Values for %{name} tokens.
            context: Active context; defaults to the persistent context.
            extension: Plural extension used for this call only.

        Returns:
            Translated text; the rendered key when no translation applies.

        Raises:
            TypeError: If an argument is neither a number nor a mapping, or
                a slot is given both positionally and by keyword.
        """
        arguments = normalize_arguments(
            num_or_formatting, num_or_formatting_or_context, formatting_or_context
        )
        overrides = {
            "number": number,
            "formatting": formatting,
            "context": context,
        }
        for name, value in overrides.items():
            if value is _UNSET or value is None:
                continue
            if getattr(arguments, name) is not None:
                raise TypeError(f"translate() got multiple values for {name!r}")
            if name == "number" and not _is_number(value):
                raise TypeError(f"Expected an integer number, got {_describe(value)}")
            if name != "number" and not _is_mapping(value):
                raise TypeError(f"Expected a {name} mapping, got {_describe(value)}")
            arguments = arguments._replace(**{name: value})

        return self.translate_text(
            key,
            arguments.number,
            arguments.formatting,
            arguments.context,
            extension=extension,
        )

    def translate_text(
        self,
        key: str,
        number: Optional[int] = None,
        formatting: Optional[Mapping[str, Any]] = None,
        context: Optional[Mapping[str, str]] = None,
        extension: Optional[PluralExtension] = None,
    ) -> str:
        """Translate key from canonical arguments.

        Resolution order:
        1. Context table matching the active context
        2. Default table
        3. The key itself, rendered

        Args:
            key: Lookup key.
            number: Quantity, or None.
            formatting: Named substitutions, or None.
            context: Active context; None uses the persistent context.
            extension: Plural extension for this call; None uses the
                registered one.

        Returns:
            Translated text.
        """
        text = self.find_translation(key, number, formatting, context, extension)
        if text is not None:
            return text

        logger.debug("translation_not_found", key=key, number=number)
        return render_original(key, number, formatting)

    def find_translation(
        self,
        key: str,
        number: Optional[int] = None,
        formatting: Optional[Mapping[str, Any]] = None,
        context: Optional[Mapping[str, str]] = None,
        extension: Optional[PluralExtension] = None,
    ) -> Optional[str]:
        """Like translate_text() but returns None instead of the rendered key."""
        if self.data is None:
            return None

        active_context = self._global_context if context is None else context
        resolver = EntryResolver(extension or self.extension)

        context_table = ContextResolver.resolve_context(
            self.data.contexts, active_context
        )
        if context_table is not None:
            text = resolver.resolve(key, number, formatting, context_table.values)
            if text is not None:
                return text

        return resolver.resolve(key, number, formatting, self.data.values)

    def has_translation(self, key: str) -> bool:
        """Check if key exists in the default table or any context table."""
        if self.data is None:
            return False
        if self.data.values and key in self.data.values:
            return True
        return any(key in table.values for table in self.data.contexts or [])
