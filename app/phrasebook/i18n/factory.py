"""Factory functions for creating i18n components.

Provides a convenience function for initializing translators from the
application settings.
"""

from pathlib import Path
from typing import Mapping, Optional

from phrasebook.configuration import Settings
from phrasebook.configuration import settings as default_settings
from phrasebook.i18n.loader import YAMLTranslationLoader
from phrasebook.i18n.plurals import get_plural_extension
from phrasebook.i18n.translator import Translator
from phrasebook.logging import configure_logging, get_module_logger

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    context: Optional[Mapping[str, str]] = None,
    extension_name: Optional[str] = None,
    use_cache: Optional[bool] = None,
    preload: bool = True,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are taken from ``settings.i18n``. Logging is
    configured from ``settings`` unless structlog is already configured.
    Without a translations directory the translator starts empty and every
    key is rendered as-is until data is added.

    Args:
        translations_dir: Directory of YAML bundles (default: I18N_TRANSLATIONS_DIR)
        context: Initial default context (default: I18N_DEFAULT_CONTEXT)
        extension_name: Bundled plural extension name (default: I18N_PLURAL_EXTENSION)
        use_cache: Whether the loader caches the parsed bundle (default: I18N_USE_CACHE)
        preload: Whether to load the bundle immediately (default: True);
            otherwise call translator.load() later
        settings: Settings instance (default: the module-level singleton)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist or extension_name is unknown

    Usage:
        # Use configured defaults
        translator = create_translator()

        # Russian plurals from a custom directory
        translator = create_translator(
            translations_dir=Path("/srv/locales/ru"),
            extension_name="slavic",
        )

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load()
    """
    settings = settings or default_settings
    configure_logging(
        log_level=settings.LOG_LEVEL,
        is_production=settings.is_production,
    )
    i18n_settings = settings.i18n

    if translations_dir is None and i18n_settings.TRANSLATIONS_DIR:
        translations_dir = Path(i18n_settings.TRANSLATIONS_DIR)
    if context is None:
        context = i18n_settings.DEFAULT_CONTEXT
    if extension_name is None:
        extension_name = i18n_settings.PLURAL_EXTENSION
    if use_cache is None:
        use_cache = i18n_settings.USE_CACHE

    extension = get_plural_extension(extension_name) if extension_name else None

    if translations_dir is None:
        logger.info("translator_created_empty", extension=extension_name)
        return Translator(extension=extension, context=context)

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=use_cache,
    )
    translator = Translator(extension=extension, context=context, loader=loader)

    if preload:
        translator.load()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            extension=extension_name,
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
            extension=extension_name,
        )

    return translator
