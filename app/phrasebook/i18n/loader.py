"""Translation loading interface and implementations.

Defines the contract for supplying translation bundles and provides a
YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from phrasebook.i18n.models import TranslationBundle
from phrasebook.logging import get_module_logger

logger = get_module_logger()

YAML_PATTERNS = ("*.yml", "*.yaml")


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define where bundles come from and how they are parsed.
    """

    @abstractmethod
    def load(self) -> TranslationBundle:
        """Load the translation bundle.

        Returns:
            TranslationBundle with all loaded translations.

        Raises:
            FileNotFoundError: If no translation sources are found.
            ValueError: If translation format is invalid.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML bundle files.

    Every *.yml / *.yaml file in the directory holds one bundle:

        values:
          "Hello": "Bonjour"
        contexts:
          - matches: {gender: female}
            values: {...}

    Files are merged in filename order, so later files override earlier
    default values and append their context tables.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether the merged bundle is kept after the first load.
        cache: Cached bundle, or None.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache the loaded bundle in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Optional[TranslationBundle] = None

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def list_files(self) -> List[Path]:
        """Return the YAML files to load, sorted by name."""
        files = set()
        for pattern in YAML_PATTERNS:
            files.update(self.translations_dir.glob(pattern))
        return sorted(files, key=lambda path: path.name)

    def load(self) -> TranslationBundle:
        """Load and merge every YAML bundle in the directory.

        Returns:
            Merged TranslationBundle.

        Raises:
            FileNotFoundError: If the directory has no YAML files.
            ValueError: If a file fails to parse or has an invalid shape.
        """
        if self.use_cache and self.cache is not None:
            logger.debug("loaded_from_cache")
            return self.cache

        yaml_files = self.list_files()
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found in {self.translations_dir}"
            )

        bundle = TranslationBundle()
        for yaml_file in yaml_files:
            data = self._read_file(yaml_file)
            if data is None:
                logger.warning("empty_translation_file", file=str(yaml_file))
                continue
            try:
                bundle.merge(TranslationBundle.from_dict(data))
            except ValueError as e:
                logger.error(
                    "invalid_translation_bundle", file=str(yaml_file), error=str(e)
                )
                raise ValueError(f"Invalid translation bundle in {yaml_file}: {e}") from e

        logger.info(
            "loaded_translations",
            file_count=len(yaml_files),
            value_count=len(bundle.values or {}),
            context_count=len(bundle.contexts or []),
        )

        if self.use_cache:
            self.cache = bundle

        return bundle

    def _read_file(self, yaml_file: Path) -> Optional[Dict]:
        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

    def clear_cache(self) -> None:
        """Clear the cached bundle."""
        self.cache = None
        logger.info("cleared_translation_cache")
