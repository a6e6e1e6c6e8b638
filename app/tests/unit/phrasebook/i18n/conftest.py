"""Feature-level fixtures for i18n system tests.

Provides translators and translation files for resolution scenarios.
"""

import pytest
import yaml

from phrasebook.i18n import Translator, YAMLTranslationLoader, slavic_plural_extension
from tests.factories.i18n import (
    make_comments_bundle,
    make_gender_bundle,
    make_russian_results_bundle,
)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML bundle files.

    Returns a directory structure like:
    - 01-common.yml
    - 02-profile.yml
    """
    common = make_comments_bundle()
    with open(tmp_path / "01-common.yml", "w", encoding="utf-8") as f:
        yaml.dump(common, f, allow_unicode=True)

    profile = {
        "values": {
            "Hello": "Hello again",
            "Welcome %{name}": "Welcome back, %{name}",
        },
        "contexts": [
            {
                "matches": {"gender": "female"},
                "values": {
                    "%{name} updated their profile": "%{name} updated her profile"
                },
            }
        ],
    }
    with open(tmp_path / "02-profile.yml", "w", encoding="utf-8") as f:
        yaml.dump(profile, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def comments_translator():
    """Translator holding literal and plural-range entries."""
    return Translator.create(make_comments_bundle())


@pytest.fixture
def gender_translator():
    """Translator holding gender context tables."""
    return Translator.create(make_gender_bundle())


@pytest.fixture
def russian_translator():
    """Translator with a dictionary-shaped entry and the Slavic extension."""
    return Translator(make_russian_results_bundle(), extension=slavic_plural_extension)
