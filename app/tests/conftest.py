import sys
from pathlib import Path

# Ensure the application root is on sys.path so `phrasebook` imports work
# during collection regardless of how pytest was invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from phrasebook.configuration import Settings  # noqa: E402
from phrasebook.logging import configure_logging  # noqa: E402

configure_logging(force=True)


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* variables so settings fall back to their defaults."""
    for name in (
        "I18N_TRANSLATIONS_DIR",
        "I18N_DEFAULT_CONTEXT",
        "I18N_PLURAL_EXTENSION",
        "I18N_USE_CACHE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_settings(clean_i18n_env):
    """Settings instance built from defaults only."""
    return Settings()
