"""Translation engine settings."""

from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from phrasebook.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding YAML translation bundles
        I18N_DEFAULT_CONTEXT: JSON object used as the initial default context
            (e.g. '{"gender": "female"}')
        I18N_PLURAL_EXTENSION: Name of a bundled pluralization extension
            (e.g. "slavic")
        I18N_USE_CACHE: Cache parsed bundles in the loader (default: True)

    Example:
        ```python
        from phrasebook.configuration import settings

        translations_dir = settings.i18n.TRANSLATIONS_DIR
        if settings.i18n.PLURAL_EXTENSION:
            # Register the extension...
        ```
    """

    model_config = SettingsConfigDict(env_prefix="I18N_")

    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None,
        description="Directory holding YAML translation bundles",
    )

    DEFAULT_CONTEXT: Dict[str, str] = Field(
        default_factory=dict,
        description="Initial default context applied to new translators",
    )

    PLURAL_EXTENSION: Optional[str] = Field(
        default=None,
        description="Name of a bundled pluralization extension",
    )

    USE_CACHE: bool = Field(
        default=True,
        description="Cache parsed bundles in the loader",
    )

    @field_validator("DEFAULT_CONTEXT", mode="before")
    @classmethod
    def validate_default_context(cls, v: Any) -> Any:
        """Validate the DEFAULT_CONTEXT field."""
        if v is None or not isinstance(v, dict):
            return {}
        return v
