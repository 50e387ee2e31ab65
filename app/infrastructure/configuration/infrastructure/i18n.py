"""Translator infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class TranslatorSettings(InfrastructureSettings):
    """Configuration for the translation index-and-resolution engine.

    Environment Variables:
        I18N_PREFERRED_LOCALE: Default and fallback locale (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding YAML translation records
            (default: app/locales, resolved by the factory)

    Example:
        ```python
        from infrastructure.configuration import settings

        preferred = settings.i18n.preferred_locale
        ```
    """

    preferred_locale: str = Field(
        default="en",
        alias="I18N_PREFERRED_LOCALE",
        description="Locale used when a call omits one, and as fallback",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory with *.yml translation record files",
    )

    @field_validator("preferred_locale")
    @classmethod
    def validate_preferred_locale(cls, v: str) -> str:
        """Reject an empty preferred locale."""
        if not v:
            raise ValueError("I18N_PREFERRED_LOCALE must not be empty")
        return v
