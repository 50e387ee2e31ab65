"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslatorSettings: Translator settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    locale = settings.i18n.preferred_locale
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import TranslatorSettings

__all__ = ["Settings", "settings", "TranslatorSettings"]
