"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import TranslatorSettings
from infrastructure.i18n.providers import TranslationsProvider, YAMLTranslationsProvider
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_translations_dir() -> Path:
    """Locate the bundled locales directory (app/locales)."""
    # this file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_translator(
    translations_provider: Optional[TranslationsProvider] = None,
    preferred_locale: Optional[str] = None,
    settings: Optional[TranslatorSettings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Without an explicit provider, translation records are read from the YAML
    files in ``settings.translations_dir`` (default: app/locales).

    Args:
        translations_provider: Provider delivering the translation records.
        preferred_locale: Overrides ``settings.preferred_locale``.
        settings: Translator settings (default: read from the environment).

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If the translations directory does not exist

    Usage:
        # Use defaults (app/locales, I18N_PREFERRED_LOCALE)
        translator = create_translator()

        # Records from elsewhere
        translator = create_translator(StaticTranslationsProvider(records), "de")
    """
    settings = settings or TranslatorSettings()

    if translations_provider is None:
        translations_dir = settings.translations_dir or default_translations_dir()
        translations_provider = YAMLTranslationsProvider(translations_dir)

    if preferred_locale is None:
        preferred_locale = settings.preferred_locale

    translator = Translator(translations_provider, preferred_locale)

    logger.info(
        "translator_created",
        provider=type(translations_provider).__name__,
        preferred_locale=translator.preferred_locale,
        ready=translator.is_ready(),
    )
    return translator
