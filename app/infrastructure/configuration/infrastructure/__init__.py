"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import TranslatorSettings

__all__ = [
    "TranslatorSettings",
]
